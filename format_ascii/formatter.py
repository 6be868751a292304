"""Formatting of ASCII boxes inside fenced Markdown blocks."""

from __future__ import annotations

from pathlib import Path

from .exceptions import BoxFormatError
from .fences import find_fenced_blocks, split_lines, split_terminator
from .filesystem import safe_read
from .models import FormatResult
from .regions import find_box_regions
from .renderer import format_box_region


def format_block_lines(body: list[str]) -> tuple[list[str], list[str]]:
    """Format every box region in the body of one fenced block.

    Regions that cannot be safely reformatted keep their original lines and
    produce a warning naming their one-based line range within the body.
    Each rendered line reuses the terminator of the line it replaces.

    Args:
        body: Block body lines, each with its terminator.

    Returns:
        tuple[list[str], list[str]]: New body lines and warnings.

    Examples:
        format_block_lines(["+---+\\n", "| hi|\\n", "+---+\\n"])
        # (["+----+\\n", "| hi |\\n", "+----+\\n"], [])
    """
    texts: list[str] = []
    endings: list[str] = []
    for line in body:
        text, ending = split_terminator(line)
        texts.append(text)
        endings.append(ending)

    regions = find_box_regions(texts)
    if not regions:
        return list(body), []

    warnings: list[str] = []
    new_body: list[str] = []
    cursor = 0

    for region in regions:
        new_body.extend(body[cursor : region.start_line])
        original = body[region.start_line : region.end_line + 1]

        try:
            rendered = format_box_region(texts[region.start_line : region.end_line + 1])
        except BoxFormatError as error:
            start, end = region.start_line + 1, region.end_line + 1
            warnings.append(f"Could not parse box at lines {start}-{end}: {error}")
            new_body.extend(original)
        else:
            region_endings = endings[region.start_line : region.end_line + 1]
            new_body.extend(
                f"{text}{ending}" for text, ending in zip(rendered, region_endings)
            )

        cursor = region.end_line + 1

    new_body.extend(body[cursor:])
    return new_body, warnings


def format_blocks(content: str) -> FormatResult:
    """Format all ASCII boxes inside ``text``/``ascii`` fenced blocks.

    Text outside those blocks, and lines inside them that do not belong to
    a reformattable box, are returned byte-for-byte.

    Args:
        content: Markdown document.

    Returns:
        FormatResult: Formatted document, whether any block changed, and
            warnings for regions left untouched.

    Examples:
        format_blocks("```text\\n+---+\\n| hi|\\n+---+\\n```\\n").changed  # True
    """
    lines = split_lines(content)
    output: list[str] = []
    warnings: list[str] = []
    changed = False
    cursor = 0

    for block in find_fenced_blocks(lines):
        body_start = block.open_line + 1
        output.extend(lines[cursor:body_start])

        new_body, block_warnings = format_block_lines(list(block.body))
        warnings.extend(block_warnings)
        if new_body != list(block.body):
            changed = True
        output.extend(new_body)

        cursor = block.close_line

    output.extend(lines[cursor:])
    return FormatResult(formatted="".join(output), changed=changed, warnings=warnings)


class FormatFileError(Exception):
    """Raised when a Markdown file cannot be read for formatting."""


def format_file(filepath: Path) -> tuple[str, FormatResult]:
    """Read a Markdown file and format its ASCII boxes.

    Args:
        filepath: Path to the Markdown file.

    Returns:
        tuple[str, FormatResult]: Original content and formatting result.

    Raises:
        FormatFileError: If the file cannot be read or is not valid UTF-8.

    Examples:
        original, result = format_file(Path("docs/architecture.md"))
    """
    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise FormatFileError(error_message) from error
    except IOError as error:
        raise FormatFileError(str(error)) from error

    return content, format_blocks(content)
