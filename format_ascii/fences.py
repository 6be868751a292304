"""Single-pass scanner for fenced ``text``/``ascii`` blocks."""

from __future__ import annotations

from .constants import CLOSE_FENCE_PATTERN, LINE_PATTERN, LINE_TERMINATORS, OPEN_FENCE_PATTERN
from .models import FencedBlock, ScannerContext, ScannerState


def split_lines(content: str) -> list[str]:
    """Split `content` into lines, keeping each line's terminator.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line, so joining the result
    gives back `content` exactly.

    Examples:
        split_lines("a\\r\\nb")  # ["a\\r\\n", "b"]
    """
    return LINE_PATTERN.findall(content)


def split_terminator(line: str) -> tuple[str, str]:
    """Separate a line from its terminator.

    Examples:
        split_terminator("| a |\\r\\n")  # ("| a |", "\\r\\n")
        split_terminator("last")  # ("last", "")
    """
    for terminator in LINE_TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)], terminator
    return line, ""


def _closing_indent(text: str) -> str | None:
    match = CLOSE_FENCE_PATTERN.match(text)
    return match.group("indent") if match else None


def _try_open_fence(
    ctx: ScannerContext, text: str, line_number: int, last_close: dict[str, int]
) -> bool:
    """Detect the opening fence of a ``text``/``ascii`` block.

    An opening fence is only accepted when a closing fence with the same
    indentation exists further down, so unclosed fences never swallow the
    rest of the document.

    Args:
        ctx: Scanner context to update when a fence opens.
        text: Current line without its terminator.
        line_number: Zero-based index of the line.
        last_close: Last closing-fence line index per exact indentation.

    Returns:
        bool: True when the line opens a block and the context is updated.
    """
    if ctx.state is not ScannerState.OUTSIDE:
        return False

    match = OPEN_FENCE_PATTERN.match(text)
    if not match:
        return False

    indent = match.group("indent")
    if last_close.get(indent, -1) <= line_number:
        return False

    ctx.state = ScannerState.IN_FENCE
    ctx.indent = indent
    ctx.tag = match.group("tag")
    ctx.open_line = line_number
    return True


def _try_close_fence(ctx: ScannerContext, text: str) -> bool:
    """Close the active block when `text` is a fence at the same indentation."""
    if ctx.state is not ScannerState.IN_FENCE:
        return False

    if _closing_indent(text) != ctx.indent:
        return False

    ctx.state = ScannerState.OUTSIDE
    ctx.indent = None
    ctx.tag = None
    ctx.open_line = -1
    return True


def find_fenced_blocks(lines: list[str]) -> list[FencedBlock]:
    """Locate fenced blocks tagged ``text`` or ``ascii``.

    The closing fence must carry exactly the indentation of the opening
    fence; other fences and untagged blocks are ignored. Runs in linear
    time over the lines.

    Args:
        lines: Document lines, with or without terminators.

    Returns:
        list[FencedBlock]: Blocks in document order.

    Examples:
        find_fenced_blocks(split_lines("```text\\n+-+\\n```\\n"))[0].body  # ("+-+\\n",)
    """
    texts = [split_terminator(line)[0] for line in lines]

    last_close: dict[str, int] = {}
    for line_number, text in enumerate(texts):
        indent = _closing_indent(text)
        if indent is not None:
            last_close[indent] = line_number

    blocks: list[FencedBlock] = []
    ctx = ScannerContext()

    for line_number, text in enumerate(texts):
        if ctx.state is ScannerState.IN_FENCE:
            indent, tag, open_line = ctx.indent, ctx.tag, ctx.open_line
            if _try_close_fence(ctx, text):
                blocks.append(
                    FencedBlock(
                        indent=indent,
                        tag=tag,
                        open_line=open_line,
                        close_line=line_number,
                        body=tuple(lines[open_line + 1 : line_number]),
                    )
                )
            continue

        _try_open_fence(ctx, text, line_number, last_close)

    return blocks
