"""Line predicates for box-drawing tables."""

from __future__ import annotations

from .constants import HORIZONTAL_BORDER_PATTERNS, PIPE_LINE, UNICODE_PIPE_LINE


def is_horizontal_border(line: str) -> bool:
    """Return True when `line` is a top, bottom or interior border.

    Recognizes plain ASCII borders (``+---+``, ``+===+``) and Unicode
    single-line and double-line borders. Surrounding whitespace is allowed.

    Examples:
        is_horizontal_border("  +---+---+")  # True
        is_horizontal_border("╠═══╬═══╣")  # True
        is_horizontal_border("| a |")  # False
    """
    return any(pattern.match(line) for pattern in HORIZONTAL_BORDER_PATTERNS)


def is_content_line(line: str) -> bool:
    """Return True when `line` is bounded by vertical separators.

    Examples:
        is_content_line("| a | b |")  # True
        is_content_line("│ cell │")  # True
        is_content_line("| unterminated")  # False
    """
    return bool(PIPE_LINE.match(line) or UNICODE_PIPE_LINE.match(line))


def is_box_line(line: str) -> bool:
    """Return True when `line` belongs to box syntax at all."""
    return is_horizontal_border(line) or is_content_line(line)


def leading_whitespace(line: str) -> str:
    """Return the leading whitespace of `line` verbatim."""
    return line[: len(line) - len(line.lstrip())]
