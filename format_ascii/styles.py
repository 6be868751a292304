"""Border dialects and their detection."""

from __future__ import annotations

from dataclasses import replace

from .constants import PLUS_DASH_BORDER
from .exceptions import UnrecognizedBorderStyleError
from .models import BorderStyle

PLAIN_STYLE = BorderStyle(
    name="plain",
    horizontal="-",
    vertical="|",
    top=("+", "+", "+"),
    mid=("+", "+", "+"),
    bottom=("+", "+", "+"),
)

SINGLE_LINE_STYLE = BorderStyle(
    name="single",
    horizontal="─",
    vertical="│",
    top=("┌", "┬", "┐"),
    mid=("├", "┼", "┤"),
    bottom=("└", "┴", "┘"),
)

DOUBLE_LINE_STYLE = BorderStyle(
    name="double",
    horizontal="═",
    vertical="║",
    top=("╔", "╦", "╗"),
    mid=("╠", "╬", "╣"),
    bottom=("╚", "╩", "╝"),
)


def detect_border_style(lines: list[str]) -> BorderStyle:
    """Determine the border dialect of a region from its first line.

    For plain ASCII borders the fill character is ``=`` when the first line
    contains one, otherwise ``-``; the choice applies to the whole region.

    Args:
        lines: Lines of one region, first line being a horizontal border.

    Returns:
        BorderStyle: The glyph set used to render the region.

    Raises:
        UnrecognizedBorderStyleError: If the first line matches no dialect,
            for instance a region opened by an interior or bottom border.

    Examples:
        detect_border_style(["+===+", "| a |", "+===+"]).horizontal  # "="
        detect_border_style(["┌───┐", "│ a │", "└───┘"]).name  # "single"
    """
    first_line = lines[0]

    if PLUS_DASH_BORDER.match(first_line):
        if "=" in first_line:
            return replace(PLAIN_STYLE, horizontal="=")
        return PLAIN_STYLE

    stripped = first_line.lstrip()
    if stripped.startswith("┌"):
        return SINGLE_LINE_STYLE
    if stripped.startswith("╔"):
        return DOUBLE_LINE_STYLE

    raise UnrecognizedBorderStyleError(first_line)
