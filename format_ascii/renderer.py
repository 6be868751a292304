"""Rendering of box regions with uniform column widths."""

from __future__ import annotations

from .cells import compute_column_widths, extract_cells
from .classifier import is_content_line, is_horizontal_border, leading_whitespace
from .models import BorderRole, BorderStyle
from .nesting import ensure_flat
from .styles import detect_border_style


def border_role(index: int, line_count: int) -> BorderRole:
    """Classify a border by its position inside a region."""
    if index == 0:
        return BorderRole.TOP
    if index == line_count - 1:
        return BorderRole.BOTTOM
    return BorderRole.MID


def render_border(style: BorderStyle, role: BorderRole, widths: list[int], indent: str = "") -> str:
    """Render a horizontal border for columns of the given widths.

    Examples:
        render_border(PLAIN_STYLE, BorderRole.TOP, [1, 3])  # "+---+-----+"
    """
    left, junction, right = style.glyphs(role)
    segments = [style.horizontal * (width + 2) for width in widths]
    return f"{indent}{left}{junction.join(segments)}{right}"


def render_content(style: BorderStyle, cells: list[str], widths: list[int], indent: str = "") -> str:
    """Render one content line, padding each cell to its column width.

    Missing trailing cells render as empty.

    Examples:
        render_content(PLAIN_STYLE, ["a", "bb"], [2, 2])  # "| a  | bb |"
    """
    padded = []
    for column, width in enumerate(widths):
        text = cells[column] if column < len(cells) else ""
        padded.append(f" {text.ljust(width)} ")
    vertical = style.vertical
    return f"{indent}{vertical}{vertical.join(padded)}{vertical}"


def format_box_region(lines: list[str]) -> list[str]:
    """Re-render a box region with uniform column widths.

    Borders take the top, interior or bottom glyphs of the region's dialect
    according to their position; every line gets the indentation of the
    first line. The result always has one line per input line.

    Args:
        lines: Lines of one region, without terminators. The first and last
            lines are horizontal borders.

    Returns:
        list[str]: Rendered lines. A region made only of borders is returned
            unchanged.

    Raises:
        UnrecognizedBorderStyleError: If the first line matches no dialect.
        NestedBoxError: If content lines disagree on their separator count.

    Examples:
        format_box_region(["+---+", "| a|", "| bb|", "+---+"])
        # ["+----+", "| a  |", "| bb |", "+----+"]
    """
    style = detect_border_style(lines)
    ensure_flat(lines, style.vertical)

    rows: dict[int, list[str]] = {}
    for index, line in enumerate(lines):
        if is_content_line(line):
            rows[index] = extract_cells(line, style.vertical)

    if not rows:
        return list(lines)

    widths = compute_column_widths(list(rows.values()))
    indent = leading_whitespace(lines[0])

    rendered: list[str] = []
    for index, line in enumerate(lines):
        if is_horizontal_border(line):
            role = border_role(index, len(lines))
            rendered.append(render_border(style, role, widths, indent))
        elif index in rows:
            rendered.append(render_content(style, rows[index], widths, indent))
        else:
            rendered.append(line)

    return rendered
