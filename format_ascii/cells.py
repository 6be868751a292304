"""Cell extraction and column width analysis."""

from __future__ import annotations


def extract_cells(line: str, vertical: str) -> list[str]:
    """Split a content line into trimmed cells.

    Exactly one leading and one trailing separator are removed from the
    stripped line before splitting on `vertical`.

    Examples:
        extract_cells("| foo | bar |", "|")  # ["foo", "bar"]
        extract_cells("  │  x │", "│")  # ["x"]
    """
    trimmed = line.strip()
    inner = trimmed[len(vertical) : len(trimmed) - len(vertical)]
    return [cell.strip() for cell in inner.split(vertical)]


def compute_column_widths(rows: list[list[str]]) -> list[int]:
    """Compute the width of every column across `rows`.

    The column count is that of the widest row; missing cells count as
    empty. Every width is at least 1.

    Examples:
        compute_column_widths([["a", "bbb"], ["cc"]])  # [2, 3]
        compute_column_widths([[""]])  # [1]
    """
    column_count = max((len(cells) for cells in rows), default=0)
    widths = [1] * column_count
    for cells in rows:
        for column, cell in enumerate(cells):
            widths[column] = max(widths[column], len(cell))
    return widths
