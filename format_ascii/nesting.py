"""Guard against regions that look like they contain nested boxes.

A flat table has the same number of vertical separators on every content
line. An inner box adds separators to some lines only, and splitting those
lines into cells would mangle it. The check is deliberately coarse: a flat
table with a literal separator inside one cell is rejected as well.
"""

from __future__ import annotations

from .classifier import is_horizontal_border
from .exceptions import NestedBoxError


def count_separators(line: str, vertical: str) -> int:
    """Count occurrences of `vertical` in the stripped line."""
    return line.strip().count(vertical)


def has_nested_boxes(lines: list[str], vertical: str) -> bool:
    """Return True when non-border lines disagree on their separator count.

    Examples:
        has_nested_boxes(["+---+", "| a |", "+---+"], "|")  # False
        has_nested_boxes(["+-------+", "| +-+ |", "| | | |", "+-------+"], "|")  # True
    """
    counts = {count_separators(line, vertical) for line in lines if not is_horizontal_border(line)}
    return len(counts) > 1


def ensure_flat(lines: list[str], vertical: str) -> None:
    """Raise `NestedBoxError` when `lines` fail the nested-box check."""
    if not has_nested_boxes(lines, vertical):
        return

    counts: list[int] = []
    for line in lines:
        if is_horizontal_border(line):
            continue
        count = count_separators(line, vertical)
        if count not in counts:
            counts.append(count)
    raise NestedBoxError(vertical, counts)
