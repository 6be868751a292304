"""Detection of box regions inside a block of lines."""

from __future__ import annotations

from .classifier import is_box_line, is_horizontal_border
from .models import BoxRegion


def find_box_regions(lines: list[str]) -> list[BoxRegion]:
    """Find contiguous line ranges that form ASCII boxes.

    A region starts at a horizontal border, greedily absorbs following border
    and content lines, and ends at the last border absorbed. A lone border
    without a distinct closing border yields no region. Lines outside the
    returned regions are never part of any region.

    Args:
        lines: Lines without terminators.

    Returns:
        list[BoxRegion]: Disjoint regions in document order.

    Examples:
        find_box_regions(["+---+", "| a |", "+---+"])  # [BoxRegion(0, 2)]
        find_box_regions(["+---+", "| no closing border"])  # []
    """
    regions: list[BoxRegion] = []
    i = 0

    while i < len(lines):
        if not is_horizontal_border(lines[i]):
            i += 1
            continue

        start = i
        i += 1
        while i < len(lines) and is_box_line(lines[i]):
            i += 1

        # Walk back to the last horizontal border
        end = i - 1
        while end > start and not is_horizontal_border(lines[end]):
            end -= 1

        if end > start:
            regions.append(BoxRegion(start_line=start, end_line=end))
            i = end + 1
        else:
            i = start + 1

    return regions
