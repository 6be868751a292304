"""Data models for format-ascii."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ScannerState(Enum):
    """Scanner states used while looking for fenced blocks.

    Attributes:
        OUTSIDE: Regular Markdown text.
        IN_FENCE: Inside a fenced block tagged ``text`` or ``ascii``.
    """

    OUTSIDE = auto()
    IN_FENCE = auto()


@dataclass
class ScannerContext:
    """Encapsulate scanner state while walking Markdown lines.

    Attributes:
        state: Current scanner state.
        indent: Exact indentation of the opening fence, if any.
        tag: Tag of the opening fence (``text`` or ``ascii``), if any.
        open_line: Zero-based index of the opening fence line.
    """

    state: ScannerState = ScannerState.OUTSIDE
    indent: str | None = None
    tag: str | None = None
    open_line: int = -1


@dataclass(frozen=True)
class FencedBlock:
    """A fenced ``text``/``ascii`` block found in a document.

    Attributes:
        indent: Indentation shared by the opening and closing fences.
        tag: Fence tag.
        open_line: Zero-based index of the opening fence line.
        close_line: Zero-based index of the closing fence line.
        body: Lines between the fences, each with its original terminator.
    """

    indent: str
    tag: str
    open_line: int
    close_line: int
    body: tuple[str, ...]


@dataclass(frozen=True)
class BoxRegion:
    """Inclusive line range of one box, relative to its block body.

    Both ``start_line`` and ``end_line`` point at horizontal borders.
    """

    start_line: int
    end_line: int


class BorderRole(Enum):
    """Position of a horizontal border inside a region."""

    TOP = auto()
    MID = auto()
    BOTTOM = auto()


@dataclass(frozen=True)
class BorderStyle:
    """Glyph set used to render one region.

    Attributes:
        name: Dialect name (``plain``, ``single`` or ``double``).
        horizontal: Fill character for border segments.
        vertical: Separator between cells.
        top: Left edge, junction and right edge of the top border.
        mid: Left edge, junction and right edge of interior borders.
        bottom: Left edge, junction and right edge of the bottom border.
    """

    name: str
    horizontal: str
    vertical: str
    top: tuple[str, str, str]
    mid: tuple[str, str, str]
    bottom: tuple[str, str, str]

    def glyphs(self, role: BorderRole) -> tuple[str, str, str]:
        if role is BorderRole.TOP:
            return self.top
        if role is BorderRole.BOTTOM:
            return self.bottom
        return self.mid


@dataclass
class FormatResult:
    """Outcome of formatting a document.

    Attributes:
        formatted: Document text after formatting.
        changed: Whether any fenced block body differs from the input.
        warnings: Messages for regions that were left untouched.
    """

    formatted: str
    changed: bool = False
    warnings: list[str] = field(default_factory=list)
