"""Package-specific exception types."""

from __future__ import annotations


class BoxFormatError(ValueError):
    """Base class for regions that cannot be safely reformatted.

    The driver turns these into warnings and leaves the region untouched.
    """


class UnrecognizedBorderStyleError(BoxFormatError):
    """Raised when the first line of a region matches no border dialect.

    Args:
        line: The offending first line.
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"unrecognized border style {line.strip()!r}")


class NestedBoxError(BoxFormatError):
    """Raised when content lines disagree on their separator count.

    Args:
        vertical: Separator glyph that was counted.
        counts: Distinct separator counts observed, in order of appearance.
    """

    def __init__(self, vertical: str, counts: list[int]):
        self.vertical = vertical
        self.counts = counts
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        found = ", ".join(str(count) for count in self.counts)
        return f"inconsistent {self.vertical!r} counts ({found}); looks like a nested box"
