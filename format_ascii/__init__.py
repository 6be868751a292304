"""
format-ascii: aligns box tables drawn in ASCII or Unicode inside Markdown.

Only fenced blocks tagged ``text`` or ``ascii`` are inspected; every other
part of the document is left byte-for-byte unchanged.

CLI Usage:
    format-ascii --check
    format-ascii --write docs/architecture.md

Library Usage:
    from pathlib import Path
    from format_ascii import format_blocks

    content = Path("docs/architecture.md").read_text()
    result = format_blocks(content)
    if result.changed:
        print(result.formatted)
    for warning in result.warnings:
        print(warning)
"""

from .classifier import is_box_line, is_content_line, is_horizontal_border
from .exceptions import BoxFormatError, NestedBoxError, UnrecognizedBorderStyleError
from .fences import find_fenced_blocks
from .formatter import format_block_lines, format_blocks
from .models import BorderStyle, BoxRegion, FencedBlock, FormatResult
from .nesting import has_nested_boxes
from .regions import find_box_regions
from .renderer import format_box_region
from .styles import detect_border_style

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "format_blocks",
    "format_block_lines",
    "format_box_region",
    "find_box_regions",
    "find_fenced_blocks",
    "detect_border_style",
    "has_nested_boxes",
    # Line classification
    "is_box_line",
    "is_content_line",
    "is_horizontal_border",
    # Data models
    "BorderStyle",
    "BoxRegion",
    "FencedBlock",
    "FormatResult",
    # Exceptions
    "BoxFormatError",
    "NestedBoxError",
    "UnrecognizedBorderStyleError",
    # Version
    "__version__",
]
