"""Constants used across the format-ascii package."""

from __future__ import annotations

import re

# Horizontal borders: plain ASCII, then Unicode single-line and double-line
PLUS_DASH_BORDER = re.compile(r"^\s*\+[-=+]+\+\s*$")
UNICODE_TOP_BORDER = re.compile(r"^\s*┌[─┬┐]+┐\s*$|^\s*╔[═╦╗]+╗\s*$")
UNICODE_BOTTOM_BORDER = re.compile(r"^\s*└[─┴┘]+┘\s*$|^\s*╚[═╩╝]+╝\s*$")
UNICODE_MID_BORDER = re.compile(r"^\s*├[─┼┤]+┤\s*$|^\s*╠[═╬╣]+╣\s*$")
HORIZONTAL_BORDER_PATTERNS = (
    PLUS_DASH_BORDER,
    UNICODE_TOP_BORDER,
    UNICODE_BOTTOM_BORDER,
    UNICODE_MID_BORDER,
)

# Content lines
PIPE_LINE = re.compile(r"^\s*\|.*\|\s*$")
UNICODE_PIPE_LINE = re.compile(r"^\s*│.*│\s*$|^\s*║.*║\s*$")

# Fenced blocks
FENCE_TAGS = ("text", "ascii")
OPEN_FENCE_PATTERN = re.compile(r"^(?P<indent>[ \t]*)```(?P<tag>text|ascii)[ \t]*$")
CLOSE_FENCE_PATTERN = re.compile(r"^(?P<indent>[ \t]*)```[ \t]*$")

# Lines keep their terminator; `\r\n` must be tried before `\r`.
LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")
LINE_TERMINATORS = ("\r\n", "\n", "\r")

# Files scanned when no explicit paths are given
DEFAULT_INCLUDE_GLOBS = (
    "website/docs/**/*.md",
    "docs/**/*.md",
    "prompts/**/*.md",
    "community/**/*.md",
    "adr/**/*.md",
    "exercises/**/*.md",
)
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdx")

# Limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
