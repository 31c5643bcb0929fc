"""Text offsets and ranges."""

from dmipy.text.text import LineColumn, TextRange, line_column

__all__ = [
    "LineColumn",
    "TextRange",
    "line_column",
]
