"""Canonical metadata writer."""

from dmipy.format.writer import WriterOptions, format_metadata

__all__ = [
    "WriterOptions",
    "format_metadata",
]
