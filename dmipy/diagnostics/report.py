"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from dmipy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render `line:column: CODE: message` (position omitted when unknown)."""
    text = f"{diagnostic.code}: {diagnostic.message}"
    if diagnostic.fragment:
        text = f"{text} (at `{diagnostic.fragment}`)"
    if diagnostic.line is not None and diagnostic.column is not None:
        text = f"{diagnostic.line}:{diagnostic.column}: {text}"
    return text
