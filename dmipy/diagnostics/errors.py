"""The single failure type raised by the metadata parser."""

from __future__ import annotations

from dataclasses import replace

from dmipy.diagnostics.codes import DiagnosticSpec
from dmipy.diagnostics.diagnostic import Diagnostic
from dmipy.diagnostics.report import format_diagnostic
from dmipy.text import TextRange, line_column

_MAX_FRAGMENT = 60


class DmiError(ValueError):
    """Raised for any grammar or validation failure; wraps one `Diagnostic`."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        super().__init__(format_diagnostic(diagnostic))

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def category(self) -> str | None:
        return self.diagnostic.category


def dmi_error(
    spec: DiagnosticSpec,
    *,
    detail: str | None = None,
    source: str | None = None,
    range: TextRange | None = None,
) -> DmiError:
    """Build a `DmiError` from a spec, resolving position and fragment when possible."""
    diagnostic = Diagnostic(
        code=spec.code,
        message=spec.message if detail is None else f"{spec.message} {detail}",
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
    if source is None or range is None:
        return DmiError(replace(diagnostic, range=range))
    return DmiError(_located(diagnostic, source, range))


def locate(error: DmiError, *, source: str, range: TextRange | None) -> DmiError:
    """Copy of `error` pinned to `range` in `source`; unchanged if already positioned."""
    if range is None or error.diagnostic.line is not None:
        return error
    return DmiError(_located(error.diagnostic, source, range))


def _located(diagnostic: Diagnostic, source: str, range: TextRange) -> Diagnostic:
    position = line_column(source, range.start)
    fragment = source[range.start : range.end].split("\n", 1)[0][:_MAX_FRAGMENT]
    return replace(
        diagnostic,
        range=range,
        line=position.line,
        column=position.column,
        fragment=fragment or None,
    )
