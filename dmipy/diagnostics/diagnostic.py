"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from dmipy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the value lexer, recognizer and assemblers.

    `line`/`column` are 1-based and only set when the source text was known
    at the point of failure. `fragment` is the offending slice of input.
    """

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    line: int | None = None
    column: int | None = None
    fragment: str | None = None
