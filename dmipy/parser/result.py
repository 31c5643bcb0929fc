"""Discriminated parse carrier for collaborators that prefer not to catch."""

from __future__ import annotations

from dataclasses import dataclass

from dmipy.diagnostics import Diagnostic, DmiError, has_errors
from dmipy.model import Metadata


@dataclass(frozen=True, slots=True)
class MetadataParseResult:
    """Either a complete `Metadata` or the diagnostic that rejected the document.

    A failed parse never carries a partial `Metadata`.
    """

    source_path: str
    source_text: str
    metadata: Metadata | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def ok(self) -> bool:
        return self.metadata is not None

    def unwrap(self) -> Metadata:
        if self.metadata is None:
            raise DmiError(self.diagnostics[0])
        return self.metadata
