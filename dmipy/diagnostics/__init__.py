"""Diagnostics."""

from dmipy.diagnostics.codes import (
    DMI_EMPTY_BLOCK,
    DMI_EMPTY_LIST_ELEMENT,
    DMI_EXPECTED_BEGIN,
    DMI_EXPECTED_END,
    DMI_EXPECTED_INTRODUCER,
    DMI_EXPECTED_KEY,
    DMI_EXPECTED_NEWLINE,
    DMI_EXPECTED_SEPARATOR,
    DMI_EXPECTED_VALUE,
    DMI_INVALID_DIRS,
    DMI_INVALID_HOTSPOT,
    DMI_INVALID_VALUE_FOR_KEY,
    DMI_KEY_NOT_ALLOWED,
    DMI_MISSING_REQUIRED_FIELD,
    DMI_TRAILING_INPUT,
    DMI_UNENCODABLE_VALUE,
    DMI_UNEXPECTED_INPUT,
    DMI_UNSUPPORTED_VERSION,
    DMI_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from dmipy.diagnostics.diagnostic import Diagnostic, Severity
from dmipy.diagnostics.errors import DmiError, dmi_error, locate
from dmipy.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "DMI_EMPTY_BLOCK",
    "DMI_EMPTY_LIST_ELEMENT",
    "DMI_EXPECTED_BEGIN",
    "DMI_EXPECTED_END",
    "DMI_EXPECTED_INTRODUCER",
    "DMI_EXPECTED_KEY",
    "DMI_EXPECTED_NEWLINE",
    "DMI_EXPECTED_SEPARATOR",
    "DMI_EXPECTED_VALUE",
    "DMI_INVALID_DIRS",
    "DMI_INVALID_HOTSPOT",
    "DMI_INVALID_VALUE_FOR_KEY",
    "DMI_KEY_NOT_ALLOWED",
    "DMI_MISSING_REQUIRED_FIELD",
    "DMI_TRAILING_INPUT",
    "DMI_UNENCODABLE_VALUE",
    "DMI_UNEXPECTED_INPUT",
    "DMI_UNSUPPORTED_VERSION",
    "DMI_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "DmiError",
    "Severity",
    "dmi_error",
    "format_diagnostic",
    "has_errors",
    "locate",
]
