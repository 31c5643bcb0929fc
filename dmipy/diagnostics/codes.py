"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


DMI_EXPECTED_BEGIN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_BEGIN",
    message="Expected `# BEGIN DMI` followed by a newline at the start of the metadata.",
    hint="The metadata block must open with the exact line `# BEGIN DMI`.",
    category="grammar",
)

DMI_EXPECTED_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_END",
    message="Expected a `state = ` block or `# END DMI`.",
    category="grammar",
)

DMI_TRAILING_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_TRAILING_INPUT",
    message="Unexpected input after `# END DMI`.",
    hint="Only whitespace may follow the terminator line.",
    category="grammar",
)

DMI_EXPECTED_NEWLINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_NEWLINE",
    message="Expected a newline after the key-value pair.",
    category="grammar",
)

DMI_EXPECTED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_KEY",
    message="Expected an alphabetic key.",
    category="grammar",
)

DMI_EXPECTED_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_SEPARATOR",
    message="Expected ` = ` between key and value.",
    hint="Use exactly one space on each side of `=`.",
    category="grammar",
)

DMI_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_VALUE",
    message="Expected a string, integer, decimal or comma-separated list.",
    category="grammar",
)

DMI_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    category="grammar",
)

DMI_EMPTY_LIST_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EMPTY_LIST_ELEMENT",
    message="Expected a decimal after `,` in list.",
    category="grammar",
)

DMI_UNEXPECTED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_UNEXPECTED_INPUT",
    message="Unexpected input after value.",
    category="grammar",
)

DMI_EXPECTED_INTRODUCER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EXPECTED_INTRODUCER",
    message="Block must open with its introducer key.",
    category="grammar",
)

DMI_EMPTY_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_EMPTY_BLOCK",
    message="Block requires at least one indented property line.",
    category="grammar",
)

DMI_INVALID_VALUE_FOR_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_INVALID_VALUE_FOR_KEY",
    message="Unable to validate key -> value pair.",
    category="validation",
)

DMI_INVALID_DIRS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_INVALID_DIRS",
    message="Invalid value for dirs.",
    hint="`dirs` must be 1, 4 or 8.",
    category="validation",
)

DMI_UNSUPPORTED_VERSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_UNSUPPORTED_VERSION",
    message="Unsupported metadata version, only 4.0.",
    category="validation",
)

DMI_MISSING_REQUIRED_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_MISSING_REQUIRED_FIELD",
    message="Required field was not found.",
    category="validation",
)

DMI_INVALID_HOTSPOT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_INVALID_HOTSPOT",
    message="Hotspot information was not length 3.",
    hint="Write the hotspot as `x,y,layer`.",
    category="validation",
)

DMI_KEY_NOT_ALLOWED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_KEY_NOT_ALLOWED",
    message="Key is not allowed in this block.",
    category="validation",
)

DMI_UNENCODABLE_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DMI_UNENCODABLE_VALUE",
    message="Value has no canonical metadata text form.",
    category="writer",
)
