"""Literal pieces of the metadata grammar."""

from typing import Final

BEGIN_MARKER: Final[str] = "# BEGIN DMI"
END_MARKER: Final[str] = "# END DMI"
SEPARATOR: Final[str] = " = "
SUPPORTED_VERSION: Final[float] = 4.0

# Property lines start with one or more of these.
INDENT_CHARS: Final[frozenset[str]] = frozenset({" ", "\t"})
# Characters allowed after the terminator line.
TRAILING_WHITESPACE: Final[str] = " \t\r\n"
