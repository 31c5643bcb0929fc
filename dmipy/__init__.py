"""Parser for the text metadata block embedded in BYOND DMI icon files."""

from dmipy.diagnostics import Diagnostic, DmiError
from dmipy.format import WriterOptions, format_metadata
from dmipy.lexer import FloatValue, IntValue, ListValue, StringValue, Value, lex_value
from dmipy.model import Dirs, Header, Metadata, State
from dmipy.parser import (
    Key,
    KeyValue,
    MetadataParseResult,
    UnknownKey,
    UnknownKeyValue,
    parse_key_value,
    parse_metadata,
    parse_metadata_file,
    parse_metadata_result,
)

__all__ = [
    "Diagnostic",
    "Dirs",
    "DmiError",
    "FloatValue",
    "Header",
    "IntValue",
    "Key",
    "KeyValue",
    "ListValue",
    "Metadata",
    "MetadataParseResult",
    "State",
    "StringValue",
    "UnknownKey",
    "UnknownKeyValue",
    "Value",
    "WriterOptions",
    "format_metadata",
    "lex_value",
    "parse_key_value",
    "parse_metadata",
    "parse_metadata_file",
    "parse_metadata_result",
]
