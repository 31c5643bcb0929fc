"""Metadata grammar: key-value recognizer, block assemblers, document assembler."""

from dmipy.parser.block import Line, LineReader, read_block
from dmipy.parser.grammar import (
    BEGIN_MARKER,
    END_MARKER,
    SEPARATOR,
    SUPPORTED_VERSION,
)
from dmipy.parser.header import assemble_header, parse_header
from dmipy.parser.key_value import (
    Key,
    KeyValue,
    KnownValue,
    Property,
    UnknownKey,
    UnknownKeyValue,
    parse_key_value,
    recognize_key,
    validate_key_value,
)
from dmipy.parser.metadata import (
    parse_metadata,
    parse_metadata_file,
    parse_metadata_result,
)
from dmipy.parser.result import MetadataParseResult
from dmipy.parser.state import assemble_state, parse_state

__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "SEPARATOR",
    "SUPPORTED_VERSION",
    "Key",
    "KeyValue",
    "KnownValue",
    "Line",
    "LineReader",
    "MetadataParseResult",
    "Property",
    "UnknownKey",
    "UnknownKeyValue",
    "assemble_header",
    "assemble_state",
    "parse_header",
    "parse_key_value",
    "parse_metadata",
    "parse_metadata_file",
    "parse_metadata_result",
    "parse_state",
    "read_block",
    "recognize_key",
    "validate_key_value",
]
