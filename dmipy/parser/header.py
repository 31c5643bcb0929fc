"""Header block: `version = 4.0` followed by canvas properties."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from dmipy.diagnostics import (
    DMI_EXPECTED_INTRODUCER,
    DMI_KEY_NOT_ALLOWED,
    DMI_MISSING_REQUIRED_FIELD,
    DMI_UNSUPPORTED_VERSION,
    DiagnosticSpec,
    DmiError,
    dmi_error,
)
from dmipy.lexer import Value
from dmipy.model import Header
from dmipy.parser.block import LineReader, read_block
from dmipy.parser.grammar import SUPPORTED_VERSION
from dmipy.parser.key_value import Key, KeyValue, Property, UnknownKeyValue


def assemble_header(
    introducer: KeyValue,
    properties: Iterable[Property],
    *,
    source: str | None = None,
) -> Header:
    """Fold header properties into a `Header`; later duplicates overwrite earlier ones."""
    if not isinstance(introducer, KeyValue) or introducer.key is not Key.VERSION:
        raise _error(DMI_EXPECTED_INTRODUCER, "Expected `version = ...`.", source, introducer)

    version = introducer.value
    if version != SUPPORTED_VERSION:
        raise _error(DMI_UNSUPPORTED_VERSION, f"Got `{version}`.", source, introducer)

    width: int | None = None
    height: int | None = None
    unknown: dict[str, Value] | None = None

    for prop in properties:
        match prop:
            case KeyValue(key=Key.WIDTH):
                width = prop.value
            case KeyValue(key=Key.HEIGHT):
                height = prop.value
            case UnknownKeyValue(name=name, value=value):
                if unknown is None:
                    unknown = {}
                unknown[name] = value
            case _:
                raise _error(
                    DMI_KEY_NOT_ALLOWED,
                    f"`{prop.key.value}` cannot appear in the header.",
                    source,
                    prop,
                )

    if width is None:
        raise _error(DMI_MISSING_REQUIRED_FIELD, "Missing `width`.", source, introducer)
    if height is None:
        raise _error(DMI_MISSING_REQUIRED_FIELD, "Missing `height`.", source, introducer)

    return Header(
        version=version,
        width=width,
        height=height,
        unknown=MappingProxyType(unknown) if unknown is not None else None,
    )


def parse_header(reader: LineReader) -> Header:
    introducer, properties = read_block(reader, Key.VERSION)
    return assemble_header(introducer, properties, source=reader.source)


def _error(spec: DiagnosticSpec, detail: str, source: str | None, prop: Property) -> DmiError:
    return dmi_error(spec, detail=detail, source=source, range=prop.range)
