"""State block: `state = "<name>"` followed by animation properties."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from dmipy.diagnostics import (
    DMI_EXPECTED_INTRODUCER,
    DMI_INVALID_HOTSPOT,
    DMI_KEY_NOT_ALLOWED,
    DMI_MISSING_REQUIRED_FIELD,
    DiagnosticSpec,
    DmiError,
    dmi_error,
)
from dmipy.lexer import Value
from dmipy.model import Dirs, State
from dmipy.parser.block import LineReader, read_block
from dmipy.parser.key_value import Key, KeyValue, Property, UnknownKeyValue


def assemble_state(
    introducer: KeyValue,
    properties: Iterable[Property],
    *,
    source: str | None = None,
) -> State:
    """Fold state properties into a `State`.

    Last write wins for every field and unknown key. `frames` defaults to 1
    and `delays` is not checked against it.
    """
    if not isinstance(introducer, KeyValue) or introducer.key is not Key.STATE:
        raise _error(DMI_EXPECTED_INTRODUCER, "Expected `state = ...`.", source, introducer)

    dirs: Dirs | None = None
    frames = 1
    delays: tuple[float, ...] | None = None
    loop_flag: int | None = None
    rewind: int | None = None
    movement: int | None = None
    hotspot: tuple[float, float, float] | None = None
    unknown: dict[str, Value] | None = None

    for prop in properties:
        match prop:
            case KeyValue(key=Key.DIRS):
                dirs = prop.value
            case KeyValue(key=Key.FRAMES):
                frames = prop.value
            case KeyValue(key=Key.DELAY):
                delays = prop.value
            case KeyValue(key=Key.LOOP):
                loop_flag = prop.value
            case KeyValue(key=Key.REWIND):
                rewind = prop.value
            case KeyValue(key=Key.MOVEMENT):
                movement = prop.value
            case KeyValue(key=Key.HOTSPOT):
                if len(prop.value) != 3:
                    raise _error(
                        DMI_INVALID_HOTSPOT,
                        f"Got {len(prop.value)} values.",
                        source,
                        prop,
                    )
                x, y, layer = prop.value
                hotspot = (x, y, layer)
            case UnknownKeyValue(name=name, value=value):
                if unknown is None:
                    unknown = {}
                unknown[name] = value
            case _:
                raise _error(
                    DMI_KEY_NOT_ALLOWED,
                    f"`{prop.key.value}` cannot appear in a state block.",
                    source,
                    prop,
                )

    if dirs is None:
        raise _error(
            DMI_MISSING_REQUIRED_FIELD,
            f"Missing `dirs` in state `{introducer.value}`.",
            source,
            introducer,
        )

    return State(
        name=introducer.value,
        dirs=dirs,
        frames=frames,
        delays=delays,
        loop_flag=loop_flag,
        rewind=rewind,
        movement=movement,
        hotspot=hotspot,
        unknown=MappingProxyType(unknown) if unknown is not None else None,
    )


def parse_state(reader: LineReader) -> State:
    introducer, properties = read_block(reader, Key.STATE)
    return assemble_state(introducer, properties, source=reader.source)


def _error(spec: DiagnosticSpec, detail: str, source: str | None, prop: Property) -> DmiError:
    return dmi_error(spec, detail=detail, source=source, range=prop.range)
