"""Key-value recognizer: `<key> = <value>` with key-specific typing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import re
from typing import Final

from dmipy.diagnostics import (
    DMI_EXPECTED_KEY,
    DMI_EXPECTED_SEPARATOR,
    DMI_INVALID_VALUE_FOR_KEY,
    DMI_UNEXPECTED_INPUT,
    DmiError,
    dmi_error,
    locate,
)
from dmipy.lexer import FloatValue, IntValue, ListValue, StringValue, Value, lex_value
from dmipy.model import Dirs
from dmipy.parser.grammar import SEPARATOR
from dmipy.text import TextRange

_KEY_RE = re.compile(r"[A-Za-z]+")


class Key(StrEnum):
    VERSION = "version"
    WIDTH = "width"
    HEIGHT = "height"
    STATE = "state"
    DIRS = "dirs"
    FRAMES = "frames"
    DELAY = "delay"
    LOOP = "loop"
    REWIND = "rewind"
    MOVEMENT = "movement"
    HOTSPOT = "hotspot"


@dataclass(frozen=True, slots=True)
class UnknownKey:
    """Key token the grammar does not model yet."""

    name: str


type KnownValue = float | int | str | Dirs | tuple[float, ...]


@dataclass(frozen=True, slots=True)
class KeyValue:
    """A known key paired with its coerced value."""

    key: Key
    value: KnownValue
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class UnknownKeyValue:
    """An unrecognized key with its raw, untyped value."""

    name: str
    value: Value
    range: TextRange | None = field(default=None, compare=False, repr=False)


type Property = KeyValue | UnknownKeyValue

_VALUE_SHAPES: Final[dict[Key, type]] = {
    Key.VERSION: FloatValue,
    Key.WIDTH: IntValue,
    Key.HEIGHT: IntValue,
    Key.STATE: StringValue,
    Key.DIRS: IntValue,
    Key.FRAMES: IntValue,
    Key.DELAY: ListValue,
    Key.LOOP: IntValue,
    Key.REWIND: IntValue,
    Key.MOVEMENT: IntValue,
    Key.HOTSPOT: ListValue,
}


def recognize_key(token: str) -> Key | UnknownKey:
    try:
        return Key(token)
    except ValueError:
        return UnknownKey(token)


def validate_key_value(
    key: Key | UnknownKey,
    value: Value,
    *,
    range: TextRange | None = None,
) -> Property:
    """Pair a key with its value, enforcing the one value shape each known key accepts."""
    if isinstance(key, UnknownKey):
        return UnknownKeyValue(key.name, value, range)

    if not isinstance(value, _VALUE_SHAPES[key]):
        raise _invalid_pair(key, value)

    match value:
        case IntValue(value=number) if key is Key.DIRS:
            return KeyValue(key, Dirs.from_int(number), range)
        case IntValue(value=number):
            if number < 0:
                raise _invalid_pair(key, value)
            return KeyValue(key, number, range)
        case FloatValue(value=number):
            return KeyValue(key, number, range)
        case StringValue(value=text):
            return KeyValue(key, text, range)
        case ListValue(values=numbers):
            return KeyValue(key, numbers, range)
    raise _invalid_pair(key, value)


def parse_key_value(source: str, start: int = 0, end: int | None = None) -> Property:
    """Recognize one `<key> = <value>` pair spanning exactly `source[start:end]`."""
    end = len(source) if end is None else end
    line_range = TextRange(start, end)

    key_match = _KEY_RE.match(source, start, end)
    if key_match is None:
        raise dmi_error(DMI_EXPECTED_KEY, source=source, range=line_range)

    position = key_match.end()
    if not source.startswith(SEPARATOR, position, end):
        raise dmi_error(
            DMI_EXPECTED_SEPARATOR,
            source=source,
            range=TextRange(position, end),
        )
    position += len(SEPARATOR)

    value, position = lex_value(source, position, end)
    if position != end:
        raise dmi_error(
            DMI_UNEXPECTED_INPUT,
            source=source,
            range=TextRange(position, end),
        )

    try:
        return validate_key_value(recognize_key(key_match.group()), value, range=line_range)
    except DmiError as error:
        raise locate(error, source=source, range=line_range) from None


def _invalid_pair(key: Key, value: Value) -> DmiError:
    return dmi_error(DMI_INVALID_VALUE_FOR_KEY, detail=f"`{key.value} -> {value!r}`")

