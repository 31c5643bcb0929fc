"""Value lexer for the right-hand side of `key = value` metadata lines."""

from __future__ import annotations

from dataclasses import dataclass
import re

from dmipy.diagnostics import (
    DMI_EMPTY_LIST_ELEMENT,
    DMI_EXPECTED_VALUE,
    DMI_UNTERMINATED_STRING,
    dmi_error,
)
from dmipy.text import TextRange

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int

    def __repr__(self) -> str:
        return f"Int({self.value})"


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float

    def __repr__(self) -> str:
        return f"Float({self.value})"


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str

    def __repr__(self) -> str:
        return f"String({self.value!r})"


@dataclass(frozen=True, slots=True)
class ListValue:
    """Comma-separated decimals; only produced when at least one comma was present."""

    values: tuple[float, ...]

    def __repr__(self) -> str:
        return f"List({list(self.values)})"


type Value = IntValue | FloatValue | StringValue | ListValue


def lex_value(source: str, start: int = 0, end: int | None = None) -> tuple[Value, int]:
    """Recognize one literal at `start` and return it with the offset just past it.

    `end` bounds the search (normally the end of the current line).
    """
    stop = _line_end(source, start, len(source) if end is None else end)

    if start < stop and source[start] == '"':
        return _lex_string(source, start, stop)

    first = _DECIMAL_RE.match(source, start, stop)
    if first is None:
        raise dmi_error(
            DMI_EXPECTED_VALUE,
            source=source,
            range=TextRange(start, stop),
        )

    if first.end() < stop and source[first.end()] == ",":
        return _lex_list(source, start, float(first.group()), first.end(), stop)

    text = first.group()
    if _INTEGER_RE.fullmatch(text):
        return IntValue(int(text)), first.end()
    return FloatValue(float(text)), first.end()


def _lex_string(source: str, start: int, stop: int) -> tuple[StringValue, int]:
    # No escapes: the literal ends at the next quote on the same line.
    close = source.find('"', start + 1, stop)
    if close == -1:
        raise dmi_error(
            DMI_UNTERMINATED_STRING,
            source=source,
            range=TextRange(start, stop),
        )
    return StringValue(source[start + 1 : close]), close + 1


def _lex_list(
    source: str,
    start: int,
    first: float,
    position: int,
    stop: int,
) -> tuple[ListValue, int]:
    values = [first]
    while position < stop and source[position] == ",":
        element = _DECIMAL_RE.match(source, position + 1, stop)
        if element is None:
            raise dmi_error(
                DMI_EMPTY_LIST_ELEMENT,
                source=source,
                range=TextRange(start, stop),
            )
        values.append(float(element.group()))
        position = element.end()
    return ListValue(tuple(values)), position


def _line_end(source: str, start: int, end: int) -> int:
    newline = source.find("\n", start, end)
    return end if newline == -1 else newline
