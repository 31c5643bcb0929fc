"""Canonical text writer for parsed metadata."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import math

from dmipy.diagnostics import DMI_UNENCODABLE_VALUE, dmi_error
from dmipy.lexer import FloatValue, IntValue, ListValue, StringValue, Value
from dmipy.model import Header, Metadata, State
from dmipy.parser.grammar import BEGIN_MARKER, END_MARKER, SEPARATOR
from dmipy.parser.key_value import Key


@dataclass(frozen=True, slots=True)
class WriterOptions:
    """Layout knobs for the writer; every choice still parses back."""

    indent: str = "    "
    trailing_newline: bool = True


def format_metadata(metadata: Metadata, options: WriterOptions | None = None) -> str:
    """Render metadata in the canonical `# BEGIN DMI` ... `# END DMI` form."""
    resolved = options or WriterOptions()
    if not resolved.indent or resolved.indent.strip(" \t"):
        raise ValueError("indent must be one or more spaces or tabs")

    lines = [BEGIN_MARKER]
    lines.extend(_header_lines(metadata.header, resolved.indent))
    for state in metadata.states:
        lines.extend(_state_lines(state, resolved.indent))
    lines.append(END_MARKER)

    text = "\n".join(lines)
    return text + "\n" if resolved.trailing_newline else text


def _header_lines(header: Header, indent: str) -> Iterable[str]:
    yield _pair(Key.VERSION, repr(float(header.version)))
    yield indent + _pair(Key.WIDTH, str(header.width))
    yield indent + _pair(Key.HEIGHT, str(header.height))
    yield from _unknown_lines(header.unknown, indent)


def _state_lines(state: State, indent: str) -> Iterable[str]:
    yield _pair(Key.STATE, _string(state.name))
    yield indent + _pair(Key.DIRS, str(int(state.dirs)))
    yield indent + _pair(Key.FRAMES, str(state.frames))
    if state.delays is not None:
        if len(state.delays) < 2:
            # A lone number lexes as a scalar, which `delay` rejects.
            raise dmi_error(
                DMI_UNENCODABLE_VALUE,
                detail=f"`delay` of state `{state.name}` needs at least two values.",
            )
        yield indent + _pair(Key.DELAY, _numbers(state.delays))
    if state.loop_flag is not None:
        yield indent + _pair(Key.LOOP, str(state.loop_flag))
    if state.rewind is not None:
        yield indent + _pair(Key.REWIND, str(state.rewind))
    if state.movement is not None:
        yield indent + _pair(Key.MOVEMENT, str(state.movement))
    if state.hotspot is not None:
        yield indent + _pair(Key.HOTSPOT, _numbers(state.hotspot))
    yield from _unknown_lines(state.unknown, indent)


def _unknown_lines(unknown: Mapping[str, Value] | None, indent: str) -> Iterable[str]:
    if not unknown:
        return
    for name, value in unknown.items():
        yield f"{indent}{name}{SEPARATOR}{_value(value)}"


def _pair(key: Key, text: str) -> str:
    return f"{key.value}{SEPARATOR}{text}"


def _value(value: Value) -> str:
    match value:
        case IntValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return _decimal(number)
        case StringValue(value=text):
            return _string(text)
        case ListValue(values=numbers):
            if len(numbers) < 2:
                raise dmi_error(DMI_UNENCODABLE_VALUE, detail="A list needs at least two values.")
            return _numbers(numbers)
    raise TypeError(f"Unsupported value: {value!r}")


def _string(text: str) -> str:
    if '"' in text or "\n" in text:
        raise dmi_error(DMI_UNENCODABLE_VALUE, detail=f"String {text!r} cannot be quoted.")
    return f'"{text}"'


def _decimal(number: float) -> str:
    """Decimal that keeps its point, so it lexes back as a float."""
    if not math.isfinite(number):
        raise dmi_error(DMI_UNENCODABLE_VALUE, detail=f"`{number}` is not finite.")
    return repr(float(number))


def _numbers(numbers: Iterable[float]) -> str:
    return ",".join(_list_element(number) for number in numbers)


def _list_element(number: float) -> str:
    if not math.isfinite(number):
        raise dmi_error(DMI_UNENCODABLE_VALUE, detail=f"`{number}` is not finite.")
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))
