"""Line walking shared by the header and state block grammars."""

from __future__ import annotations

from dataclasses import dataclass

from dmipy.diagnostics import (
    DMI_EMPTY_BLOCK,
    DMI_EXPECTED_INTRODUCER,
    DMI_EXPECTED_NEWLINE,
    dmi_error,
)
from dmipy.parser.grammar import INDENT_CHARS
from dmipy.parser.key_value import Key, KeyValue, Property, parse_key_value
from dmipy.text import TextRange


@dataclass(frozen=True, slots=True)
class Line:
    """One line of source; `end` excludes the `\\n`."""

    start: int
    end: int
    terminated: bool

    @property
    def next_start(self) -> int:
        return self.end + 1 if self.terminated else self.end

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


class LineReader:
    """Forward-only cursor over `\\n`-separated lines of metadata text."""

    def __init__(self, source: str, position: int = 0) -> None:
        self._source = source
        self._position = position

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def peek(self) -> Line | None:
        if self.is_eof:
            return None
        newline = self._source.find("\n", self._position)
        if newline == -1:
            return Line(self._position, len(self._source), terminated=False)
        return Line(self._position, newline, terminated=True)

    def advance(self, line: Line) -> None:
        self._position = line.next_start

    def is_indented(self, line: Line) -> bool:
        return line.start < line.end and self._source[line.start] in INDENT_CHARS

    def indent_end(self, line: Line) -> int:
        index = line.start
        while index < line.end and self._source[index] in INDENT_CHARS:
            index += 1
        return index


def read_block(reader: LineReader, introducer: Key) -> tuple[KeyValue, list[Property]]:
    """Consume an introducer line and the indented property lines that follow it.

    The property run ends at the first line that does not start with indentation.
    """
    source = reader.source
    line = reader.peek()
    if line is None:
        raise dmi_error(
            DMI_EXPECTED_INTRODUCER,
            detail=f"Expected `{introducer.value} = ...`, found end of input.",
            source=source,
            range=TextRange.empty(reader.position),
        )

    head = parse_key_value(source, line.start, line.end)
    if not isinstance(head, KeyValue) or head.key is not introducer:
        raise dmi_error(
            DMI_EXPECTED_INTRODUCER,
            detail=f"Expected `{introducer.value} = ...`.",
            source=source,
            range=line.range,
        )
    _expect_newline(source, line)
    reader.advance(line)

    properties: list[Property] = []
    while (line := reader.peek()) is not None and reader.is_indented(line):
        properties.append(parse_key_value(source, reader.indent_end(line), line.end))
        _expect_newline(source, line)
        reader.advance(line)

    if not properties:
        raise dmi_error(
            DMI_EMPTY_BLOCK,
            detail=f"`{introducer.value}` block has no properties.",
            source=source,
            range=head.range,
        )
    return head, properties


def _expect_newline(source: str, line: Line) -> None:
    if not line.terminated:
        raise dmi_error(
            DMI_EXPECTED_NEWLINE,
            source=source,
            range=TextRange.empty(line.end),
        )
