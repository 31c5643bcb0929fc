"""Document assembler: markers, header, states, nothing after the terminator."""

from __future__ import annotations

import logging
from pathlib import Path

from dmipy.diagnostics import (
    DMI_EXPECTED_BEGIN,
    DMI_EXPECTED_END,
    DMI_TRAILING_INPUT,
    DmiError,
    dmi_error,
)
from dmipy.model import Metadata, State
from dmipy.parser.block import LineReader
from dmipy.parser.grammar import (
    BEGIN_MARKER,
    END_MARKER,
    SEPARATOR,
    TRAILING_WHITESPACE,
)
from dmipy.parser.header import parse_header
from dmipy.parser.key_value import Key
from dmipy.parser.result import MetadataParseResult
from dmipy.parser.state import parse_state
from dmipy.text import TextRange

logger = logging.getLogger(__name__)

_STATE_INTRODUCER = Key.STATE.value + SEPARATOR


def parse_metadata(text: str) -> Metadata:
    """Parse a complete metadata block, raising `DmiError` on the first violation."""
    opening = BEGIN_MARKER + "\n"
    if not text.startswith(opening):
        first_line_end = text.find("\n")
        raise dmi_error(
            DMI_EXPECTED_BEGIN,
            source=text,
            range=TextRange(0, len(text) if first_line_end == -1 else first_line_end),
        )

    reader = LineReader(text, len(opening))
    header = parse_header(reader)

    states: list[State] = []
    while True:
        line = reader.peek()
        if line is None:
            raise dmi_error(
                DMI_EXPECTED_END,
                detail="Found end of input.",
                source=text,
                range=TextRange.empty(len(text)),
            )
        if text.startswith(END_MARKER, line.start, line.end):
            break
        if not text.startswith(_STATE_INTRODUCER, line.start, line.end):
            raise dmi_error(DMI_EXPECTED_END, source=text, range=line.range)
        states.append(parse_state(reader))

    _expect_only_whitespace(text, line.start + len(END_MARKER))

    logger.debug("Parsed DMI metadata: %dx%d, %d states", header.width, header.height, len(states))
    return Metadata(header=header, states=tuple(states))


def parse_metadata_result(text: str, *, source_path: str = "<memory>") -> MetadataParseResult:
    """Parse without raising; failures come back as diagnostics."""
    try:
        metadata = parse_metadata(text)
    except DmiError as error:
        logger.debug("Rejected DMI metadata from %s: %s", source_path, error)
        return MetadataParseResult(
            source_path=source_path,
            source_text=text,
            metadata=None,
            diagnostics=(error.diagnostic,),
        )
    return MetadataParseResult(source_path=source_path, source_text=text, metadata=metadata)


def parse_metadata_file(path: str | Path) -> MetadataParseResult:
    """Parse a UTF-8 text file holding an already-extracted metadata block."""
    file_path = Path(path)
    decoded = file_path.read_bytes().decode("utf-8")
    text = decoded.removeprefix("\ufeff")
    return parse_metadata_result(text, source_path=str(file_path).replace("\\", "/"))


def _expect_only_whitespace(text: str, position: int) -> None:
    rest = text[position:]
    stripped = rest.lstrip(TRAILING_WHITESPACE)
    if stripped:
        start = len(text) - len(stripped)
        newline = text.find("\n", start)
        raise dmi_error(
            DMI_TRAILING_INPUT,
            source=text,
            range=TextRange(start, len(text) if newline == -1 else newline),
        )
