"""Typed records for parsed DMI metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Mapping

from dmipy.diagnostics import DMI_INVALID_DIRS, dmi_error
from dmipy.lexer import Value


class Dirs(IntEnum):
    """Number of facing directions a state is split into."""

    ONE = 1
    FOUR = 4
    EIGHT = 8

    @classmethod
    def from_int(cls, value: int) -> Dirs:
        try:
            return cls(value)
        except ValueError:
            raise dmi_error(DMI_INVALID_DIRS, detail=f"Got `{value}`.") from None


@dataclass(frozen=True, slots=True)
class Header:
    """Document-level block: format version and canvas size."""

    version: float
    width: int
    height: int
    unknown: Mapping[str, Value] | None = None


@dataclass(frozen=True, slots=True)
class State:
    """One named animation sequence.

    `delays` is kept as written; its length is not checked against `frames`.
    """

    name: str
    dirs: Dirs
    frames: int = 1
    delays: tuple[float, ...] | None = None
    loop_flag: int | None = None
    rewind: int | None = None
    movement: int | None = None
    hotspot: tuple[float, float, float] | None = None
    unknown: Mapping[str, Value] | None = None


@dataclass(frozen=True, slots=True)
class Metadata:
    """Parsed metadata block: one header plus states in input order."""

    header: Header
    states: tuple[State, ...] = ()

    @classmethod
    def load(cls, text: str) -> Metadata:
        from dmipy.parser.metadata import parse_metadata

        return parse_metadata(text)

    @classmethod
    def load_file(cls, path: str | Path) -> Metadata:
        from dmipy.parser.metadata import parse_metadata_file

        return parse_metadata_file(path).unwrap()

    def states_named(self, name: str) -> tuple[State, ...]:
        """All states with this name; duplicates are legal."""
        return tuple(state for state in self.states if state.name == name)
