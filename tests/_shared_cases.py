"""Centralized DMI metadata cases used across parser/writer tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class DmiCase:
    name: str
    source: str
    error_code: str | None = None

    @property
    def should_parse(self) -> bool:
        return self.error_code is None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


VALID_CASES: tuple[DmiCase, ...] = (
    DmiCase(
        name="two_states",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 32
                height = 32
            state = "state1"
                dirs = 4
                frames = 2
                delay = 1.2,1
            state = "state2"
                dirs = 1
                frames = 1
            # END DMI
            """
        ),
    ),
    DmiCase(
        name="every_state_property",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 32
                height = 32
            state = "state1"
                dirs = 4
                frames = 2
                delay = 1.2,1
                movement = 1
                loop = 1
                rewind = 0
                hotspot = 12,13,0
                future = "lmao"
            state = "state2"
                dirs = 1
                frames = 1
            # END DMI
            """
        ),
    ),
    DmiCase(
        name="header_unknown_fields",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 64
                height = 48
                author = "someone"
                scale = 1.5
                layers = 3
                offsets = 1,2.5
            state = "idle"
                dirs = 8
            # END DMI
            """
        ),
    ),
    DmiCase(
        name="header_only",
        source="# BEGIN DMI\nversion = 4.0\n    width = 16\n    height = 16\n# END DMI",
    ),
    DmiCase(
        name="tab_indentation",
        source=(
            "# BEGIN DMI\n"
            "version = 4.0\n"
            "\twidth = 32\n"
            "\theight = 32\n"
            'state = "tabbed"\n'
            "\tdirs = 4\n"
            " \t frames = 3\n"
            "\tdelay = 1,1,2\n"
            "# END DMI\n"
        ),
    ),
    DmiCase(
        name="duplicate_state_names",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 32
                height = 32
            state = "duplicate"
                dirs = 1
            state = "duplicate"
                dirs = 4
                frames = 2
                delay = 1,1
            # END DMI
            """
        ),
    ),
    DmiCase(
        name="empty_state_name",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 32
                height = 32
            state = ""
                dirs = 1
            # END DMI
            """
        ),
    ),
    DmiCase(
        name="trailing_whitespace_after_end",
        source="# BEGIN DMI\nversion = 4.0\n    width = 1\n    height = 1\n# END DMI\n\n \t\r\n",
    ),
    DmiCase(
        name="delays_not_checked_against_frames",
        source=_dedent(
            """
            # BEGIN DMI
            version = 4.0
                width = 32
                height = 32
            state = "bluespace_coffee"
                dirs = 1
                frames = 2
                delay = 1,2,5.4
            # END DMI
            """
        ),
    ),
)


_HEADER = "# BEGIN DMI\nversion = 4.0\n    width = 32\n    height = 32\n"

INVALID_CASES: tuple[DmiCase, ...] = (
    DmiCase(
        name="unsupported_version",
        source="# BEGIN DMI\nversion = 3.0\n    width = 32\n    height = 32\n# END DMI\n",
        error_code="DMI_UNSUPPORTED_VERSION",
    ),
    DmiCase(
        name="integer_version",
        source="# BEGIN DMI\nversion = 4\n    width = 32\n    height = 32\n# END DMI\n",
        error_code="DMI_INVALID_VALUE_FOR_KEY",
    ),
    DmiCase(
        name="missing_begin",
        source="version = 4.0\n    width = 32\n    height = 32\n# END DMI\n",
        error_code="DMI_EXPECTED_BEGIN",
    ),
    DmiCase(
        name="leading_blank_line",
        source="\n" + _HEADER + "# END DMI\n",
        error_code="DMI_EXPECTED_BEGIN",
    ),
    DmiCase(
        name="missing_end",
        source=_HEADER + 'state = "a"\n    dirs = 1\n',
        error_code="DMI_EXPECTED_END",
    ),
    DmiCase(
        name="trailing_garbage",
        source=_HEADER + "# END DMI\nextra\n",
        error_code="DMI_TRAILING_INPUT",
    ),
    DmiCase(
        name="garbage_on_terminator_line",
        source=_HEADER + "# END DMI!\n",
        error_code="DMI_TRAILING_INPUT",
    ),
    DmiCase(
        name="state_without_properties",
        source=_HEADER + 'state = "x"\nstate = "y"\n    dirs = 1\n# END DMI\n',
        error_code="DMI_EMPTY_BLOCK",
    ),
    DmiCase(
        name="header_without_properties",
        source='# BEGIN DMI\nversion = 4.0\nstate = "x"\n    dirs = 1\n# END DMI\n',
        error_code="DMI_EMPTY_BLOCK",
    ),
    DmiCase(
        name="missing_width",
        source="# BEGIN DMI\nversion = 4.0\n    height = 32\n# END DMI\n",
        error_code="DMI_MISSING_REQUIRED_FIELD",
    ),
    DmiCase(
        name="missing_dirs",
        source=_HEADER + 'state = "a"\n    frames = 1\n# END DMI\n',
        error_code="DMI_MISSING_REQUIRED_FIELD",
    ),
    DmiCase(
        name="invalid_dirs",
        source=_HEADER + 'state = "a"\n    dirs = 2\n# END DMI\n',
        error_code="DMI_INVALID_DIRS",
    ),
    DmiCase(
        name="hotspot_wrong_length",
        source=_HEADER + 'state = "a"\n    dirs = 1\n    hotspot = 1,2\n# END DMI\n',
        error_code="DMI_INVALID_HOTSPOT",
    ),
    DmiCase(
        name="width_in_state",
        source=_HEADER + 'state = "a"\n    dirs = 1\n    width = 32\n# END DMI\n',
        error_code="DMI_KEY_NOT_ALLOWED",
    ),
    DmiCase(
        name="dirs_in_header",
        source="# BEGIN DMI\nversion = 4.0\n    width = 32\n    height = 32\n    dirs = 4\n# END DMI\n",
        error_code="DMI_KEY_NOT_ALLOWED",
    ),
    DmiCase(
        name="double_space_separator",
        source="# BEGIN DMI\nversion = 4.0\n    width  = 32\n    height = 32\n# END DMI\n",
        error_code="DMI_EXPECTED_SEPARATOR",
    ),
    DmiCase(
        name="blank_line_between_blocks",
        source=_HEADER + '\nstate = "a"\n    dirs = 1\n# END DMI\n',
        error_code="DMI_EXPECTED_END",
    ),
    DmiCase(
        name="crlf_line_endings",
        source="# BEGIN DMI\r\nversion = 4.0\r\n    width = 32\r\n    height = 32\r\n# END DMI\r\n",
        error_code="DMI_EXPECTED_BEGIN",
    ),
    DmiCase(
        name="empty_list_element",
        source=_HEADER + 'state = "a"\n    dirs = 1\n    delay = 1,,2\n# END DMI\n',
        error_code="DMI_EMPTY_LIST_ELEMENT",
    ),
    DmiCase(
        name="unterminated_state_name",
        source=_HEADER + 'state = "a\n    dirs = 1\n# END DMI\n',
        error_code="DMI_UNTERMINATED_STRING",
    ),
    DmiCase(
        name="unterminated_last_property",
        source=_HEADER + 'state = "a"\n    dirs = 1',
        error_code="DMI_EXPECTED_NEWLINE",
    ),
)

ALL_DMI_CASES: tuple[DmiCase, ...] = VALID_CASES + INVALID_CASES

type CaseName = Literal[
    "two_states",
    "every_state_property",
    "header_unknown_fields",
    "header_only",
    "tab_indentation",
    "duplicate_state_names",
    "empty_state_name",
    "trailing_whitespace_after_end",
    "delays_not_checked_against_frames",
    "unsupported_version",
    "integer_version",
    "missing_begin",
    "leading_blank_line",
    "missing_end",
    "trailing_garbage",
    "garbage_on_terminator_line",
    "state_without_properties",
    "header_without_properties",
    "missing_width",
    "missing_dirs",
    "invalid_dirs",
    "hotspot_wrong_length",
    "width_in_state",
    "dirs_in_header",
    "double_space_separator",
    "blank_line_between_blocks",
    "crlf_line_endings",
    "empty_list_element",
    "unterminated_state_name",
    "unterminated_last_property",
]

CASE_BY_NAME: dict[CaseName, DmiCase] = cast(
    dict[CaseName, DmiCase],
    {case.name: case for case in ALL_DMI_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: DmiCase) -> str:
    return case.name
