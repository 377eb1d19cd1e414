"""Highlighting of UUIDs."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

UUID_REGEX = re.compile(
    r"""
    \b[0-9a-fA-F]{8}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{4}\b
    -
    \b[0-9a-fA-F]{12}\b
    """,
    re.VERBOSE,
)

_DIGITS = frozenset("0123456789")
_HEX_LETTERS = frozenset("abcdefABCDEF")


class UuidHighlighter(Highlighter):
    """Paints the digits, letters and dashes of UUIDs."""

    def __init__(self, number: Style, letter: Style, dash: Style) -> None:
        self.number = number
        self.letter = letter
        self.dash = dash

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dashes < 4

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _paint_char(self, char: str) -> str:
        if char in _DIGITS:
            return self.number.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        if char == "-":
            return self.dash.paint(char)
        return char

    def apply(self, text: str) -> str:
        return UUID_REGEX.sub(lambda m: "".join(map(self._paint_char, m[0])), text)