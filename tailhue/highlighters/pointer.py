"""Highlighting of 32- and 64-bit hexadecimal pointers."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

POINTER_REGEX = re.compile(
    r"""
    \b(?P<prefix>0x)(?P<first_half>[0-9a-fA-F]{8})\b
    |
    \b(?P<prefix64>0x)(?P<first_half64>[0-9a-fA-F]{8})(?P<second_half>[0-9a-fA-F]{8})\b
    """,
    re.VERBOSE | re.IGNORECASE,
)

_DIGITS = frozenset("0123456789")
_HEX_LETTERS = frozenset("abcdefABCDEF")


class PointerHighlighter(Highlighter):
    """Paints pointers; 64-bit ones get a separator between their halves."""

    def __init__(
        self,
        number: Style,
        letter: Style,
        separator: Style,
        separator_token: str,
        x: Style,
    ) -> None:
        self.number = number
        self.letter = letter
        self.separator = separator
        self.separator_token = separator_token
        self.x = x

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.x < 1 and line_info.zeros < 1

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _paint_char(self, char: str) -> str:
        if char in _DIGITS:
            return self.number.paint(char)
        if char in "xX":
            return self.x.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        return char

    def _paint(self, text: str) -> str:
        return "".join(map(self._paint_char, text))

    def _replace(self, match: re.Match[str]) -> str:
        prefix = match["prefix"] or match["prefix64"]
        first_half = match["first_half"] or match["first_half64"]
        output = self._paint(prefix) + self._paint(first_half)
        second_half = match["second_half"]
        if second_half is not None:
            output += self.separator.paint(self.separator_token) + self._paint(second_half)
        return output

    def apply(self, text: str) -> str:
        return POINTER_REGEX.sub(self._replace, text)