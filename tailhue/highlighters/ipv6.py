"""Highlighting of IPv6 addresses."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

IPV6_REGEX = re.compile(r"(?:[0-9a-fA-F]{1,4}:{1,2}){3,}[0-9a-fA-F]{1,4}")

_DIGITS = frozenset("0123456789")
_HEX_LETTERS = frozenset("abcdefABCDEF")
_SEPARATORS = frozenset(":.")


class Ipv6Highlighter(Highlighter):
    """Paints digits, hex letters and separators of IPv6 addresses."""

    def __init__(self, number: Style, letter: Style, separator: Style) -> None:
        self.number = number
        self.letter = letter
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.colons < 4

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _paint_char(self, char: str) -> str:
        if char in _DIGITS:
            return self.number.paint(char)
        if char in _HEX_LETTERS:
            return self.letter.paint(char)
        if char in _SEPARATORS:
            return self.separator.paint(char)
        return char

    def apply(self, text: str) -> str:
        return IPV6_REGEX.sub(lambda m: "".join(map(self._paint_char, m[0])), text)