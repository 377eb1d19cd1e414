"""Highlighting of IPv4 addresses."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

IP_ADDRESS_REGEX = re.compile(r"(\b\d{1,3})(\.)(\d{1,3})(\.)(\d{1,3})(\.)(\d{1,3}\b)")


class Ipv4Highlighter(Highlighter):
    """Paints the octets and dots of dotted-quad addresses."""

    def __init__(self, number: Style, separator: Style) -> None:
        self.number = number
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dots < 3

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        return "".join(
            (self.separator if group % 2 == 0 else self.number).paint(match[group])
            for group in range(1, 8)
        )

    def apply(self, text: str) -> str:
        return IP_ADDRESS_REGEX.sub(self._replace, text)