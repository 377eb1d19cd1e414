"""Highlighting of ``key=value`` pairs."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

KEY_VALUE_REGEX = re.compile(r"(?P<space_or_start>(^)|\s)(?P<key>\w+\b)(?P<equals>=)")


class KeyValueHighlighter(Highlighter):
    """Paints the key and equals sign of pairs at the start or after whitespace."""

    def __init__(self, key: Style, separator: Style) -> None:
        self.key = key
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.equals < 1

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        return (
            match["space_or_start"]
            + self.key.paint(match["key"])
            + self.separator.paint(match["equals"])
        )

    def apply(self, text: str) -> str:
        return KEY_VALUE_REGEX.sub(self._replace, text)