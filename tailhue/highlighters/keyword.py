"""Highlighting of fixed words."""

from __future__ import annotations

import re
from collections.abc import Iterable

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter


class KeywordHighlighter(Highlighter):
    """Paints whole-word occurrences of the given keywords."""

    def __init__(self, keywords: Iterable[str], style: Style, border: bool) -> None:
        pattern = "|".join(re.escape(word) for word in keywords)
        self.regex = re.compile(rf"\b({pattern})\b")
        self.style = style
        self.border = border

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return False

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        word = match.group(0)
        return self.style.paint(f" {word} " if self.border else word)

    def apply(self, text: str) -> str:
        return self.regex.sub(self._replace, text)