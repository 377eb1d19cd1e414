"""Highlighting of user-supplied regular expressions."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter


class RegexpHighlighter(Highlighter):
    """Paints regex matches; with exactly one group only that group is painted."""

    def __init__(self, regular_expression: str, style: Style, border: bool = False) -> None:
        self.regex = re.compile(regular_expression)
        self.style = style
        self.border = border

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return False

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        if self.regex.groups != 1:
            return self.style.paint(match.group(0))
        captured = match.group(1)
        if captured is None:
            return ""
        text = match.string
        return (
            text[match.start() : match.start(1)]
            + self.style.paint(captured)
            + text[match.end(1) : match.end()]
        )

    def apply(self, text: str) -> str:
        return self.regex.sub(self._replace, text)