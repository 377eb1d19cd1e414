"""Highlighting of integers and decimal numbers."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

NUMBER_REGEX = re.compile(r"\b\d+(\.\d+)?\b")


class NumberHighlighter(Highlighter):
    """Paints every standalone number in one style."""

    def __init__(self, style: Style) -> None:
        self.style = style

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return False

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def apply(self, text: str) -> str:
        return NUMBER_REGEX.sub(lambda m: self.style.paint(m.group(0)), text)