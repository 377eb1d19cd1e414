"""Highlighting of text between quote characters."""

from __future__ import annotations

from tailhue.line_info import LineInfo
from tailhue.theme import RESET, Style
from tailhue.types import Highlighter


class QuoteHighlighter(Highlighter):
    """Colours quoted text, restoring the colour after nested highlighting."""

    def __init__(self, style: Style, quotes_token: str) -> None:
        self.color = style.prefix()
        self.quotes_token = quotes_token

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.double_quotes == 0 or line_info.double_quotes % 2 != 0

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return False

    def apply(self, text: str) -> str:
        output: list[str] = []
        inside_quote = False
        pending = ""

        for char in text:
            if not inside_quote:
                if char == self.quotes_token:
                    output.append(self.color)
                    output.append(char)
                    inside_quote = True
                    pending = ""
                else:
                    output.append(char)
                continue

            if char == self.quotes_token:
                output.append(char)
                output.append(RESET)
                inside_quote = False
                continue

            pending += char
            if pending == RESET:
                output.append(pending)
                output.append(self.color)
                pending = ""
            elif not RESET.startswith(pending):
                output.append(pending)
                pending = ""

        return "".join(output)