"""Highlighting of dates written as YYYY-MM-DD."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

DATE_REGEX = re.compile(
    r"(?P<year>\d{4})(?P<separator1>-)(?P<month>\d{2})(?P<separator2>-)(?P<day>\d{2})"
)


class DateDashHighlighter(Highlighter):
    """Paints the numbers and separators of dash-separated dates."""

    regex: re.Pattern[str] = DATE_REGEX

    def __init__(self, number: Style, separator: Style) -> None:
        self.number = number
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.dashes < 2

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        return "".join(
            (
                self.number.paint(match["year"]),
                self.separator.paint(match["separator1"]),
                self.number.paint(match["month"]),
                self.separator.paint(match["separator2"]),
                self.number.paint(match["day"]),
            )
        )

    def apply(self, text: str) -> str:
        return self.regex.sub(self._replace, text)