"""Highlighting of dates written as 20YY/MM/DD."""

from __future__ import annotations

import re

from tailhue.highlighters.date_dash import DateDashHighlighter
from tailhue.line_info import LineInfo

DATE_REGEX = re.compile(
    r"(?P<year>20\d{2})(?P<separator1>/)(?P<month>(0[1-9]|1[0-2]))"
    r"(?P<separator2>/)(?P<day>(0[1-9]|[12][0-9]|3[01]))"
)


class DateSlashHighlighter(DateDashHighlighter):
    """Paints the numbers and separators of slash-separated dates."""

    regex = DATE_REGEX

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes < 2

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def apply(self, text: str) -> str:
        return super().apply(text)