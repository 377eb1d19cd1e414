"""Highlighting of dates written with day and month names."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

DATE_WORD_REGEX = re.compile(
    r"""
    (?P<day1>\b(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)\b)?
    \s*
    (?P<month>\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\b)
    \s+
    (?P<day2>\b(?:[0-2]?[0-9]|3[0-1])\b)
    """,
    re.VERBOSE,
)


class DateWordHighlighter(Highlighter):
    """Paints dates such as ``Mon Jan 5``; whitespace between parts collapses."""

    def __init__(self, day_name: Style, month_name: Style, day_number: Style) -> None:
        self.day_name = day_name
        self.month_name = month_name
        self.day_number = day_number

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return False

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        day1 = match["day1"]
        prefix = f"{self.day_name.paint(day1)} " if day1 is not None else ""
        return (
            f"{prefix}{self.month_name.paint(match['month'])} "
            f"{self.day_number.paint(match['day2'])}"
        )

    def apply(self, text: str) -> str:
        return DATE_WORD_REGEX.sub(self._replace, text)