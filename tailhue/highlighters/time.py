"""Highlighting of clock times."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

TIME_REGEX = re.compile(
    r"""
    \b
    (?P<T>[T\s])?
    (?P<hours>\d{2})(?P<colon1>:)
    (?P<minutes>\d{2})(?P<colon2>:)
    (?P<seconds>\d{2})
    (?P<frac_sep>[.,:])?(?P<frac_digits>\d+)?
    (?P<tz>Z)?
    """,
    re.VERBOSE,
)


class TimeHighlighter(Highlighter):
    """Paints hours, minutes, seconds, fractions and zone markers."""

    def __init__(self, time: Style, zone: Style, separator: Style) -> None:
        self.time = time
        self.zone = zone
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.colons < 2

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        parts = (
            ("T", self.zone),
            ("hours", self.time),
            ("colon1", self.separator),
            ("minutes", self.time),
            ("colon2", self.separator),
            ("seconds", self.time),
            ("frac_sep", self.separator),
            ("frac_digits", self.time),
            ("tz", self.zone),
        )
        return "".join(
            style.paint(match[name]) for name, style in parts if match[name] is not None
        )

    def apply(self, text: str) -> str:
        return TIME_REGEX.sub(self._replace, text)