"""Highlighting of file system paths."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

PATH_REGEX = re.compile(
    r"""
    (?P<path>
        [~/.][\w./-]*
        /[\w.-]*
    )
    """,
    re.VERBOSE,
)


class PathHighlighter(Highlighter):
    """Paints absolute, home-relative and ``./`` paths character by character."""

    def __init__(self, segment: Style, separator: Style) -> None:
        self.segment = segment
        self.separator = separator

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes == 0

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        path = match[0]
        valid_start = path[0] in "/~" or path.startswith("./")
        if not valid_start or path.startswith("//"):
            return path
        return "".join(
            (self.separator if char == "/" else self.segment).paint(char) for char in path
        )

    def apply(self, text: str) -> str:
        return PATH_REGEX.sub(self._replace, text)