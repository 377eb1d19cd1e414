"""Highlighting of process names with ids, such as ``sshd[42]``."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

PROCESS_REGEX = re.compile(r"(?P<process_name>\([^)]+\)|[\w-]+)\[(?P<process_num>\d+)]")


class ProcessHighlighter(Highlighter):
    """Paints the process name, its brackets and its id."""

    def __init__(self, process_name: Style, bracket: Style, process_num: Style) -> None:
        self.process_name = process_name
        self.bracket = bracket
        self.process_num = process_num

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.left_bracket < 1 or line_info.right_bracket < 1

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace(self, match: re.Match[str]) -> str:
        return (
            self.process_name.paint(match["process_name"])
            + self.bracket.paint("[")
            + self.process_num.paint(match["process_num"])
            + self.bracket.paint("]")
        )

    def apply(self, text: str) -> str:
        return PROCESS_REGEX.sub(self._replace, text)