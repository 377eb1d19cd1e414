"""Running the highlighter stages over lines of text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tailhue.chunks import apply_without_overwriting_existing_highlighting
from tailhue.highlighters.builder import Highlighters
from tailhue.line_info import LineInfo
from tailhue.types import Highlighter


class HighlightProcessor:
    """Applies the before, main and after stages to each line."""

    def __init__(self, highlighters: Highlighters) -> None:
        self.highlighters = highlighters

    @staticmethod
    def _apply_stage(
        text: str, line_info: LineInfo, stage: Sequence[Highlighter]
    ) -> str:
        for highlighter in stage:
            if highlighter.should_short_circuit(line_info):
                continue
            if highlighter.only_apply_to_segments_not_already_highlighted():
                text = apply_without_overwriting_existing_highlighting(text, highlighter.apply)
            else:
                text = highlighter.apply(text)
        return text

    def highlight_line(self, line: str) -> str:
        """Highlight one line."""
        line_info = LineInfo.from_line(line)
        result = line
        for stage in (self.highlighters.before, self.highlighters.main, self.highlighters.after):
            result = self._apply_stage(result, line_info, stage)
        return result

    def apply(self, lines: Iterable[str]) -> str:
        """Highlight every line and join them with newlines."""
        return "\n".join(self.highlight_line(line) for line in lines)