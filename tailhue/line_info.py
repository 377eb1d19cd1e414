"""Cheap per-line character statistics used to skip highlighters early."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class LineInfo:
    """Counts of the characters that individual highlighters depend on."""

    colons: int = 0
    dashes: int = 0
    dots: int = 0
    double_quotes: int = 0
    equals: int = 0
    left_bracket: int = 0
    right_bracket: int = 0
    slashes: int = 0
    zeros: int = 0
    x: int = 0

    @classmethod
    def from_line(cls, line: str) -> LineInfo:
        """Count the interesting characters of ``line``."""
        counts = Counter(line)
        return cls(
            colons=counts[":"],
            dashes=counts["-"],
            dots=counts["."],
            double_quotes=counts['"'],
            equals=counts["="],
            left_bracket=counts["["],
            right_bracket=counts["]"],
            slashes=counts["/"],
            zeros=counts["0"],
            x=counts["x"] + counts["X"],
        )