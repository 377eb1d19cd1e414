"""Merging keyword groups and building keywords from command-line words."""

from __future__ import annotations

from collections.abc import Iterable

from tailhue.theme import Color, Keyword, Style


def consolidate_keywords(keywords: Iterable[Keyword]) -> list[Keyword]:
    """Merge keywords sharing a style and border; drop groups with no words."""
    consolidated: list[Keyword] = []
    for keyword in keywords:
        existing = next(
            (
                cons
                for cons in consolidated
                if cons.style == keyword.style and cons.border == keyword.border
            ),
            None,
        )
        if existing is None:
            consolidated.append(
                Keyword(style=keyword.style, words=list(keyword.words), border=keyword.border)
            )
        else:
            existing.words = list(dict.fromkeys([*existing.words, *keyword.words]))
    return [keyword for keyword in consolidated if keyword.words]


def extract_keywords(words: Iterable[str], color: Color) -> list[Keyword]:
    """One keyword per word, drawn in ``color`` without a border."""
    style = Style().fg(color)
    return [Keyword(style=style, words=[word]) for word in words]


def extract_all_keywords(
    words_red: Iterable[str],
    words_green: Iterable[str],
    words_yellow: Iterable[str],
    words_blue: Iterable[str],
    words_magenta: Iterable[str],
    words_cyan: Iterable[str],
) -> list[Keyword]:
    """Keywords for every word given per colour, in colour order."""
    groups = (
        (words_red, Color.RED),
        (words_green, Color.GREEN),
        (words_yellow, Color.YELLOW),
        (words_blue, Color.BLUE),
        (words_magenta, Color.MAGENTA),
        (words_cyan, Color.CYAN),
    )
    return [keyword for words, color in groups for keyword in extract_keywords(words, color)]