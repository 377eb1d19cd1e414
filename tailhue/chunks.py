"""Splitting text into already-highlighted and plain segments."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

RESET_CODE = "\x1b[0m"
ESCAPE_CODE = "\x1b["


@dataclass(frozen=True)
class Chunk:
    """A piece of a line, either carrying ANSI highlighting or not."""

    text: str
    highlighted: bool


def _iter_chunks(text: str) -> Iterator[Chunk]:
    start = 0
    inside_escape = False
    while True:
        needle = RESET_CODE if inside_escape else ESCAPE_CODE
        index = text.find(needle, start)
        if index == -1:
            break
        if inside_escape:
            end = index + len(RESET_CODE)
            yield Chunk(text[start:end], highlighted=True)
            start = end
        else:
            if index != start:
                yield Chunk(text[start:index], highlighted=False)
            start = index
        inside_escape = not inside_escape

    if start != len(text):
        yield Chunk(text[start:], highlighted=inside_escape)


def split_into_chunks(text: str) -> list[Chunk]:
    """Split ``text`` at ANSI escape sequences terminated by a reset code."""
    return list(_iter_chunks(text))


def apply_without_overwriting_existing_highlighting(
    text: str, process_chunk: Callable[[str], str]
) -> str:
    """Run ``process_chunk`` over the plain parts of ``text`` only."""
    return "".join(
        chunk.text if chunk.highlighted else process_chunk(chunk.text)
        for chunk in _iter_chunks(text)
    )