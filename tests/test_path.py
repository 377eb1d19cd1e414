import re

import pytest

from tailhue.highlighters.path import PathHighlighter
from tailhue.line_info import LineInfo
from tailhue.theme import Color, Style

SEGMENT = Style().fg(Color.GREEN)
SEPARATOR = Style().fg(Color.YELLOW)
ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return ANSI.sub("", text)


@pytest.fixture
def highlighter():
    return PathHighlighter(SEGMENT, SEPARATOR)


@pytest.mark.parametrize("path", ["/usr/local/bin", "~/projects/app.log", "./build/out"])
def test_paints_every_character(highlighter, path):
    text = f"open {path} now"
    result = highlighter.apply(text)
    assert _strip(result) == text
    assert result.count(SEPARATOR.prefix()) == path.count("/")
    assert result.count(SEGMENT.prefix()) == len(path) - path.count("/")


@pytest.mark.parametrize("text", ["http://example.com", ".hidden/x", "a/b", "//double"])
def test_invalid_starts_are_untouched(highlighter, text):
    assert highlighter.apply(text) == text


@pytest.mark.parametrize("slashes, expected", [(0, True), (1, False)])
def test_short_circuit_on_slash_count(highlighter, slashes, expected):
    assert highlighter.should_short_circuit(LineInfo(slashes=slashes)) is expected