import re

import pytest

from tailhue.highlighters.key_value import KeyValueHighlighter
from tailhue.line_info import LineInfo
from tailhue.theme import Color, Style

KEY = Style().fg(Color.CYAN)
SEPARATOR = Style().fg(Color.WHITE)
ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return ANSI.sub("", text)


@pytest.fixture
def highlighter():
    return KeyValueHighlighter(KEY, SEPARATOR)


def test_pair_at_start(highlighter):
    assert highlighter.apply("a=1") == KEY.paint("a") + SEPARATOR.paint("=") + "1"


def test_pair_after_whitespace(highlighter):
    result = highlighter.apply("user=alice level=debug")
    assert result == (
        KEY.paint("user")
        + SEPARATOR.paint("=")
        + "alice "
        + KEY.paint("level")
        + SEPARATOR.paint("=")
        + "debug"
    )
    assert _strip(result) == "user=alice level=debug"


@pytest.mark.parametrize("text", ["x-y=1", "path/a=b", "= alone"])
def test_key_must_follow_start_or_whitespace(highlighter, text):
    assert highlighter.apply(text) == text


@pytest.mark.parametrize("equals, expected", [(0, True), (1, False)])
def test_short_circuit_on_equals_count(highlighter, equals, expected):
    assert highlighter.should_short_circuit(LineInfo(equals=equals)) is expected