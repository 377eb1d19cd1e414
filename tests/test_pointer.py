import re

import pytest

from tailhue.highlighters.pointer import PointerHighlighter
from tailhue.line_info import LineInfo
from tailhue.theme import Color, Style

NUMBER = Style().fg(Color.BLUE)
LETTER = Style().fg(Color.MAGENTA)
SEPARATOR = Style().fg(Color.WHITE)
X = Style().fg(Color.RED)
ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return ANSI.sub("", text)


@pytest.fixture
def highlighter():
    return PointerHighlighter(NUMBER, LETTER, SEPARATOR, "•", X)


def test_32_bit_pointer(highlighter):
    text = "at 0xdeadbeef"
    result = highlighter.apply(text)
    assert _strip(result) == text
    assert result.startswith("at " + NUMBER.paint("0") + X.paint("x"))
    assert result.count(LETTER.prefix()) == 8
    assert SEPARATOR.prefix() not in result


def test_64_bit_pointer_gets_separator(highlighter):
    result = highlighter.apply("0x00007ffee3b5c8a0")
    assert _strip(result) == "0x00007ffe•e3b5c8a0"
    assert result.count(SEPARATOR.paint("•")) == 1


def test_uppercase_prefix(highlighter):
    result = highlighter.apply("0XDEADBEEF")
    assert X.paint("X") in result
    assert _strip(result) == "0XDEADBEEF"


@pytest.mark.parametrize("text", ["0x1234", "0xdeadbeef1", "0xzzzzzzzz"])
def test_other_lengths_are_untouched(highlighter, text):
    assert highlighter.apply(text) == text


@pytest.mark.parametrize(
    "info, expected",
    [
        (LineInfo(), True),
        (LineInfo(x=1), False),
        (LineInfo(zeros=1), False),
    ],
)
def test_short_circuit(highlighter, info, expected):
    assert highlighter.should_short_circuit(info) is expected