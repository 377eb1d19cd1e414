import re

import pytest

from tailhue.highlighters.ipv4 import Ipv4Highlighter
from tailhue.line_info import LineInfo
from tailhue.theme import Color, Style

NUMBER = Style().fg(Color.BLUE)
SEPARATOR = Style().fg(Color.RED)
ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return ANSI.sub("", text)


@pytest.fixture
def highlighter():
    return Ipv4Highlighter(NUMBER, SEPARATOR)


def test_paints_octets_and_dots(highlighter):
    result = highlighter.apply("192.168.0.1")
    assert result == "".join(
        [
            NUMBER.paint("192"),
            SEPARATOR.paint("."),
            NUMBER.paint("168"),
            SEPARATOR.paint("."),
            NUMBER.paint("0"),
            SEPARATOR.paint("."),
            NUMBER.paint("1"),
        ]
    )


def test_text_survives_highlighting(highlighter):
    text = "connect from 10.0.0.254 port 22"
    result = highlighter.apply(text)
    assert _strip(result) == text
    assert result.count(NUMBER.prefix()) == 4
    assert result.count(SEPARATOR.prefix()) == 3


@pytest.mark.parametrize("text", ["1234.1.1.1", "1.2.3", "version 1.2"])
def test_non_addresses_are_untouched(highlighter, text):
    assert highlighter.apply(text) == text


@pytest.mark.parametrize("dots, expected", [(2, True), (3, False)])
def test_short_circuit_on_dot_count(highlighter, dots, expected):
    assert highlighter.should_short_circuit(LineInfo(dots=dots)) is expected


def test_only_plain_segments(highlighter):
    assert highlighter.only_apply_to_segments_not_already_highlighted() is True