import re

import pytest

from tailhue.highlighters.date_dash import DateDashHighlighter
from tailhue.line_info import LineInfo
from tailhue.theme import Color, Style

NUMBER = Style().fg(Color.MAGENTA)
SEPARATOR = Style().fg(Color.BLUE)
ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _strip(text):
    return ANSI.sub("", text)


@pytest.fixture
def highlighter():
    return DateDashHighlighter(NUMBER, SEPARATOR)


def test_paints_each_date_part(highlighter):
    result = highlighter.apply("on 2023-06-24 ok")
    assert result == (
        "on \x1b[35m2023\x1b[0m\x1b[34m-\x1b[0m\x1b[35m06\x1b[0m"
        "\x1b[34m-\x1b[0m\x1b[35m24\x1b[0m ok"
    )


def test_text_survives_highlighting(highlighter):
    text = "from 2021-01-02 to 2022-12-31"
    result = highlighter.apply(text)
    assert _strip(result) == text
    assert result.count(SEPARATOR.prefix()) == 4
    assert result.count(NUMBER.prefix()) == 6


def test_incomplete_date_is_untouched(highlighter):
    text = "version 2023-6-24"
    assert highlighter.apply(text) == text


@pytest.mark.parametrize("dashes, expected", [(0, True), (1, True), (2, False), (5, False)])
def test_short_circuit_on_dash_count(highlighter, dashes, expected):
    assert highlighter.should_short_circuit(LineInfo(dashes=dashes)) is expected


def test_only_plain_segments(highlighter):
    assert highlighter.only_apply_to_segments_not_already_highlighted() is True