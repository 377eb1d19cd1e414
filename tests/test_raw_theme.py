import tomllib

import pytest

from tailhue.raw_theme import (
    RawDate,
    RawKeyword,
    RawRegexp,
    RawStyle,
    RawTheme,
    ThemeError,
    parse_raw_theme,
)


def test_empty_document_gives_defaults():
    theme = parse_raw_theme({})
    assert theme == RawTheme()
    assert theme.keywords is None
    assert theme.regexps is None
    assert theme.date == RawDate()
    assert theme.date.number is None


def test_section_style_is_parsed():
    text = """
[date]
number = { fg = "red", bold = true }
disabled = true
"""
    theme = parse_raw_theme(tomllib.loads(text))
    assert theme.date.number == RawStyle(fg="red", bold=True)
    assert theme.date.separator is None
    assert theme.date.disabled is True


def test_keywords_and_regexps():
    text = """
[[keywords]]
words = ["alpha", "beta"]
style = { fg = "cyan" }
border = true

[[keywords]]
words = ["gamma"]

[[regexps]]
regular_expression = 'id=(\\d+)'
style = { fg = "green", underline = true }
"""
    theme = parse_raw_theme(tomllib.loads(text))
    assert theme.keywords == [
        RawKeyword(style=RawStyle(fg="cyan"), words=["alpha", "beta"], border=True),
        RawKeyword(style=RawStyle(), words=["gamma"], border=False),
    ]
    assert theme.regexps == [
        RawRegexp(
            regular_expression="id=(\\d+)",
            style=RawStyle(fg="green", underline=True),
        )
    ]


def test_char_fields():
    theme = parse_raw_theme({"quotes": {"token": "'"}, "pointer": {"separator_token": "-"}})
    assert theme.quotes.token == "'"
    assert theme.pointer.separator_token == "-"


def test_unknown_keys_are_ignored():
    theme = parse_raw_theme({"unknown": 1, "date": {"other": "x"}})
    assert theme == RawTheme()


@pytest.mark.parametrize(
    "data",
    [
        {"date": {"disabled": "yes"}},
        {"date": {"number": {"fg": 3}}},
        {"date": 5},
        {"quotes": {"token": "ab"}},
        {"keywords": {"words": ["a"]}},
        {"keywords": [{"words": "a"}]},
        {"keywords": [{"words": [1]}]},
    ],
)
def test_invalid_values_raise(data):
    with pytest.raises(ThemeError):
        parse_raw_theme(data)


def test_error_names_the_field():
    with pytest.raises(ThemeError, match=r"date\.number\.fg"):
        parse_raw_theme({"date": {"number": {"fg": 3}}})


def test_non_mapping_document_raises():
    with pytest.raises(ThemeError):
        parse_raw_theme(["not", "a", "table"])