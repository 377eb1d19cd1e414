"""Turning a raw configuration theme into a processed theme with defaults."""

from __future__ import annotations

from typing import TypeVar

from tailhue.raw_theme import RawKeyword, RawRegexp, RawStyle, RawTheme, ThemeError
from tailhue.theme import (
    Color,
    Date,
    DateWord,
    FilePath,
    Ip,
    Keyword,
    KeyValue,
    Number,
    Pointer,
    Process,
    Quotes,
    Regexp,
    Style,
    Theme,
    Time,
    Url,
    Uuid,
)

T = TypeVar("T")

_COLORS = {
    "red": Color.RED,
    "green": Color.GREEN,
    "yellow": Color.YELLOW,
    "blue": Color.BLUE,
    "magenta": Color.MAGENTA,
    "purple": Color.MAGENTA,
    "cyan": Color.CYAN,
    "white": Color.WHITE,
    "black": Color.BLACK,
    "": Color.DEFAULT,
}


def map_color(name: str) -> Color:
    """Look up a colour by name, case-insensitively; '' means the default."""
    try:
        return _COLORS[name.lower()]
    except KeyError:
        raise ThemeError(f"Could not parse config.toml: {name} is not a valid color") from None


def to_style(raw_style: RawStyle) -> Style:
    """Build a terminal style from its configuration description."""
    style = Style().fg(map_color(raw_style.fg)).on(map_color(raw_style.bg))
    if raw_style.bold:
        style = style.bold()
    if raw_style.faint:
        style = style.dimmed()
    if raw_style.italic:
        style = style.italic()
    if raw_style.underline:
        style = style.underline()
    return style


def _style_or(raw: RawStyle | None, default: Style) -> Style:
    return default if raw is None else to_style(raw)


def _or(value: T | None, default: T) -> T:
    return default if value is None else value


def _keywords(raw: list[RawKeyword] | None) -> list[Keyword]:
    return [
        Keyword(style=to_style(k.style), words=list(k.words), border=k.border)
        for k in raw or []
    ]


def _regexps(raw: list[RawRegexp] | None) -> list[Regexp]:
    return [
        Regexp(regular_expression=r.regular_expression, style=to_style(r.style), border=r.border)
        for r in raw or []
    ]


def map_theme(raw: RawTheme) -> Theme:
    """Fill every unset entry of ``raw`` with its default."""
    date, date_word, time = Date(), DateWord(), Time()
    number, url, path = Number(), Url(), FilePath()
    process, ip, key_value = Process(), Ip(), KeyValue()
    uuid, quotes, pointer = Uuid(), Quotes(), Pointer()

    return Theme(
        date=Date(
            number=_style_or(raw.date.number, date.number),
            separator=_style_or(raw.date.separator, date.separator),
            disabled=raw.date.disabled,
        ),
        date_word=DateWord(
            day=_style_or(raw.date_word.day, date_word.day),
            month=_style_or(raw.date_word.month, date_word.month),
            number=_style_or(raw.date_word.number, date_word.number),
            disabled=raw.date_word.disabled,
        ),
        time=Time(
            time=_style_or(raw.time.time, time.time),
            zone=_style_or(raw.time.zone, time.zone),
            separator=_style_or(raw.time.separator, time.separator),
            disabled=raw.time.disabled,
        ),
        number=Number(
            style=_style_or(raw.number.style, number.style),
            disabled=raw.number.disabled,
        ),
        url=Url(
            http=_style_or(raw.url.http, url.http),
            https=_style_or(raw.url.https, url.https),
            host=_style_or(raw.url.host, url.host),
            path=_style_or(raw.url.path, url.path),
            query_params_key=_style_or(raw.url.query_params_key, url.query_params_key),
            query_params_value=_style_or(raw.url.query_params_value, url.query_params_value),
            symbols=_style_or(raw.url.symbols, url.symbols),
            disabled=raw.url.disabled,
        ),
        path=FilePath(
            segment=_style_or(raw.path.segment, path.segment),
            separator=_style_or(raw.path.separator, path.separator),
            disabled=raw.path.disabled,
        ),
        process=Process(
            name=_style_or(raw.process.name, process.name),
            id=_style_or(raw.process.id, process.id),
            separator=_style_or(raw.process.separator, process.separator),
            disabled=raw.process.disabled,
        ),
        ip=Ip(
            number=_style_or(raw.ip.number, ip.number),
            letter=_style_or(raw.ip.letter, ip.letter),
            separator=_style_or(raw.ip.separator, ip.separator),
            disabled=raw.ip.disabled,
        ),
        key_value=KeyValue(
            key=_style_or(raw.key_value.key, key_value.key),
            separator=_style_or(raw.key_value.separator, key_value.separator),
            disabled=raw.key_value.disabled,
        ),
        uuid=Uuid(
            number=_style_or(raw.uuid.number, uuid.number),
            letter=_style_or(raw.uuid.letter, uuid.letter),
            dash=_style_or(raw.uuid.dash, uuid.dash),
            disabled=raw.uuid.disabled,
        ),
        quotes=Quotes(
            style=_style_or(raw.quotes.style, quotes.style),
            token=_or(raw.quotes.token, quotes.token),
            disabled=raw.quotes.disabled,
        ),
        pointer=Pointer(
            number=_style_or(raw.pointer.number, pointer.number),
            letter=_style_or(raw.pointer.letter, pointer.letter),
            separator=_style_or(raw.pointer.separator, pointer.separator),
            separator_token=_or(raw.pointer.separator_token, pointer.separator_token),
            x=_style_or(raw.pointer.x, pointer.x),
            disabled=raw.pointer.disabled,
        ),
        keywords=_keywords(raw.keywords),
        regexps=_regexps(raw.regexps),
    )