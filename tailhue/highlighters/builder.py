"""Assembling the highlighter stages from a theme and keyword options."""

from __future__ import annotations

from dataclasses import dataclass, field

from tailhue.highlighters.date_dash import DateDashHighlighter
from tailhue.highlighters.date_slash import DateSlashHighlighter
from tailhue.highlighters.date_words import DateWordHighlighter
from tailhue.highlighters.ipv4 import Ipv4Highlighter
from tailhue.highlighters.ipv6 import Ipv6Highlighter
from tailhue.highlighters.key_value import KeyValueHighlighter
from tailhue.highlighters.keyword import KeywordHighlighter
from tailhue.highlighters.number import NumberHighlighter
from tailhue.highlighters.path import PathHighlighter
from tailhue.highlighters.pointer import PointerHighlighter
from tailhue.highlighters.process import ProcessHighlighter
from tailhue.highlighters.quotes import QuoteHighlighter
from tailhue.highlighters.regexp import RegexpHighlighter
from tailhue.highlighters.time import TimeHighlighter
from tailhue.highlighters.url import UrlHighlighter
from tailhue.highlighters.uuid import UuidHighlighter
from tailhue.keywords import consolidate_keywords, extract_all_keywords
from tailhue.theme import (
    Keyword,
    Theme,
    get_boolean_keywords,
    get_rest_keywords,
    get_severity_keywords,
)
from tailhue.types import Highlighter


@dataclass
class KeywordOptions:
    """Keyword choices made on the command line."""

    words_red: list[str] = field(default_factory=list)
    words_green: list[str] = field(default_factory=list)
    words_yellow: list[str] = field(default_factory=list)
    words_blue: list[str] = field(default_factory=list)
    words_magenta: list[str] = field(default_factory=list)
    words_cyan: list[str] = field(default_factory=list)
    disable_keyword_builtins: bool = False
    disable_booleans: bool = False
    disable_severity: bool = False
    disable_rest: bool = False


def _custom_and_builtin_keywords(theme: Theme, options: KeywordOptions) -> list[Keyword]:
    keywords = list(theme.keywords)
    if not options.disable_keyword_builtins:
        if not options.disable_booleans:
            keywords.extend(get_boolean_keywords())
        if not options.disable_severity:
            keywords.extend(get_severity_keywords())
        if not options.disable_rest:
            keywords.extend(get_rest_keywords())
    return keywords


def collect_keywords(theme: Theme, options: KeywordOptions | None = None) -> list[Keyword]:
    """Theme, built-in and command-line keywords, merged by style and border."""
    options = KeywordOptions() if options is None else options
    on_the_fly = extract_all_keywords(
        options.words_red,
        options.words_green,
        options.words_yellow,
        options.words_blue,
        options.words_magenta,
        options.words_cyan,
    )
    return consolidate_keywords([*_custom_and_builtin_keywords(theme, options), *on_the_fly])


def _before(theme: Theme) -> list[Highlighter]:
    stage: list[Highlighter] = []
    if not theme.date.disabled:
        stage.append(
            DateWordHighlighter(theme.date_word.day, theme.date_word.month, theme.date_word.number)
        )
        stage.append(DateDashHighlighter(theme.date.number, theme.date.separator))
        stage.append(DateSlashHighlighter(theme.date.number, theme.date.separator))
    if not theme.url.disabled:
        url = theme.url
        stage.append(
            UrlHighlighter(
                url.http,
                url.https,
                url.host,
                url.path,
                url.query_params_key,
                url.query_params_value,
                url.symbols,
            )
        )
    if not theme.time.disabled:
        stage.append(TimeHighlighter(theme.time.time, theme.time.zone, theme.time.separator))
    if not theme.path.disabled:
        stage.append(PathHighlighter(theme.path.segment, theme.path.separator))
    if not theme.ip.disabled:
        stage.append(Ipv4Highlighter(theme.ip.number, theme.ip.separator))
        stage.append(Ipv6Highlighter(theme.ip.number, theme.ip.letter, theme.ip.separator))
    if not theme.key_value.disabled:
        stage.append(KeyValueHighlighter(theme.key_value.key, theme.key_value.separator))
    if not theme.uuid.disabled:
        stage.append(UuidHighlighter(theme.uuid.number, theme.uuid.letter, theme.uuid.dash))
    if not theme.pointer.disabled:
        pointer = theme.pointer
        stage.append(
            PointerHighlighter(
                pointer.number,
                pointer.letter,
                pointer.separator,
                pointer.separator_token,
                pointer.x,
            )
        )
    if not theme.process.disabled:
        stage.append(
            ProcessHighlighter(theme.process.name, theme.process.separator, theme.process.id)
        )
    return stage


def _main(theme: Theme, options: KeywordOptions) -> list[Highlighter]:
    stage: list[Highlighter] = []
    if not theme.number.disabled:
        stage.append(NumberHighlighter(theme.number.style))
    stage.extend(
        KeywordHighlighter(keyword.words, keyword.style, keyword.border)
        for keyword in collect_keywords(theme, options)
    )
    stage.extend(
        RegexpHighlighter(regexp.regular_expression, regexp.style, regexp.border)
        for regexp in theme.regexps
    )
    return stage


def _after(theme: Theme) -> list[Highlighter]:
    if theme.quotes.disabled:
        return []
    return [QuoteHighlighter(theme.quotes.style, theme.quotes.token)]


@dataclass
class Highlighters:
    """The three highlighting stages, applied in order."""

    before: list[Highlighter] = field(default_factory=list)
    main: list[Highlighter] = field(default_factory=list)
    after: list[Highlighter] = field(default_factory=list)

    @classmethod
    def from_theme(cls, theme: Theme, options: KeywordOptions | None = None) -> Highlighters:
        """Build every enabled highlighter of ``theme``."""
        options = KeywordOptions() if options is None else options
        return cls(before=_before(theme), main=_main(theme, options), after=_after(theme))