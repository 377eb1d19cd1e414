"""Terminal styles and the processed highlighting theme with its defaults."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

RESET = "\x1b[0m"


class Color(enum.Enum):
    """Basic terminal colours; the value is the foreground SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def foreground_code(self) -> int:
        return self.value

    @property
    def background_code(self) -> int:
        return self.value + 10


@dataclass(frozen=True)
class Style:
    """An immutable ANSI text style."""

    foreground: Color | None = None
    background: Color | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def on(self, color: Color) -> Style:
        return replace(self, background=color)

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def _codes(self) -> list[str]:
        flags = (
            (self.is_bold, "1"),
            (self.is_dimmed, "2"),
            (self.is_italic, "3"),
            (self.is_underline, "4"),
        )
        codes = [code for enabled, code in flags if enabled]
        if self.foreground is not None:
            codes.append(str(self.foreground.foreground_code))
        if self.background is not None:
            codes.append(str(self.background.background_code))
        return codes

    def prefix(self) -> str:
        """The escape sequence that switches this style on, or ''."""
        codes = self._codes()
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def paint(self, text: str) -> str:
        """Wrap ``text`` in this style; plain styles leave it unchanged."""
        start = self.prefix()
        if not start:
            return text
        return f"{start}{text}{RESET}"


_BLUE_ITALIC = Style().fg(Color.BLUE).italic()
_MAGENTA_ITALIC = Style().fg(Color.MAGENTA).italic()
_DIMMED_DEFAULT = Style().fg(Color.DEFAULT).dimmed()


@dataclass
class Uuid:
    number: Style = _BLUE_ITALIC
    letter: Style = _MAGENTA_ITALIC
    dash: Style = Style().fg(Color.RED)
    disabled: bool = False


@dataclass
class Pointer:
    number: Style = _BLUE_ITALIC
    letter: Style = _MAGENTA_ITALIC
    separator: Style = Style().dimmed()
    separator_token: str = "•"
    x: Style = Style().fg(Color.RED)
    disabled: bool = False


@dataclass
class Ip:
    number: Style = _BLUE_ITALIC
    letter: Style = _MAGENTA_ITALIC
    separator: Style = Style().fg(Color.RED)
    disabled: bool = False


@dataclass
class KeyValue:
    key: Style = Style().dimmed()
    separator: Style = Style().fg(Color.WHITE)
    disabled: bool = False


@dataclass
class FilePath:
    segment: Style = Style().fg(Color.GREEN).italic()
    separator: Style = Style().fg(Color.YELLOW)
    disabled: bool = False


@dataclass
class Date:
    number: Style = Style().fg(Color.MAGENTA)
    separator: Style = _DIMMED_DEFAULT
    disabled: bool = False


@dataclass
class DateWord:
    day: Style = Style().fg(Color.MAGENTA)
    month: Style = Style().fg(Color.MAGENTA)
    number: Style = Style().fg(Color.MAGENTA)
    disabled: bool = False


@dataclass
class Time:
    time: Style = Style().fg(Color.BLUE)
    zone: Style = Style().fg(Color.RED)
    separator: Style = _DIMMED_DEFAULT
    disabled: bool = False


@dataclass
class Process:
    name: Style = Style().fg(Color.YELLOW)
    id: Style = Style().fg(Color.CYAN)
    separator: Style = Style().fg(Color.RED)
    disabled: bool = False


@dataclass
class Number:
    style: Style = Style().fg(Color.CYAN)
    disabled: bool = False


@dataclass
class Quotes:
    style: Style = Style().fg(Color.YELLOW)
    token: str = '"'
    disabled: bool = False


@dataclass
class Url:
    http: Style = Style().fg(Color.RED).dimmed()
    https: Style = Style().fg(Color.GREEN).dimmed()
    host: Style = Style().fg(Color.BLUE).dimmed()
    path: Style = Style().fg(Color.BLUE)
    query_params_key: Style = Style().fg(Color.MAGENTA)
    query_params_value: Style = Style().fg(Color.CYAN)
    symbols: Style = Style().fg(Color.RED)
    disabled: bool = False


@dataclass
class Keyword:
    style: Style = Style()
    words: list[str] = field(default_factory=list)
    border: bool = False


@dataclass
class Regexp:
    regular_expression: str = ""
    style: Style = Style()
    border: bool = False


@dataclass
class Theme:
    date: Date = field(default_factory=Date)
    date_word: DateWord = field(default_factory=DateWord)
    ip: Ip = field(default_factory=Ip)
    key_value: KeyValue = field(default_factory=KeyValue)
    number: Number = field(default_factory=Number)
    path: FilePath = field(default_factory=FilePath)
    pointer: Pointer = field(default_factory=Pointer)
    process: Process = field(default_factory=Process)
    quotes: Quotes = field(default_factory=Quotes)
    time: Time = field(default_factory=Time)
    url: Url = field(default_factory=Url)
    uuid: Uuid = field(default_factory=Uuid)
    keywords: list[Keyword] = field(default_factory=list)
    regexps: list[Regexp] = field(default_factory=list)


def get_severity_keywords() -> list[Keyword]:
    """Built-in keywords for log severity levels."""
    return [
        Keyword(Style().fg(Color.RED), ["ERROR"]),
        Keyword(Style().fg(Color.YELLOW), ["WARN", "WARNING"]),
        Keyword(Style().fg(Color.WHITE), ["INFO"]),
        Keyword(Style().fg(Color.GREEN), ["DEBUG", "SUCCESS"]),
        Keyword(Style().dimmed(), ["TRACE"]),
    ]


def get_rest_keywords() -> list[Keyword]:
    """Built-in keywords for HTTP verbs, drawn with a border."""
    black = Style().fg(Color.BLACK)
    return [
        Keyword(black.on(Color.GREEN), ["GET", "HEAD"], border=True),
        Keyword(black.on(Color.YELLOW), ["POST"], border=True),
        Keyword(black.on(Color.MAGENTA), ["PUT", "PATCH"], border=True),
        Keyword(black.on(Color.RED), ["DELETE"], border=True),
    ]


def get_boolean_keywords() -> list[Keyword]:
    """Built-in keywords for booleans and null."""
    return [Keyword(Style().fg(Color.RED).italic(), ["null", "true", "false"])]