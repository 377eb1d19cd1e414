"""The theme as written in the configuration file, before defaults apply."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

_PARSER = "parser"
T = TypeVar("T")


class ThemeError(ValueError):
    """Raised when the configuration file does not describe a valid theme."""


def _join(where: str, name: str) -> str:
    return f"{where}.{name}" if where else name


def _build(cls: type[T], data: Any, where: str) -> T:
    if not isinstance(data, Mapping):
        raise ThemeError(f"{where or 'theme'}: expected a table")
    kwargs = {
        f.name: f.metadata[_PARSER](data[f.name], _join(where, f.name))
        for f in fields(cls)
        if f.name in data
    }
    return cls(**kwargs)


def _parse_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ThemeError(f"{where}: expected a string")
    return value


def _parse_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ThemeError(f"{where}: expected a boolean")
    return value


def _parse_char(value: Any, where: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ThemeError(f"{where}: expected a single character")
    return value


def _parse_words(value: Any, where: str) -> list[str]:
    if not isinstance(value, list):
        raise ThemeError(f"{where}: expected an array")
    return [_parse_str(item, f"{where}[{i}]") for i, item in enumerate(value)]


def _parse_style(value: Any, where: str) -> RawStyle:
    return _build(RawStyle, value, where)


def _table_list(cls: type[T]) -> Callable[[Any, str], list[T]]:
    def parse(value: Any, where: str) -> list[T]:
        if not isinstance(value, list):
            raise ThemeError(f"{where}: expected an array of tables")
        return [_build(cls, item, f"{where}[{i}]") for i, item in enumerate(value)]

    return parse


def _section(cls: type[T]) -> Callable[[Any, str], T]:
    return lambda value, where: _build(cls, value, where)


def _text(default: str = "") -> Any:
    return field(default=default, metadata={_PARSER: _parse_str})


def _flag() -> Any:
    return field(default=False, metadata={_PARSER: _parse_bool})


def _opt_style() -> Any:
    return field(default=None, metadata={_PARSER: _parse_style})


def _opt_char() -> Any:
    return field(default=None, metadata={_PARSER: _parse_char})


@dataclass(frozen=True)
class RawStyle:
    fg: str = _text()
    bg: str = _text()
    bold: bool = _flag()
    faint: bool = _flag()
    italic: bool = _flag()
    underline: bool = _flag()


@dataclass
class RawUuid:
    number: RawStyle | None = _opt_style()
    letter: RawStyle | None = _opt_style()
    dash: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawPointer:
    number: RawStyle | None = _opt_style()
    letter: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    separator_token: str | None = _opt_char()
    x: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawIp:
    number: RawStyle | None = _opt_style()
    letter: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawKeyValue:
    key: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawFilePath:
    segment: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawDate:
    number: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawDateWord:
    day: RawStyle | None = _opt_style()
    month: RawStyle | None = _opt_style()
    number: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawTime:
    time: RawStyle | None = _opt_style()
    zone: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawProcess:
    name: RawStyle | None = _opt_style()
    id: RawStyle | None = _opt_style()
    separator: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawNumber:
    style: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawQuotes:
    style: RawStyle | None = _opt_style()
    token: str | None = _opt_char()
    disabled: bool = _flag()


@dataclass
class RawUrl:
    http: RawStyle | None = _opt_style()
    https: RawStyle | None = _opt_style()
    host: RawStyle | None = _opt_style()
    path: RawStyle | None = _opt_style()
    query_params_key: RawStyle | None = _opt_style()
    query_params_value: RawStyle | None = _opt_style()
    symbols: RawStyle | None = _opt_style()
    disabled: bool = _flag()


@dataclass
class RawKeyword:
    style: RawStyle = field(default_factory=RawStyle, metadata={_PARSER: _parse_style})
    words: list[str] = field(default_factory=list, metadata={_PARSER: _parse_words})
    border: bool = _flag()


@dataclass
class RawRegexp:
    regular_expression: str = _text()
    style: RawStyle = field(default_factory=RawStyle, metadata={_PARSER: _parse_style})
    border: bool = _flag()


def _section_field(cls: type[T]) -> Any:
    return field(default_factory=cls, metadata={_PARSER: _section(cls)})


@dataclass
class RawTheme:
    date: RawDate = _section_field(RawDate)
    date_word: RawDateWord = _section_field(RawDateWord)
    time: RawTime = _section_field(RawTime)
    number: RawNumber = _section_field(RawNumber)
    quotes: RawQuotes = _section_field(RawQuotes)
    uuid: RawUuid = _section_field(RawUuid)
    pointer: RawPointer = _section_field(RawPointer)
    url: RawUrl = _section_field(RawUrl)
    ip: RawIp = _section_field(RawIp)
    key_value: RawKeyValue = _section_field(RawKeyValue)
    path: RawFilePath = _section_field(RawFilePath)
    process: RawProcess = _section_field(RawProcess)
    keywords: list[RawKeyword] | None = field(
        default=None, metadata={_PARSER: _table_list(RawKeyword)}
    )
    regexps: list[RawRegexp] | None = field(
        default=None, metadata={_PARSER: _table_list(RawRegexp)}
    )


def parse_raw_theme(data: Mapping[str, Any]) -> RawTheme:
    """Build a RawTheme from parsed TOML data; unknown keys are ignored."""
    return _build(RawTheme, data, "")