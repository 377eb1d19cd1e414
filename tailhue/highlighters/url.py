"""Highlighting of HTTP and HTTPS URLs."""

from __future__ import annotations

import re

from tailhue.line_info import LineInfo
from tailhue.theme import Style
from tailhue.types import Highlighter

URL_REGEX = re.compile(
    r"(?P<protocol>http|https)(:)(//)(?P<host>[^:/\n\s]+)"
    r"(?P<path>[/a-zA-Z0-9\-_.]*)?(?P<query>\?[^#\n ]*)?"
)

QUERY_PARAMS_REGEX = re.compile(
    r"(?P<delimiter>[?&])(?P<key>[^=]*)(?P<equal>=)(?P<value>[^&]*)"
)


class UrlHighlighter(Highlighter):
    """Paints protocol, host, path and query parameters of URLs."""

    def __init__(
        self,
        http: Style,
        https: Style,
        host: Style,
        path: Style,
        query_params_key: Style,
        query_params_value: Style,
        symbols: Style,
    ) -> None:
        self.http = http
        self.https = https
        self.host = host
        self.path = path
        self.query_params_key = query_params_key
        self.query_params_value = query_params_value
        self.symbols = symbols

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        return line_info.slashes < 1 or line_info.colons == 0

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        return True

    def _replace_query(self, match: re.Match[str]) -> str:
        return (
            self.symbols.paint(match["delimiter"])
            + self.query_params_key.paint(match["key"])
            + self.symbols.paint(match["equal"])
            + self.query_params_value.paint(match["value"])
        )

    def _replace(self, match: re.Match[str]) -> str:
        protocol = match["protocol"]
        style = {"http": self.http, "https": self.https}.get(protocol, Style())
        parts = [f"{style.paint(protocol)}://", self.host.paint(match["host"])]
        if match["path"] is not None:
            parts.append(self.path.paint(match["path"]))
        if match["query"] is not None:
            parts.append(QUERY_PARAMS_REGEX.sub(self._replace_query, match["query"]))
        return "".join(parts)

    def apply(self, text: str) -> str:
        return URL_REGEX.sub(self._replace, text)