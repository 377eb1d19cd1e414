"""Locating and reading the theme configuration file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path

from tailhue.raw_theme import RawTheme, ThemeError, parse_raw_theme

APP_DIR = "tailhue"
CONFIG_FILE = "config.toml"


def _home(env: Mapping[str, str]) -> str | None:
    return env.get("HOME") or env.get("USERPROFILE")


def _expand_tilde(value: str, env: Mapping[str, str]) -> str:
    if value == "~" or value.startswith("~/"):
        home = _home(env) or str(Path.home())
        return home + value[1:]
    return value


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Where the configuration file lives unless a path is given."""
    env = os.environ if env is None else env
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg is not None:
        config_dir = Path(_expand_tilde(xdg, env))
    else:
        home = _home(env)
        if home is None:
            raise ThemeError("HOME directory not set")
        config_dir = Path(home) / ".config"
    return config_dir / APP_DIR / CONFIG_FILE


def load_theme(path: str | os.PathLike[str] | None = None, env: Mapping[str, str] | None = None) -> RawTheme:
    """Read the theme from ``path`` or the default location, else use defaults."""
    if path is None:
        candidate = default_config_path(env)
        if candidate.exists():
            path = candidate
    if path is None:
        return RawTheme()

    contents = Path(path).read_text(encoding="utf-8")
    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as err:
        raise ThemeError(f"Could not deserialize file:\n\n{err}") from err
    return parse_raw_theme(data)