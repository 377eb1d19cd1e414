"""Shared types: exit codes, configuration and the highlighter interface."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tailhue.line_info import LineInfo


class ExitCode(enum.IntEnum):
    """Process exit codes used when configuration fails."""

    OK = 0
    GENERAL_ERROR = 1
    MISUSE_SHELL_BUILTIN = 2


class ConfigError(Exception):
    """Raised when the command line does not yield a usable configuration."""

    def __init__(self, exit_code: ExitCode, message: str) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.message = message


class Highlighter(ABC):
    """Something that adds ANSI highlighting to a line of text."""

    @abstractmethod
    def should_short_circuit(self, line_info: LineInfo) -> bool:
        """Return True when the line cannot contain anything to highlight."""

    @abstractmethod
    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        """Return True to leave already highlighted segments untouched."""

    @abstractmethod
    def apply(self, text: str) -> str:
        """Return ``text`` with highlighting applied."""


@dataclass(frozen=True)
class FileInput:
    path: str
    line_count: int


@dataclass(frozen=True)
class FolderInput:
    folder_name: str
    file_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CommandInput:
    command: str


@dataclass(frozen=True)
class StdinInput:
    pass


Input = FileInput | FolderInput | CommandInput | StdinInput


class Output(enum.Enum):
    TEMP_FILE = "temp_file"
    STDOUT = "stdout"
    SUPPRESS = "suppress"


@dataclass(frozen=True)
class Config:
    input: Input
    output: Output
    follow: bool = False
    start_at_end: bool = False