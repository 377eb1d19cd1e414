"""Destinations for highlighted lines."""

from __future__ import annotations

import random
import sys
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, TextIO

from tailhue.theme import Color, Style

_YELLOW = Style().fg(Color.YELLOW)


class LineWriter(ABC):
    """Accepts highlighted lines one at a time."""

    @abstractmethod
    async def write_line(self, line: str) -> None:
        """Write ``line`` followed by a newline."""


class NoWriter(LineWriter):
    """Discards everything."""

    async def write_line(self, line: str) -> None:
        return None


class StdoutWriter(LineWriter):
    """Prints lines to standard output."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    async def write_line(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout, flush=True)


class TempFileWriter(LineWriter):
    """Writes lines to a file in a private temporary directory."""

    def __init__(
        self, directory: tempfile.TemporaryDirectory[str], path: Path, handle: IO[str]
    ) -> None:
        self._directory = directory
        self._handle = handle
        self.path = str(path)

    @classmethod
    def create(cls) -> TempFileWriter:
        """Create the temporary directory and the file inside it."""
        directory = tempfile.TemporaryDirectory()
        path = Path(directory.name) / f"tailhue.temp.{random.getrandbits(32)}"
        handle = path.open("w", encoding="utf-8")
        return cls(directory, path, handle)

    async def write_line(self, line: str) -> None:
        try:
            self._handle.write(f"{line}\n")
        except OSError as err:
            print(f"Error writing to temp file: {_YELLOW.paint(str(err))}")
        try:
            self._handle.flush()
        except OSError as err:
            print(f"Error flushing temp file: {_YELLOW.paint(str(err))}")

    def close(self) -> None:
        """Close the file and remove the temporary directory."""
        self._handle.close()
        self._directory.cleanup()

    def __enter__(self) -> TempFileWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()