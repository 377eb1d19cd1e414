"""Sources of lines: standard input, a command, a followed file or folder."""

from __future__ import annotations

import asyncio
import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import IO, Any

from tailhue.theme import Style

_STREAM_LIMIT = 16 * 1024 * 1024
_BUCKET_LIMIT = 10000


class LineReader(ABC):
    """Produces batches of lines; None means there is nothing more."""

    @abstractmethod
    async def next_line(self) -> list[str] | None:
        """Return the next batch of lines, or None at the end."""


def strip_newline(data: bytes) -> bytes:
    """Drop a single trailing newline byte."""
    return data[:-1] if data.endswith(b"\n") else data


def _strip_line_ending(data: bytes) -> bytes:
    if data.endswith(b"\r\n"):
        return data[:-2]
    return strip_newline(data)


def _signal(event: asyncio.Event | None) -> None:
    if event is not None:
        event.set()


class StreamLineReader(LineReader):
    """Reads newline-terminated lines from anything with an async ``readline``."""

    def __init__(self, stream: Any, eof_event: asyncio.Event | None = None) -> None:
        self._stream = stream
        self._eof_event = eof_event

    async def next_line(self) -> list[str] | None:
        data = await self._stream.readline()
        if not data:
            _signal(self._eof_event)
            self._eof_event = None
            return None
        return [strip_newline(data).decode("utf-8", errors="replace")]


class _ThreadedStream:
    """Blocking binary reads moved to a worker thread."""

    def __init__(self, binary: IO[bytes]) -> None:
        self._binary = binary

    async def readline(self) -> bytes:
        return await asyncio.to_thread(self._binary.readline)


class StdinReader(StreamLineReader):
    """Reads standard input and signals once it is exhausted."""

    @classmethod
    def create(cls, eof_event: asyncio.Event | None = None) -> StdinReader:
        return cls(_ThreadedStream(sys.stdin.buffer), eof_event)


class CommandReader(StreamLineReader):
    """Reads the standard output of a shell command that ignores interrupts."""

    def __init__(self, stream: Any, process: asyncio.subprocess.Process | None = None) -> None:
        super().__init__(stream, None)
        self.process = process

    @classmethod
    async def start(cls, command: str, eof_event: asyncio.Event | None = None) -> CommandReader:
        """Signal EOF at once, since output is shown live, then start ``command``."""
        _signal(eof_event)
        process = await asyncio.create_subprocess_exec(
            "sh",
            "-c",
            f"trap '' INT; {command}",
            stdout=asyncio.subprocess.PIPE,
            limit=_STREAM_LIMIT,
        )
        return cls(process.stdout, process)


class _TailedFile:
    """A file read line by line, waiting for lines appended later."""

    def __init__(self, path: str, from_start: bool) -> None:
        self.path = path
        self._handle = open(path, "rb")
        if not from_start:
            self._handle.seek(0, os.SEEK_END)
        self._pending = b""

    def poll(self) -> str | None:
        """Return the next complete line, or None if none is available yet."""
        data = self._handle.readline()
        if not data:
            self._rewind_if_truncated()
            return None
        data = self._pending + data
        if not data.endswith(b"\n"):
            self._pending = data
            return None
        self._pending = b""
        return _strip_line_ending(data).decode("utf-8", errors="replace")

    def _rewind_if_truncated(self) -> None:
        if os.fstat(self._handle.fileno()).st_size < self._handle.tell():
            self._handle.seek(0)
            self._pending = b""


class FileTailReader(LineReader):
    """Follows one file, reading existing lines in large batches first."""

    poll_interval = 0.1

    def __init__(
        self,
        file_path: str,
        number_of_lines: int,
        start_at_end: bool = False,
        eof_event: asyncio.Event | None = None,
    ) -> None:
        self._file = _TailedFile(file_path, from_start=not start_at_end)
        self._number_of_lines = number_of_lines
        self._bucket_size = min(max(number_of_lines - 1, 1), _BUCKET_LIMIT)
        self._current_line = 0
        self._eof_event = eof_event
        self._reached_eof = False
        if start_at_end or number_of_lines == 0:
            self._send_eof()

    @classmethod
    def open(
        cls,
        file_path: str,
        number_of_lines: int,
        start_at_end: bool = False,
        eof_event: asyncio.Event | None = None,
    ) -> FileTailReader:
        return cls(file_path, number_of_lines, start_at_end, eof_event)

    def _send_eof(self) -> None:
        if self._eof_event is not None:
            self._reached_eof = True
            self._eof_event.set()
            self._eof_event = None
        else:
            self._reached_eof = True

    async def _read_line(self) -> str:
        while (line := self._file.poll()) is None:
            await asyncio.sleep(self.poll_interval)
        return line

    async def _read_bucket(self) -> list[str] | None:
        bucket: list[str] = []
        while len(bucket) < self._bucket_size:
            bucket.append(await self._read_line())
            self._current_line += 1
            if self._current_line >= self._number_of_lines:
                self._send_eof()
                self._bucket_size = 1
        return bucket or None

    async def next_line(self) -> list[str] | None:
        if self._reached_eof:
            return [await self._read_line()]
        return await self._read_bucket()


def _terminal_width() -> int | None:
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return None


def startup_message(folder_name: str, file_paths: Sequence[str], width: int | None) -> str:
    """The banner listing the followed files, shown before any line."""
    bold = Style().bold()
    last = len(file_paths) - 1
    file_list = "\n".join(
        f"         {'└─' if index == last else '├─'} "
        f"{bold.paint(os.path.basename(path) or path)}"
        for index, path in enumerate(file_paths)
    )
    separator = "▁" * width if width else ""
    return (
        f"Watching {Style().fg(_green()).paint(folder_name)} \n"
        f"{file_list}\n{Style().dimmed().paint(separator)}\n"
    )


def _green() -> Any:
    from tailhue.theme import Color

    return Color.GREEN


class FolderTailReader(LineReader):
    """Follows the given files from their current end, line by line."""

    poll_interval = 0.1

    def __init__(self, folder_name: str, file_paths: Sequence[str], width: int | None) -> None:
        self._startup_message: str | None = startup_message(folder_name, file_paths, width)
        self._files = [_TailedFile(path, from_start=False) for path in file_paths]

    @classmethod
    def open(
        cls,
        folder_name: str,
        file_paths: Sequence[str],
        eof_event: asyncio.Event | None = None,
    ) -> FolderTailReader:
        _signal(eof_event)
        return cls(folder_name, file_paths, _terminal_width())

    async def next_line(self) -> list[str] | None:
        if self._startup_message is not None:
            message, self._startup_message = self._startup_message, None
            return [message]
        while True:
            for tailed in self._files:
                line = tailed.poll()
                if line is not None:
                    return [line]
            await asyncio.sleep(self.poll_interval)