"""Choosing the line source, destination and presenter for a configuration."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from tailhue.presenters import LessPresenter, NoPresenter, Presenter
from tailhue.readers import (
    CommandReader,
    FileTailReader,
    FolderTailReader,
    LineReader,
    StdinReader,
)
from tailhue.types import (
    CommandInput,
    Config,
    FileInput,
    FolderInput,
    Input,
    Output,
    StdinInput,
)
from tailhue.writers import LineWriter, NoWriter, StdoutWriter, TempFileWriter


@dataclass
class Io:
    """A reader and a writer used together."""

    reader: LineReader
    writer: LineWriter

    async def next_line(self) -> list[str] | None:
        """The next batch of lines from the reader."""
        return await self.reader.next_line()

    async def write_line(self, line: str) -> None:
        """Hand ``line`` to the writer."""
        await self.writer.write_line(line)


async def get_reader(
    input: Input, start_at_end: bool = False, eof_event: asyncio.Event | None = None
) -> LineReader:
    """The reader for ``input``; ``eof_event`` is set once existing input is read."""
    match input:
        case FileInput(path=path, line_count=line_count):
            return FileTailReader.open(path, line_count, start_at_end, eof_event)
        case FolderInput(folder_name=folder_name, file_paths=file_paths):
            return FolderTailReader.open(folder_name, file_paths, eof_event)
        case StdinInput():
            return StdinReader.create(eof_event)
        case CommandInput(command=command):
            return await CommandReader.start(command, eof_event)
    raise TypeError(f"Unsupported input: {input!r}")


def get_writer_and_presenter(output: Output, follow: bool = False) -> tuple[LineWriter, Presenter]:
    """The writer for ``output`` and the presenter that shows what it wrote."""
    match output:
        case Output.TEMP_FILE:
            writer = TempFileWriter.create()
            return writer, LessPresenter(writer.path, follow)
        case Output.STDOUT:
            return StdoutWriter(), NoPresenter()
        case Output.SUPPRESS:
            return NoWriter(), NoPresenter()
    raise TypeError(f"Unsupported output: {output!r}")


async def get_io_and_presenter(
    config: Config, eof_event: asyncio.Event | None = None
) -> tuple[Io, Presenter]:
    """Everything needed to move lines from the input to the user."""
    reader = await get_reader(config.input, config.start_at_end, eof_event)
    writer, presenter = get_writer_and_presenter(config.output, config.follow)
    return Io(reader, writer), presenter