import asyncio
import io
import sys
from pathlib import Path

import pytest

from tailhue.controller import Io, get_io_and_presenter, get_reader, get_writer_and_presenter
from tailhue.presenters import LessPresenter, NoPresenter
from tailhue.readers import StreamLineReader
from tailhue.types import CommandInput, Config, FileInput, FolderInput, Output, StdinInput
from tailhue.writers import NoWriter, StdoutWriter, TempFileWriter


@pytest.mark.asyncio
async def test_io_delegates_to_reader_and_writer(capsys):
    stream = asyncio.StreamReader()
    stream.feed_data(b"first\nsecond\n")
    stream.feed_eof()
    pipe = Io(StreamLineReader(stream), StdoutWriter())

    assert await pipe.next_line() == ["first"]
    await pipe.write_line("written")
    assert await pipe.next_line() == ["second"]
    assert await pipe.next_line() is None
    assert capsys.readouterr().out == "written\n"


@pytest.mark.asyncio
async def test_stdout_output(capsys):
    writer, presenter = get_writer_and_presenter(Output.STDOUT, False)
    await writer.write_line("hello")
    assert presenter.present() is None
    assert isinstance(presenter, NoPresenter)
    assert capsys.readouterr().out == "hello\n"


@pytest.mark.asyncio
async def test_suppressed_output_writes_nothing(capsys):
    writer, presenter = get_writer_and_presenter(Output.SUPPRESS, True)
    await writer.write_line("hello")
    assert isinstance(writer, NoWriter)
    assert isinstance(presenter, NoPresenter)
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_temp_file_output_is_shown_by_less():
    writer, presenter = get_writer_and_presenter(Output.TEMP_FILE, True)
    try:
        assert isinstance(writer, TempFileWriter)
        assert isinstance(presenter, LessPresenter)
        assert presenter.file_path == writer.path
        assert presenter.follow is True
        await writer.write_line("line one")
        assert Path(writer.path).read_text(encoding="utf-8") == "line one\n"
    finally:
        writer.close()


@pytest.mark.asyncio
async def test_command_reader_reads_output_and_signals_at_once():
    eof = asyncio.Event()
    reader = await get_reader(CommandInput("printf 'a\\nb\\n'"), False, eof)
    assert eof.is_set()
    assert await reader.next_line() == ["a"]
    assert await reader.next_line() == ["b"]
    assert await reader.next_line() is None


@pytest.mark.asyncio
async def test_file_reader_signals_after_existing_lines(tmp_path):
    log = tmp_path / "app.log"
    log.write_text("one\ntwo\n", encoding="utf-8")
    eof = asyncio.Event()
    reader = await get_reader(FileInput(str(log), 2), False, eof)

    assert await reader.next_line() == ["one"]
    assert not eof.is_set()
    assert await reader.next_line() == ["two"]
    assert eof.is_set()


@pytest.mark.asyncio
async def test_folder_reader_starts_with_banner(tmp_path):
    log = tmp_path / "app.log"
    log.write_text("", encoding="utf-8")
    eof = asyncio.Event()
    reader = await get_reader(FolderInput(str(tmp_path), [str(log)]), False, eof)

    assert eof.is_set()
    banner = await reader.next_line()
    assert len(banner) == 1
    assert str(tmp_path) in banner[0]
    assert "app.log" in banner[0]


@pytest.mark.asyncio
async def test_stdin_reader(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x\n")))
    eof = asyncio.Event()
    reader = await get_reader(StdinInput(), False, eof)

    assert await reader.next_line() == ["x"]
    assert not eof.is_set()
    assert await reader.next_line() is None
    assert eof.is_set()


@pytest.mark.asyncio
async def test_unknown_input_is_rejected():
    with pytest.raises(TypeError):
        await get_reader("not an input")


@pytest.mark.asyncio
async def test_get_io_and_presenter():
    eof = asyncio.Event()
    config = Config(input=CommandInput("echo hi"), output=Output.SUPPRESS)
    pipe, presenter = await get_io_and_presenter(config, eof)

    assert eof.is_set()
    assert await pipe.next_line() == ["hi"]
    assert await pipe.next_line() is None
    assert isinstance(presenter, NoPresenter)