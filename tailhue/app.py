"""The command: read lines, highlight them and hand them to the user."""

from __future__ import annotations

import asyncio
import sys
import threading
from collections.abc import Sequence
from typing import Any

from tailhue.cli import CliArgs, completion_script, parse_args
from tailhue.config import create_config
from tailhue.controller import Io, get_io_and_presenter
from tailhue.highlighters.builder import Highlighters, KeywordOptions
from tailhue.mapper import map_theme
from tailhue.presenters import Presenter
from tailhue.processor import HighlightProcessor
from tailhue.raw_theme import ThemeError
from tailhue.theme import Theme
from tailhue.theme_loader import load_theme
from tailhue.types import Config, ConfigError, ExitCode


def _keyword_options(args: CliArgs) -> KeywordOptions:
    return KeywordOptions(
        words_red=list(args.words_red),
        words_green=list(args.words_green),
        words_yellow=list(args.words_yellow),
        words_blue=list(args.words_blue),
        words_magenta=list(args.words_magenta),
        words_cyan=list(args.words_cyan),
        disable_keyword_builtins=args.disable_keyword_builtins,
        disable_booleans=args.disable_booleans,
        disable_severity=args.disable_severity,
        disable_rest=args.disable_rest,
    )


async def process_lines(io: Io, processor: HighlightProcessor) -> None:
    """Highlight and write batches of lines until the input ends or fails."""
    while True:
        try:
            lines = await io.next_line()
        except OSError:
            return
        if lines is None:
            return
        await io.write_line(processor.apply(lines))


async def _relay(eof: asyncio.Event, reached: threading.Event) -> None:
    await eof.wait()
    reached.set()


async def _start(
    theme: Theme, config: Config, args: CliArgs, reached: threading.Event
) -> tuple[Presenter, list[asyncio.Task[Any]]]:
    eof = asyncio.Event()
    io, presenter = await get_io_and_presenter(config, eof)
    processor = HighlightProcessor(Highlighters.from_theme(theme, _keyword_options(args)))
    worker = asyncio.create_task(process_lines(io, processor))
    worker.add_done_callback(lambda _task: reached.set())
    relay = asyncio.create_task(_relay(eof, reached))
    return presenter, [worker, relay]


async def _shutdown(tasks: list[asyncio.Task[Any]]) -> None:
    for task in tasks:
        task.cancel()
    for result in await asyncio.gather(*tasks, return_exceptions=True):
        if isinstance(result, Exception):
            raise result


def run(theme: Theme, config: Config, args: CliArgs) -> None:
    """Process lines in the background and present once existing input is read."""
    reached = threading.Event()
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, name="tailhue-io", daemon=True)
    thread.start()
    try:
        presenter, tasks = asyncio.run_coroutine_threadsafe(
            _start(theme, config, args, reached), loop
        ).result()
        try:
            reached.wait()
            # The pager must run on the main thread so it can own interrupt handling.
            presenter.present()
        finally:
            asyncio.run_coroutine_threadsafe(_shutdown(tasks), loop).result()
    finally:
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = parse_args(argv)

    if args.generate_shell_completions is not None:
        script = completion_script(args.generate_shell_completions)
        if script is not None:
            sys.stdout.write(script)
        return int(ExitCode.OK)

    try:
        theme = map_theme(load_theme(args.config_path))
    except ThemeError as err:
        print(err, file=sys.stderr)
        return int(ExitCode.GENERAL_ERROR)

    try:
        config = create_config(args)
    except ConfigError as err:
        print(err.message, file=sys.stdout if err.exit_code == ExitCode.OK else sys.stderr)
        return int(err.exit_code)

    run(theme, config, args)
    return int(ExitCode.OK)


if __name__ == "__main__":
    raise SystemExit(main())