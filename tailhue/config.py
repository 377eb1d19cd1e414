"""Building the run configuration from command-line arguments."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from tailhue.theme import Color, Style
from tailhue.types import (
    CommandInput,
    Config,
    ConfigError,
    ExitCode,
    FileInput,
    FolderInput,
    Input,
    Output,
    StdinInput,
)

_MAGENTA = Style().fg(Color.MAGENTA)
_RED = Style().fg(Color.RED)


def validate_input(
    has_data_from_stdin: bool,
    has_file_or_folder_input: bool,
    has_follow_command_input: bool,
) -> None:
    """Raise ConfigError when there is nothing to read or two sources collide."""
    if not (has_data_from_stdin or has_file_or_folder_input or has_follow_command_input):
        raise ConfigError(
            ExitCode.OK,
            f"Missing filename ({_MAGENTA.paint('tailhue --help')} for help)",
        )
    if has_file_or_folder_input and has_follow_command_input:
        raise ConfigError(
            ExitCode.MISUSE_SHELL_BUILTIN,
            f"Cannot read from both file and {_MAGENTA.paint('--listen-command')}",
        )


def get_output(has_data_from_stdin: bool, is_print_flag: bool, suppress_output: bool) -> Output:
    """Choose where highlighted lines go."""
    if suppress_output:
        return Output.SUPPRESS
    if has_data_from_stdin or is_print_flag:
        return Output.STDOUT
    return Output.TEMP_FILE


def should_follow(follow: bool, has_follow_command: bool, input: Input) -> bool:
    """Commands and folders are always followed; files only on request."""
    if has_follow_command or isinstance(input, FolderInput):
        return True
    return follow


def list_files_in_directory(path: str | os.PathLike[str]) -> list[str]:
    """Paths of the regular, non-hidden files directly inside ``path``."""
    directory = Path(path)
    if not directory.is_dir():
        raise ConfigError(ExitCode.GENERAL_ERROR, "Path is not a directory")
    try:
        entries = list(os.scandir(directory))
    except OSError:
        raise ConfigError(ExitCode.GENERAL_ERROR, "Unable to read directory") from None
    return [
        os.path.join(path, entry.name)
        for entry in entries
        if not entry.name.startswith(".") and Path(entry.path).is_file()
    ]


def count_lines(path: str | os.PathLike[str]) -> int:
    """Number of lines in a file; a final line without newline counts too."""
    with open(path, "rb") as handle:
        return sum(1 for _ in handle)


def determine_input(path: str) -> Input:
    """Describe ``path`` as a file input or a folder input."""
    try:
        metadata = os.stat(path)
    except OSError:
        raise ConfigError(
            ExitCode.GENERAL_ERROR, f"{_RED.paint(str(path))}: No such file or directory"
        ) from None

    if Path(path).is_file():
        return FileInput(path=path, line_count=count_lines(path))
    if Path(path).is_dir():
        return FolderInput(folder_name=path, file_paths=sorted(list_files_in_directory(path)))
    del metadata
    raise ConfigError(ExitCode.GENERAL_ERROR, "Path is neither a file nor a directory")


def _select_input(args: Any, has_data_from_stdin: bool) -> Input:
    if has_data_from_stdin:
        return StdinInput()
    if args.listen_command is not None:
        return CommandInput(args.listen_command)
    if args.file_or_folder_path is not None:
        return determine_input(args.file_or_folder_path)
    raise ConfigError(ExitCode.GENERAL_ERROR, "Could not determine input type")


def create_config(args: Any, has_data_from_stdin: bool | None = None) -> Config:
    """Build the configuration; stdin counts as input when it is not a terminal."""
    if has_data_from_stdin is None:
        has_data_from_stdin = not sys.stdin.isatty()

    has_command = args.listen_command is not None
    validate_input(has_data_from_stdin, args.file_or_folder_path is not None, has_command)

    input = _select_input(args, has_data_from_stdin)
    return Config(
        input=input,
        output=get_output(has_data_from_stdin, args.to_stdout, args.suppress_output),
        follow=should_follow(args.follow, has_command, input),
        start_at_end=args.start_at_end,
    )