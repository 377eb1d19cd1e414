import dataclasses

import pytest

from tailhue.line_info import LineInfo
from tailhue.types import (
    CommandInput,
    Config,
    ConfigError,
    ExitCode,
    FileInput,
    FolderInput,
    Highlighter,
    Output,
    StdinInput,
)


class _Upper(Highlighter):
    def should_short_circuit(self, line_info):
        return line_info.colons == 0

    def only_apply_to_segments_not_already_highlighted(self):
        return True

    def apply(self, text):
        return text.upper()


def test_config_error_carries_code_and_message():
    error = ConfigError(ExitCode.MISUSE_SHELL_BUILTIN, "Cannot read from both")
    assert error.exit_code == ExitCode.MISUSE_SHELL_BUILTIN
    assert error.message == "Cannot read from both"
    assert str(error) == "Cannot read from both"


@pytest.mark.parametrize(
    "code, expected",
    [
        (ExitCode.OK, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.MISUSE_SHELL_BUILTIN, 2),
    ],
)
def test_exit_code_values_are_usable_as_int(code, expected):
    error = ConfigError(code, "message")
    assert int(error.exit_code) == expected


def test_highlighter_is_abstract():
    with pytest.raises(TypeError):
        Highlighter()


def test_highlighter_subclass_works():
    highlighter = _Upper()
    assert highlighter.apply("abc") == "ABC"
    assert highlighter.should_short_circuit(LineInfo.from_line("abc")) is True
    assert highlighter.should_short_circuit(LineInfo.from_line("a:b")) is False


def test_inputs_compare_by_value():
    assert FileInput("a.log", 3) == FileInput("a.log", 3)
    assert FolderInput("logs", ["logs/a"]) == FolderInput("logs", ["logs/a"])
    assert CommandInput("echo hi") == CommandInput("echo hi")
    assert StdinInput() == StdinInput()
    assert FileInput("a.log", 3) != FileInput("b.log", 3)


def test_config_defaults_and_immutability():
    config = Config(input=StdinInput(), output=Output.STDOUT)
    assert config.follow is False
    assert config.start_at_end is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.follow = True