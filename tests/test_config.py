from types import SimpleNamespace

import pytest

from tailhue.config import (
    count_lines,
    create_config,
    determine_input,
    get_output,
    list_files_in_directory,
    should_follow,
    validate_input,
)
from tailhue.types import (
    CommandInput,
    ConfigError,
    ExitCode,
    FileInput,
    FolderInput,
    Output,
    StdinInput,
)


def make_args(**overrides):
    values = dict(
        file_or_folder_path=None,
        listen_command=None,
        to_stdout=False,
        suppress_output=False,
        follow=False,
        start_at_end=False,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_validate_input_without_any_source_exits_ok():
    with pytest.raises(ConfigError) as exc:
        validate_input(False, False, False)
    assert exc.value.exit_code == ExitCode.OK
    assert "Missing filename" in exc.value.message


def test_validate_input_rejects_file_and_command():
    with pytest.raises(ConfigError) as exc:
        validate_input(False, True, True)
    assert exc.value.exit_code == ExitCode.MISUSE_SHELL_BUILTIN
    assert "--listen-command" in exc.value.message


def test_validate_input_accepts_single_source():
    assert validate_input(True, False, False) is None
    assert validate_input(False, True, False) is None


@pytest.mark.parametrize(
    ("stdin", "print_flag", "suppress", "expected"),
    [
        (True, True, True, Output.SUPPRESS),
        (True, False, False, Output.STDOUT),
        (False, True, False, Output.STDOUT),
        (False, False, False, Output.TEMP_FILE),
    ],
)
def test_get_output(stdin, print_flag, suppress, expected):
    assert get_output(stdin, print_flag, suppress) is expected


def test_should_follow_rules():
    file_input = FileInput("a.log", 1)
    assert should_follow(False, True, file_input) is True
    assert should_follow(False, False, FolderInput("logs", [])) is True
    assert should_follow(False, False, file_input) is False
    assert should_follow(True, False, file_input) is True


def test_list_files_skips_hidden_and_directories(tmp_path):
    (tmp_path / "a.log").write_text("x")
    (tmp_path / "b.log").write_text("y")
    (tmp_path / ".hidden").write_text("z")
    (tmp_path / "sub").mkdir()
    found = list_files_in_directory(str(tmp_path))
    assert sorted(found) == [str(tmp_path / "a.log"), str(tmp_path / "b.log")]


def test_list_files_rejects_non_directory(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(ConfigError) as exc:
        list_files_in_directory(target)
    assert exc.value.exit_code == ExitCode.GENERAL_ERROR


@pytest.mark.parametrize(
    ("content", "expected"),
    [(b"a\nb\nc", 3), (b"a\nb\n", 2), (b"", 0)],
)
def test_count_lines(tmp_path, content, expected):
    target = tmp_path / "f.log"
    target.write_bytes(content)
    assert count_lines(target) == expected


def test_determine_input_for_file(tmp_path):
    target = tmp_path / "f.log"
    target.write_text("one\ntwo\n")
    assert determine_input(str(target)) == FileInput(str(target), 2)


def test_determine_input_for_folder_sorts_paths(tmp_path):
    for name in ("c.log", "a.log", "b.log"):
        (tmp_path / name).write_text("x")
    result = determine_input(str(tmp_path))
    assert isinstance(result, FolderInput)
    assert result.folder_name == str(tmp_path)
    assert result.file_paths == sorted(result.file_paths)
    assert len(result.file_paths) == 3


def test_determine_input_for_missing_path(tmp_path):
    with pytest.raises(ConfigError) as exc:
        determine_input(str(tmp_path / "missing"))
    assert exc.value.exit_code == ExitCode.GENERAL_ERROR
    assert "No such file or directory" in exc.value.message


def test_create_config_from_stdin():
    config = create_config(make_args(), has_data_from_stdin=True)
    assert config.input == StdinInput()
    assert config.output is Output.STDOUT
    assert config.follow is False


def test_create_config_from_command_follows():
    config = create_config(make_args(listen_command="echo hi"), has_data_from_stdin=False)
    assert config.input == CommandInput("echo hi")
    assert config.output is Output.TEMP_FILE
    assert config.follow is True


def test_create_config_from_file(tmp_path):
    target = tmp_path / "f.log"
    target.write_text("x\n")
    args = make_args(file_or_folder_path=str(target), start_at_end=True, suppress_output=True)
    config = create_config(args, has_data_from_stdin=False)
    assert config.input == FileInput(str(target), 1)
    assert config.output is Output.SUPPRESS
    assert config.start_at_end is True
    assert config.follow is False


def test_create_config_without_input():
    with pytest.raises(ConfigError) as exc:
        create_config(make_args(), has_data_from_stdin=False)
    assert exc.value.exit_code == ExitCode.OK