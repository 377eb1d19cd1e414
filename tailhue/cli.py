"""Command-line arguments and shell completion scripts."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field

PROG = "tailhue"
DESCRIPTION = "A log file highlighter"
WORD_COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan")


@dataclass
class CliArgs:
    """Parsed command-line arguments."""

    file_or_folder_path: str | None = None
    follow: bool = False
    start_at_end: bool = False
    to_stdout: bool = False
    config_path: str | None = None
    listen_command: str | None = None
    words_red: list[str] = field(default_factory=list)
    words_green: list[str] = field(default_factory=list)
    words_yellow: list[str] = field(default_factory=list)
    words_blue: list[str] = field(default_factory=list)
    words_magenta: list[str] = field(default_factory=list)
    words_cyan: list[str] = field(default_factory=list)
    disable_keyword_builtins: bool = False
    disable_booleans: bool = False
    disable_severity: bool = False
    disable_rest: bool = False
    suppress_output: bool = False
    generate_shell_completions: str | None = None


@dataclass(frozen=True)
class _Option:
    long: str
    dest: str
    help: str
    short: str | None = None
    takes_value: bool = False
    repeated: bool = False
    hidden: bool = False
    exclusive: bool = False


_OPTIONS: tuple[_Option, ...] = (
    _Option("follow", "follow", "Follow the contents of a file", short="f", exclusive=True),
    _Option("start-at-end", "start_at_end", "Start at the end of the file", short="e"),
    _Option("print", "to_stdout", "Print the output to stdout", short="p"),
    _Option(
        "config-path",
        "config_path",
        "Provide a custom path to a configuration file",
        takes_value=True,
    ),
    _Option(
        "listen-command",
        "listen_command",
        "Continuously listen to stdout from the provided command and prevent "
        "interrupt events (Ctrl + C) from reaching the command",
        short="c",
        takes_value=True,
        exclusive=True,
    ),
    *(
        _Option(
            f"words-{color}",
            f"words_{color}",
            f"Highlight the provided words in {color}",
            takes_value=True,
            repeated=True,
        )
        for color in WORD_COLORS
    ),
    _Option(
        "disable-builtin-keywords",
        "disable_keyword_builtins",
        "Disable the highlighting of all builtin keyword groups (booleans, severity and REST)",
    ),
    _Option("disable-booleans", "disable_booleans", "Disable the highlighting of booleans and nulls"),
    _Option("disable-severity", "disable_severity", "Disable the highlighting of severity levels"),
    _Option("disable-rest", "disable_rest", "Disable the highlighting of REST verbs"),
    _Option(
        "suppress-output",
        "suppress_output",
        "Suppress all output (for debugging and benchmarking)",
        hidden=True,
    ),
    _Option(
        "z-generate-shell-completions",
        "generate_shell_completions",
        "Print completions to stdout",
        takes_value=True,
        hidden=True,
    ),
)


def _flags(option: _Option) -> list[str]:
    flags = [f"-{option.short}"] if option.short else []
    flags.append(f"--{option.long}")
    return flags


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the command."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument(
        "file_or_folder_path", nargs="?", metavar="FILE", help="Path to file or folder"
    )
    exclusive = parser.add_mutually_exclusive_group()
    for option in _OPTIONS:
        target = exclusive if option.exclusive else parser
        help_text = argparse.SUPPRESS if option.hidden else option.help
        if option.repeated:
            target.add_argument(
                *_flags(option),
                dest=option.dest,
                help=help_text,
                action="append",
                default=[],
                metavar="WORDS",
            )
        elif option.takes_value:
            target.add_argument(
                *_flags(option), dest=option.dest, help=help_text, metavar=option.dest.upper()
            )
        else:
            target.add_argument(
                *_flags(option), dest=option.dest, help=help_text, action="store_true"
            )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    """Parse ``argv``; word lists may be repeated and comma separated."""
    values = vars(build_parser().parse_args(argv))
    for color in WORD_COLORS:
        key = f"words_{color}"
        values[key] = [word for item in values[key] for word in item.split(",")]
    return CliArgs(**values)


def _visible_options() -> list[_Option]:
    return [option for option in _OPTIONS if not option.hidden]


def _shell_quote(text: str) -> str:
    return text.replace("'", "'\\''")


def _bash_script() -> str:
    words = " ".join(flag for option in _visible_options() for flag in _flags(option))
    words += " -h --help"
    return (
        f"_{PROG}() {{\n"
        '    local cur="${COMP_WORDS[COMP_CWORD]}"\n'
        '    if [[ "$cur" == -* ]]; then\n'
        f'        COMPREPLY=( $(compgen -W "{words}" -- "$cur") )\n'
        "    else\n"
        '        COMPREPLY=( $(compgen -f -- "$cur") )\n'
        "    fi\n"
        "}\n"
        f"complete -F _{PROG} {PROG}\n"
    )


def _zsh_script() -> str:
    lines = [f"#compdef {PROG}", "", f"_{PROG}() {{", "    _arguments \\"]
    for option in _visible_options():
        description = _shell_quote(option.help).replace("[", "\\[").replace("]", "\\]")
        value = ":value:" if option.takes_value else ""
        repeat = "*" if option.repeated else ""
        for flag in _flags(option):
            lines.append(f"        '{repeat}{flag}[{description}]{value}' \\")
    lines.append("        '(-h --help)'{-h,--help}'[Print help]' \\")
    lines.append("        '::file:_files'")
    lines.append("}")
    lines.append("")
    lines.append(f'_{PROG} "$@"')
    return "\n".join(lines) + "\n"


def _fish_script() -> str:
    lines = []
    for option in _visible_options():
        parts = [f"complete -c {PROG}"]
        if option.short:
            parts.append(f"-s {option.short}")
        parts.append(f"-l {option.long}")
        if option.takes_value:
            parts.append("-r")
        description = option.help.replace("\\", "\\\\").replace("'", "\\'")
        parts.append(f"-d '{description}'")
        lines.append(" ".join(parts))
    lines.append(f"complete -c {PROG} -s h -l help -d 'Print help'")
    return "\n".join(lines) + "\n"


_COMPLETIONS = {"bash": _bash_script, "zsh": _zsh_script, "fish": _fish_script}


def completion_script(shell: str) -> str | None:
    """Completion script for bash, zsh or fish; None for any other shell."""
    generator = _COMPLETIONS.get(shell)
    return None if generator is None else generator()