"""Showing the highlighted output once reading has caught up."""

from __future__ import annotations

import os
import signal
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Presenter(ABC):
    """Shows the output to the user."""

    @abstractmethod
    def present(self) -> None:
        """Show the output; returns when the user is done."""


class NoPresenter(Presenter):
    """Used when output already went straight to its destination."""

    def present(self) -> None:
        return None


def less_args(follow: bool) -> list[str]:
    """Options passed to ``less``; ``+F`` makes it follow the file."""
    args = ["--ignore-case", "--RAW-CONTROL-CHARS", "--"]
    if follow:
        args.insert(0, "+F")
    return args


def _ignore_interrupt(signum: int, frame: object) -> None:
    """Let Ctrl + C reach the pager instead of ending this process."""


@dataclass
class LessPresenter(Presenter):
    """Opens the output file in ``less``."""

    file_path: str
    follow: bool = False
    command: str = "less"

    def present(self) -> None:
        signal.signal(signal.SIGINT, _ignore_interrupt)
        env = {**os.environ, "LESSSECURE": "1"}
        try:
            subprocess.run([self.command, *less_args(self.follow), self.file_path], env=env)
        except FileNotFoundError:
            raise SystemExit(
                f"'{self.command}' command not found. "
                "Please ensure it is installed and on your PATH."
            ) from None
        except OSError as err:
            raise SystemExit(f"Failed to run {self.command}: {err}") from None