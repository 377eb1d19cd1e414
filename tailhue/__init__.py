"""Highlight log lines with ANSI colours and show them on stdout or through less."""

__version__ = "0.1.0"