# topmark:header:start
#
#   project      : ByteDent
#   file         : console.py
#   file_relpath : src/bytedent/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for the CLI.

Everything a user is meant to read (dedented content, reports, warnings and
errors) goes through a console; diagnostics go through `logging`. Dedented
content is written as raw bytes so that line endings and non-UTF-8 bytes reach
stdout unchanged.
"""

from __future__ import annotations

import sys
from typing import Any, BinaryIO, Protocol

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None: ...

    def write_bytes(self, data: bytes) -> None: ...

    def warn(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...

    def styled(self, text: str, **style_kwargs: Any) -> str: ...


class ClickConsole:
    """Console writing through Click, so `CliRunner` captures everything.

    Reports go to stdout; warnings and errors go to stderr. ANSI styling is
    applied only when ``enable_color`` is set.
    """

    def __init__(self, *, enable_color: bool = False) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line (or a fragment, with ``nl=False``) to stdout."""
        click.echo(text, nl=nl, color=self.enable_color)

    def write_bytes(self, data: bytes) -> None:
        """Write ``data`` to stdout as is; no newline is added."""
        sys.stdout.flush()
        stream: BinaryIO = sys.stdout.buffer
        stream.write(data)
        stream.flush()

    def warn(self, text: str) -> None:
        """Write a warning to stderr."""
        click.secho(text, err=True, fg="yellow", color=self.enable_color)

    def error(self, text: str) -> None:
        """Write an error to stderr."""
        click.secho(text, err=True, fg="bright_red", color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` when color is enabled.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for `click.style` (``fg``, ``bold``...).

        Returns:
            str: The styled text, or ``text`` unchanged without color.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
