# topmark:header:start
#
#   project      : ByteDent
#   file         : errors.py
#   file_relpath : src/bytedent/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ByteDent CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `from_os_error` translates filesystem errors at the
    CLI boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from bytedent.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class BytedentError(click.ClickException):
    """Base class for all ByteDent CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class BytedentUsageError(BytedentError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BytedentConfigError(BytedentError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BytedentFileNotFoundError(BytedentError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BytedentPermissionDeniedError(BytedentError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class BytedentIOError(BytedentError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


def from_os_error(path: Path | str, exc: OSError) -> BytedentError:
    """Map an `OSError` raised for ``path`` to the matching CLI error.

    Args:
        path (Path | str): The path being read or written.
        exc (OSError): The original exception.

    Returns:
        BytedentError: The error to raise (chain it with ``from exc``).
    """
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return BytedentFileNotFoundError(f"No such file: {path}")
    if isinstance(exc, PermissionError):
        return BytedentPermissionDeniedError(f"Permission denied: {path}")
    return BytedentIOError(f"I/O error on {path}: {exc}")
