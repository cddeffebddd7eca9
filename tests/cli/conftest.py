# topmark:header:start
#
#   project      : ByteDent
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ByteDent in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that relative paths and globs (e.g.
``"*.txt"``) resolve against the test directory and config discovery starts
there.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from bytedent.cli.exit_codes import ExitCode
from bytedent.cli.main import cli
from bytedent.config import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_trace_logging() -> Iterator[None]:
    """Re-enable TRACE logging after the CLI lowered it for its own run."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_bytes: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["dedent", "*.txt"]``.
        input_bytes (str | bytes | IO[Any] | None): Optional standard input for ``-``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["dedent", "--apply", "*.txt"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_bytes=input_bytes)
    finally:
        os.chdir(previous)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_bytes: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on relative paths (e.g.
    ``--help`` / ``version``) or when all provided paths are absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_bytes (str | bytes | IO[Any] | None): Optional standard input for ``-``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_bytes)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
