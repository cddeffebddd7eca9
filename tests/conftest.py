# topmark:header:start
#
#   project      : ByteDent
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ByteDent test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs using `bytedent.config.MutableConfig`, then `freeze()` them into a
    `bytedent.config.Config`. To tweak a frozen `Config`, call `Config.thaw()`,
    edit the returned draft, then `freeze()` again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bytedent.config import logging
from bytedent.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_bytedent_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ByteDent's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory holds a ``bytedent.toml`` declaring ``root = true`` so that
    config discovery never climbs into directories outside the test.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The project directory, also the current working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "bytedent.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd
