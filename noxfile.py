# topmark:header:start
#
#   project      : ByteDent
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nox sessions for ByteDent.

``nox`` alone runs the quick checks (``lint``, ``format_check``). The test
matrix (``qa``) and the slow hypothesis suite (``property_test``) are run by
name, e.g. ``nox -s qa`` or ``nox -s property_test``.
"""

from __future__ import annotations

import pathlib
import re
import sys

import nox

HERE: pathlib.Path = pathlib.Path(__file__).parent
RUNNING_PYTHON: str = f"{sys.version_info.major}.{sys.version_info.minor}"

_CLASSIFIER_RE = re.compile(r'"Programming Language :: Python :: (\d+)\.(\d+)"')


def classifier_pythons() -> list[str]:
    """Return the ``X.Y`` versions listed in the pyproject classifiers.

    A regex over the raw file keeps the noxfile free of a TOML dependency on
    interpreters without `tomllib`. Falls back to the running interpreter.
    """
    pyproject: pathlib.Path = HERE / "pyproject.toml"
    if not pyproject.is_file():
        return [RUNNING_PYTHON]
    found = {
        (int(major), int(minor))
        for major, minor in _CLASSIFIER_RE.findall(pyproject.read_text(encoding="utf-8"))
    }
    return [f"{major}.{minor}" for major, minor in sorted(found)] or [RUNNING_PYTHON]


PYTHONS: list[str] = classifier_pythons()

nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Fast tests, then pyright for the session's Python."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session(python=RUNNING_PYTHON)
def property_test(session: nox.Session) -> None:
    """Slow hypothesis suite only."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint; pass ``-- --fix`` to apply fixes."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".", *session.posargs)


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail when files are not ruff-formatted."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session(name="format")
def format_code(session: nox.Session) -> None:
    """Apply ruff formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")
