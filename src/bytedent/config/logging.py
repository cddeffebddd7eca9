# topmark:header:start
#
#   project      : ByteDent
#   file         : logging.py
#   file_relpath : src/bytedent/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for ByteDent.

Adds a TRACE level below DEBUG (used by the dedent core for per-line detail),
a logger class exposing ``trace()``, and a formatter that colors records by
severity with `yachalk`.

Records go to **stderr**: stdout carries dedented bytes and must stay clean
when ``BYTEDENT_LOG_LEVEL`` is set. Logging is silent (CRITICAL) unless a level
is passed to `setup_logging` or set in the environment.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from bytedent.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

SHORT_FORMAT: Final[str] = "%(levelname)-7s %(name)s: %(message)s"
LONG_FORMAT: Final[str] = "%(levelname)-7s %(name)s:%(lineno)d %(funcName)s(): %(message)s"


class BytedentLogger(logging.Logger):
    """Logger with an extra `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(BytedentLogger)


# Highest threshold first; the first one a record reaches picks its color.
_SEVERITY_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.bold.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        text: str = super().format(record)
        for threshold, style in _SEVERITY_STYLES:
            if record.levelno >= threshold:
                return style(text)
        return chalk.dim(text)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``BYTEDENT_LOG_LEVEL``, or None.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and integers
    (``"10"``). Unknown names are ignored.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    name: str = raw.upper()
    if name == "WARN":
        name = "WARNING"
    level: object = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger.

    Any existing root handlers are replaced by a single colored stderr
    handler. Below INFO the format includes the source line.

    Args:
        level (int | None): Level to use; when None, `resolve_env_log_level`
            is consulted and CRITICAL is the fallback.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(SHORT_FORMAT if level >= logging.INFO else LONG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> BytedentLogger:
    """Return the `BytedentLogger` called ``name`` (use ``__name__``)."""
    return cast("BytedentLogger", logging.getLogger(name))
