# topmark:header:start
#
#   project      : ByteDent
#   file         : options.py
#   file_relpath : src/bytedent/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution.

Group-level options (``-v``/``-q``, ``--color``/``--no-color``) are resolved once
by the ``cli`` group. Command options (config files, size bounds, write
strategy, output format) are shared decorators so every command spells them
the same way.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from bytedent.cli.cli_types import EnumChoiceParam, OutputFormat
from bytedent.cli.errors import BytedentUsageError
from bytedent.config.types import FileWriteStrategy

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its subcommands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


# ------------------------------ Verbosity ------------------------------


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Fold the ``-v``/``-q`` counts into one program-output level.

    Args:
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        ``verbose_count`` (> 0), ``-quiet_count`` (< 0), or 0.

    Raises:
        BytedentUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise BytedentUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count or -quiet_count


def verbosity_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (both counted)."""
    f = click.option(
        "-v", "--verbose", count=True, help="More program output (repeatable)."
    )(f)
    return click.option("-q", "--quiet", count=True, help="Less program output (repeatable).")(f)


# -------------------------------- Color --------------------------------


class ColorMode(str, Enum):
    """Requested colorization of program output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether program output is colored.

    Precedence: JSON output is never colored; then an explicit ``always`` or
    ``never``; then ``FORCE_COLOR`` (any value but ``0``) and ``NO_COLOR``;
    finally whether stdout is a terminal.

    Args:
        cli_mode: Mode from ``--color`` / ``--no-color`` (``None`` means auto).
        output_format: Output format name, e.g. ``"json"``.
        stdout_isatty: Terminal check override; detected when ``None``.

    Returns:
        True when color should be used.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode in (ColorMode.ALWAYS, ColorMode.NEVER):
        return cli_mode is ColorMode.ALWAYS

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        isatty: Callable[[], bool] | None = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty and isatty())
    return stdout_isatty


def color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color=auto|always|never`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Colorize output (default: auto).",
    )(f)
    return click.option(
        "--no-color", "no_color", is_flag=True, help="Same as --color=never."
    )(f)


# ---------------------------- Command options ---------------------------


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and the repeatable ``--config/-c FILE``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover bytedent.toml / pyproject.toml files.",
    )(f)
    return click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, dir_okay=False),
        help="Extra config file merged after the discovered ones (repeatable).",
    )(f)


def length_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--length N``: the explicit text block bound."""
    return click.option(
        "--length",
        type=click.IntRange(min=0),
        default=None,
        metavar="N",
        help="Only treat the first N bytes of each input as text.",
    )(f)


def capacity_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--capacity N``: a fixed destination size, terminator included."""
    return click.option(
        "--capacity",
        type=click.IntRange(min=0),
        default=None,
        metavar="N",
        help="Dedent into a fixed N-byte destination and report truncation.",
    )(f)


def strategy_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--strategy``, overriding ``[writer] strategy``."""
    return click.option(
        "--strategy",
        "write_strategy",
        type=click.Choice([s.value for s in FileWriteStrategy]),
        default=None,
        help="How results are written back with --apply (default: atomic).",
    )(f)


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format default|json``."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
