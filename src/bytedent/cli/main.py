# topmark:header:start
#
#   project      : ByteDent
#   file         : main.py
#   file_relpath : src/bytedent/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytedent.cli.commands.check import check_command
from bytedent.cli.commands.dedent import dedent_command
from bytedent.cli.commands.dump_config import dump_config_command
from bytedent.cli.commands.indent import indent_command
from bytedent.cli.commands.version import version_command
from bytedent.cli.console import ClickConsole
from bytedent.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    color_options,
    verbosity_options,
    resolve_color_mode,
    resolve_verbosity,
)
from bytedent.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from bytedent.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="ByteDent: remove the common leading whitespace of text blocks.",
)
@verbosity_options
@color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ByteDent CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'bytedent dedent [PATHS...]' to dedent files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(dedent_command)

cli.add_command(check_command)

cli.add_command(indent_command)

if __name__ == "__main__":
    cli()
