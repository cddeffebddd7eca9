# topmark:header:start
#
#   project      : ByteDent
#   file         : version.py
#   file_relpath : src/bytedent/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent `version` command.

Prints the current ByteDent version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from bytedent.cli.cli_types import OutputFormat
from bytedent.cli.cmd_common import get_console, get_effective_verbosity
from bytedent.cli.options import format_option
from bytedent.constants import BYTEDENT_VERSION

if TYPE_CHECKING:
    from bytedent.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ByteDent.",
)
@format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ByteDent.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": BYTEDENT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("ByteDent version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BYTEDENT_VERSION, bold=True)}")
    else:
        console.print(console.styled(BYTEDENT_VERSION, bold=True))
