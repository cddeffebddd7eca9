# topmark:header:start
#
#   project      : ByteDent
#   file         : check.py
#   file_relpath : src/bytedent/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent `check` command.

Reports which inputs are not dedented yet, without modifying anything. The
exit status is `WOULD_CHANGE` (2) when at least one input would change, which
makes the command usable as a CI gate.

Examples:
  List the files that still carry a common indent:

    $ bytedent check snippets/*.txt

  Print counts only:

    $ bytedent check --summary snippets/*.txt
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytedent.cli.cmd_common import (
    build_config,
    dedent_bytes,
    for_each_input,
    get_console,
    get_effective_verbosity,
)
from bytedent.cli.exit_codes import ExitCode
from bytedent.cli.io import resolve_inputs
from bytedent.cli.options import CONTEXT_SETTINGS, config_options, length_option
from bytedent.config.logging import get_logger

if TYPE_CHECKING:
    from bytedent.cli.console import ConsoleLike
    from bytedent.cli.io import InputSource
    from bytedent.config import Config

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Report inputs that would be dedented (exit 2 if any).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@config_options
@length_option
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-file details.",
)
def check_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    length: int | None,
    summary_mode: bool,
) -> None:
    """Check whether the given inputs are already dedented.

    Args:
        paths (tuple[str, ...]): Files, glob patterns, or ``-`` for STDIN.
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to merge.
        length (int | None): Explicit length bound applied to each input.
        summary_mode (bool): Show counts instead of per-file lines.

    Exit Status:
        SUCCESS (0): No input would change.
        WOULD_CHANGE (2): At least one input would be dedented.
        FILE_NOT_FOUND (66), PERMISSION_DENIED (77), IO_ERROR (74): An input
            could not be read.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(
        ctx,
        paths=paths,
        no_config=no_config,
        config_paths=config_paths,
        overrides={"length": length},
    )
    sources: list[InputSource] = resolve_inputs(paths, config)
    vlevel: int = get_effective_verbosity(ctx, config)

    def _would_change(_source: InputSource, data: bytes) -> bool:
        return dedent_bytes(data, length=config.length, capacity=None).changed

    results, encountered = for_each_input(sources, _would_change, console=console)
    changed: list[InputSource] = [source for source, flag in results if flag]

    if summary_mode:
        console.print(f"{len(changed)} of {len(sources)} input(s) would be dedented.")
    elif vlevel >= 0:
        for source, flag in results:
            if flag:
                console.print(console.styled(f"would dedent: {source.label}", fg="yellow"))
            elif vlevel > 0:
                console.print(console.styled(f"ok: {source.label}", fg="green"))

    logger.info("check: %d of %d input(s) would change", len(changed), len(sources))

    if encountered is not None:
        ctx.exit(encountered)
    if changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
