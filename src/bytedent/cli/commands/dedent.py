# topmark:header:start
#
#   project      : ByteDent
#   file         : dedent.py
#   file_relpath : src/bytedent/cli/commands/dedent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent `dedent` command.

Removes the common indent from each input. By default the dedented content is
written to stdout; ``--apply`` writes it back to the files instead and
``--diff`` shows what would change.

Input modes supported:
  * **Paths mode (default)**: one or more PATHS (globs are expanded).
  * **Content on STDIN**: a single ``-`` as the sole PATH.
  * **Config mode**: no PATHS; ``[input] files`` patterns from the config.

Examples:
  Print a dedented snippet:

    $ printf '    a\\n      b\\n' | bytedent dedent -

  Dedent files in place and show what changed:

    $ bytedent dedent --apply --diff snippets/*.txt

  Dedent into a fixed 64-byte destination (exit 3 when truncated):

    $ bytedent dedent --capacity 64 snippet.txt
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
from bytedent.cli.errors import BytedentUsageError
from bytedent.cli.exit_codes import ExitCode
from bytedent.cli.io import resolve_inputs, write_result
from bytedent.cli.options import (
    CONTEXT_SETTINGS,
    capacity_option,
    config_options,
    length_option,
    strategy_option,
)
from bytedent.config.logging import get_logger
from bytedent.utils.diff import plain_patch, render_patch, unified_diff

if TYPE_CHECKING:
    from bytedent.cli.cmd_common import DedentOutcome
    from bytedent.cli.console import ConsoleLike
    from bytedent.cli.io import InputSource
    from bytedent.config import Config

logger = get_logger(__name__)


@click.command(
    name="dedent",
    help="Remove the common indent from files (or STDIN with '-').",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@config_options
@length_option
@capacity_option
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write results back to the files."
)
@click.option("--diff", is_flag=True, help="Show unified diffs instead of the dedented content.")
@strategy_option
def dedent_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    length: int | None,
    capacity: int | None,
    apply_changes: bool,
    diff: bool,
    write_strategy: str | None,
) -> None:
    """Dedent the given inputs.

    Args:
        paths (tuple[str, ...]): Files, glob patterns, or ``-`` for STDIN.
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to merge.
        length (int | None): Explicit length bound applied to each input.
        capacity (int | None): Fixed destination capacity (terminator included).
        apply_changes (bool): Write results back to the files.
        diff (bool): Show unified diffs instead of the content.
        write_strategy (str | None): Writer strategy override.

    Raises:
        BytedentUsageError: If ``--apply`` is combined with a fixed capacity.

    Exit Status:
        SUCCESS (0): All inputs were processed.
        TRUNCATED (3): At least one result did not fit the capacity.
        FILE_NOT_FOUND (66), PERMISSION_DENIED (77), IO_ERROR (74): An input
            could not be read or written.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(
        ctx,
        paths=paths,
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "length": length,
            "capacity": capacity,
            "apply_changes": apply_changes or None,
            "write_strategy": write_strategy,
        },
    )
    if config.apply_changes and config.capacity is not None:
        raise BytedentUsageError(
            f"{ctx.command.name}: --apply cannot be combined with a fixed capacity "
            "(results would be truncated on disk)."
        )

    sources: list[InputSource] = resolve_inputs(paths, config)
    vlevel: int = get_effective_verbosity(ctx, config)
    logger.debug(
        "dedent: %d input(s), apply=%s, diff=%s", len(sources), config.apply_changes, diff
    )

    def _handle(source: InputSource, data: bytes) -> DedentOutcome:
        outcome: DedentOutcome = dedent_bytes(
            data, length=config.length, capacity=config.capacity
        )

        if diff:
            patch: list[str] = unified_diff(data, outcome.content, label=source.label)
            if patch:
                rendered: str = render_patch(patch) if console.enable_color else plain_patch(patch)
                console.print(rendered, nl=False)
        elif not config.apply_changes or source.is_stdin:
            console.write_bytes(outcome.content)

        if outcome.truncated:
            console.warn(
                f"{source.label}: truncated to {outcome.written} of {outcome.required} byte(s)"
            )

        if config.apply_changes and not source.is_stdin and outcome.changed:
            write_result(
                source,
                data,
                outcome.content,
                length=config.length,
                strategy=config.write_strategy,
            )
            if vlevel >= 0:
                console.print(console.styled(f"Dedented {source.label}", fg="green"))
        return outcome

    results, encountered = for_each_input(sources, _handle, console=console)

    if vlevel > 0 and config.apply_changes:
        n_changed: int = sum(1 for _, outcome in results if outcome.changed)
        console.print(
            console.styled(f"Dedented {n_changed} of {len(sources)} file(s).", bold=True)
        )

    if encountered is not None:
        ctx.exit(encountered)
    if any(outcome.truncated for _, outcome in results):
        ctx.exit(ExitCode.TRUNCATED)
