# topmark:header:start
#
#   project      : ByteDent
#   file         : indent.py
#   file_relpath : src/bytedent/cli/commands/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent `indent` command.

Detect-only: prints the common indent of each input without rewriting it.
In the default format each line reads ``<label>: <size> byte(s) '<indent>'``
with tabs shown as ``\\t``, or ``<label>: none``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from bytedent.cli.cli_types import OutputFormat
from bytedent.cli.cmd_common import build_config, for_each_input, get_console
from bytedent.cli.io import resolve_inputs
from bytedent.cli.options import CONTEXT_SETTINGS, config_options, format_option, length_option
from bytedent.core.scanner import find_common_indent

if TYPE_CHECKING:
    from bytedent.cli.console import ConsoleLike
    from bytedent.cli.io import InputSource
    from bytedent.config import Config
    from bytedent.core.scanner import CommonIndent


@click.command(
    name="indent",
    help="Show the common indent of each input.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@config_options
@length_option
@format_option
def indent_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    length: int | None,
    output_format: OutputFormat | None,
) -> None:
    """Print the common indent of the given inputs.

    Args:
        paths (tuple[str, ...]): Files, glob patterns, or ``-`` for STDIN.
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to merge.
        length (int | None): Explicit length bound applied to each input.
        output_format (OutputFormat | None): ``default`` or ``json``.
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

    def _detect(_source: InputSource, data: bytes) -> CommonIndent | None:
        return find_common_indent(data, config.length)

    results, encountered = for_each_input(sources, _detect, console=console)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        payload: list[dict[str, object]] = [
            {
                "path": source.label,
                "size": common.size if common else 0,
                "indent": common.indent.decode("ascii") if common else "",
                "offset": common.offset if common else None,
            }
            for source, common in results
        ]
        console.print(json.dumps(payload, indent=2))
    else:
        for source, common in results:
            if common is None:
                console.print(f"{source.label}: none")
            else:
                shown: str = console.styled(f"'{common.escaped()}'", bold=True)
                console.print(f"{source.label}: {common.size} byte(s) {shown}")

    if encountered is not None:
        ctx.exit(encountered)
