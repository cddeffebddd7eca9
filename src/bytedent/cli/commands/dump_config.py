# topmark:header:start
#
#   project      : ByteDent
#   file         : dump_config.py
#   file_relpath : src/bytedent/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent `dump-config` command.

Emits the effective ByteDent configuration as TOML after applying defaults,
discovered config files, ``--config`` files and CLI overrides. The output is
wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers for easy
parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytedent.cli.cmd_common import build_config, get_console
from bytedent.cli.options import (
    CONTEXT_SETTINGS,
    capacity_option,
    config_options,
    length_option,
    strategy_option,
)
from bytedent.config.io import to_toml
from bytedent.config.logging import get_logger

if TYPE_CHECKING:
    from bytedent.cli.console import ConsoleLike
    from bytedent.config import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged ByteDent configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@config_options
@length_option
@capacity_option
@strategy_option
def dump_config_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    length: int | None,
    capacity: int | None,
    write_strategy: str | None,
) -> None:
    """Dump the final merged configuration as TOML.

    PATHS only anchor config discovery; they are not read.

    Args:
        paths (tuple[str, ...]): Optional discovery anchor(s).
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to merge.
        length (int | None): Length bound override.
        capacity (int | None): Capacity override.
        write_strategy (str | None): Writer strategy override.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(
        ctx,
        paths=paths,
        no_config=no_config,
        config_paths=config_paths,
        overrides={"length": length, "capacity": capacity, "write_strategy": write_strategy},
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    merged_config: str = to_toml(config.to_toml_dict())
    console.print("# Merged ByteDent config (TOML):")
    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print()
    console.print("# === BEGIN ===")
    console.print(merged_config, nl=False)
    console.print("# === END ===")
