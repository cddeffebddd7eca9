# topmark:header:start
#
#   project      : ByteDent
#   file         : cmd_common.py
#   file_relpath : src/bytedent/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
building the effective configuration, dedenting one input, and running a
per-input callback while mapping failures to exit codes. Message wording and
exit code policy stay in the commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, TypeVar

import click

from bytedent.cli.errors import BytedentConfigError, BytedentError
from bytedent.cli.io import read_input, splice
from bytedent.config.io import TomlLoadError
from bytedent.config.logging import get_logger
from bytedent.config.model import MutableConfig
from bytedent.core.rewriter import dedent, dedent_into, dedented_size

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bytedent.cli.console import ConsoleLike
    from bytedent.cli.exit_codes import ExitCode
    from bytedent.cli.io import InputSource
    from bytedent.config import Config
    from bytedent.config.logging import BytedentLogger
    from bytedent.config.types import ArgsLike

logger: BytedentLogger = get_logger(__name__)

T = TypeVar("T")


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by the ``cli`` group."""
    return ctx.find_root().obj["console"]


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order (tri-state aware):
        1. Config.verbosity_level if set (not None)
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    cfg_level = getattr(config, "verbosity_level", None) if config else None
    if cfg_level is not None:
        return int(cfg_level)
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    ctx: click.Context,
    *,
    paths: Sequence[str],
    no_config: bool,
    config_paths: Sequence[str],
    overrides: ArgsLike,
) -> Config:
    """Build the effective configuration for a command.

    Discovery starts at the first positional path that is not ``-`` (or the
    current directory), then extra ``--config`` files and ``overrides`` are
    merged on top.

    Args:
        ctx (click.Context): Current Click context.
        paths (Sequence[str]): Positional PATHS (discovery anchor).
        no_config (bool): Skip project config discovery.
        config_paths (Sequence[str]): Extra config files, merged in order.
        overrides (ArgsLike): CLI overrides (see `MutableConfig.apply_cli_args`).

    Returns:
        Config: The frozen configuration.

    Raises:
        BytedentConfigError: If an explicit ``--config`` file cannot be loaded.
    """
    anchors: list[Path] = [Path(p) for p in paths if p != "-"]
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            input_paths=anchors[:1],
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except TomlLoadError as exc:
        raise BytedentConfigError(str(exc)) from exc

    args: dict[str, object] = {"verbosity_level": get_effective_verbosity(ctx)}
    args.update(overrides)
    config: Config = draft.apply_cli_args(args).freeze()
    logger.debug("Effective config: %s", config)
    return config


@dataclass(frozen=True)
class DedentOutcome:
    """Result of dedenting one input.

    Attributes:
        original (bytes): The input bytes.
        content (bytes): The output bytes. Without a capacity this is the
            dedented text block followed by any bytes past the block; with a
            capacity it is what fit into the fixed destination.
        written (int): Bytes written for the text block (terminator excluded).
        required (int): Bytes the full dedented text block needs.
    """

    original: bytes
    content: bytes
    written: int
    required: int

    @property
    def changed(self) -> bool:
        """Whether the output differs from the input."""
        return self.content != self.original

    @property
    def truncated(self) -> bool:
        """Whether part of the dedented text did not fit the capacity."""
        return self.written < self.required


def dedent_bytes(data: bytes, *, length: int | None, capacity: int | None) -> DedentOutcome:
    """Dedent ``data`` as configured.

    Args:
        data (bytes): Input bytes.
        length (int | None): Optional explicit length bound.
        capacity (int | None): Fixed destination capacity, or ``None`` for a
            growable destination.

    Returns:
        DedentOutcome: The outcome.
    """
    if capacity is None:
        dedented: bytes = dedent(data, length)
        return DedentOutcome(
            original=data,
            content=splice(data, dedented, length),
            written=len(dedented),
            required=len(dedented),
        )

    dest = bytearray(capacity)
    written: int = dedent_into(data, dest, length=length, capacity=capacity)
    required: int = dedented_size(data, length)
    if written < required:
        logger.info("Capacity %d too small: %d of %d byte(s) written", capacity, written, required)
    return DedentOutcome(
        original=data,
        content=bytes(dest[:written]),
        written=written,
        required=required,
    )


def for_each_input(
    sources: Sequence[InputSource],
    handler: Callable[[InputSource, bytes], T],
    *,
    console: ConsoleLike,
) -> tuple[list[tuple[InputSource, T]], ExitCode | None]:
    """Read each input and call ``handler``; collect results and the first error.

    `BytedentError` raised while reading or handling an input is reported on
    the console and processing continues with the next input.

    Args:
        sources (Sequence[InputSource]): The inputs.
        handler (Callable[[InputSource, bytes], T]): Called with each input and its bytes.
        console (ConsoleLike): Console used to report per-input errors.

    Returns:
        tuple[list[tuple[InputSource, T]], ExitCode | None]: The successful
            results and the exit code of the first error, if any.
    """
    results: list[tuple[InputSource, T]] = []
    encountered: ExitCode | None = None
    for source in sources:
        try:
            data: bytes = read_input(source)
            results.append((source, handler(source, data)))
        except BytedentError as exc:
            logger.error("%s: %s", source.label, exc.format_message())
            console.error(exc.format_message())
            encountered = encountered or exc.exit_code
    return results, encountered
