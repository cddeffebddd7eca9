# topmark:header:start
#
#   project      : ByteDent
#   file         : io.py
#   file_relpath : src/bytedent/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input resolution and file writers for Click commands.

Inputs:
    - Positional PATHS are used as given; entries containing glob magic are expanded.
    - A single ``-`` reads the content of one input from STDIN (as bytes).
    - Without PATHS, the ``[input] files`` patterns from the configuration are expanded.

Writers (selected by ``[writer] strategy``):
    - `write_atomic`: temporary sibling file + ``os.replace``.
    - `write_inplace`: dedent a ``bytearray`` in place and rewrite/truncate the file.

Higher-level concerns (config building, reporting) are handled elsewhere.
"""

from __future__ import annotations

import glob
import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from bytedent.cli.errors import BytedentUsageError, from_os_error
from bytedent.config.logging import get_logger
from bytedent.config.types import FileWriteStrategy
from bytedent.core.rewriter import dedent_inplace
from bytedent.core.text import block_end, flat_view

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bytedent.config import Config
    from bytedent.config.logging import BytedentLogger

logger: BytedentLogger = get_logger(__name__)

#: Label used for content read from STDIN.
STDIN_LABEL = "<stdin>"


@dataclass(frozen=True)
class InputSource:
    """One input to process.

    Attributes:
        path (Path | None): File to read, or ``None`` for STDIN.
    """

    path: Path | None

    @property
    def is_stdin(self) -> bool:
        """Whether this input is read from STDIN."""
        return self.path is None

    @property
    def label(self) -> str:
        """Display name used in reports."""
        return STDIN_LABEL if self.path is None else str(self.path)


def _expand(pattern: str) -> list[Path]:
    matches: list[str] = sorted(glob.glob(pattern, recursive=True))
    if not matches:
        logger.info("Pattern matched no files: %s", pattern)
    return [Path(m) for m in matches if Path(m).is_file()]


def resolve_inputs(paths: Sequence[str], config: Config) -> list[InputSource]:
    """Return the inputs to process, in order and without duplicates.

    Args:
        paths (Sequence[str]): Positional PATHS from the command line.
        config (Config): The effective configuration (for ``[input] files``).

    Returns:
        list[InputSource]: The inputs.

    Raises:
        BytedentUsageError: If ``-`` is combined with other paths, or nothing
            is left to process.
    """
    if "-" in paths:
        if len(paths) > 1:
            raise BytedentUsageError(
                "'-' (content from STDIN) cannot be combined with other paths."
            )
        return [InputSource(path=None)]

    candidates: list[Path] = []
    if paths:
        for raw in paths:
            if glob.has_magic(raw):
                candidates.extend(_expand(raw))
            else:
                candidates.append(Path(raw))
    else:
        logger.debug("No PATHS given; using config files patterns: %s", config.files)
        for pattern in config.files:
            candidates.extend(_expand(pattern))

    seen: set[Path] = set()
    inputs: list[InputSource] = []
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        inputs.append(InputSource(path=path))

    if not inputs:
        raise BytedentUsageError(
            "No input files. Pass PATHS, '-' for STDIN, or set [input] files in the config."
        )
    logger.debug("Resolved %d input(s)", len(inputs))
    return inputs


def read_input(source: InputSource) -> bytes:
    """Read the raw bytes of ``source``.

    Raises:
        BytedentError: Mapped from the underlying `OSError`.
    """
    if source.path is None:
        return sys.stdin.buffer.read()
    try:
        return source.path.read_bytes()
    except OSError as exc:
        raise from_os_error(source.path, exc) from exc


def splice(original: bytes, dedented: bytes, length: int | None) -> bytes:
    """Return ``dedented`` followed by the bytes of ``original`` past its text block.

    The text block ends at ``length``, the first NUL byte, or the end of
    ``original``. Whatever follows is kept verbatim so that writing the result
    back never drops data.
    """
    end: int = block_end(flat_view(original), length)
    return dedented + original[end:]


def write_atomic(path: Path, content: bytes) -> None:
    """Replace ``path`` with ``content`` through a temporary sibling file.

    The file mode of the original is preserved.

    Args:
        path (Path): File to replace.
        content (bytes): New file content.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Atomically replaced %s (%d byte(s))", path, len(content))


def write_inplace(path: Path, original: bytes, *, length: int | None) -> bytes:
    """Dedent ``original`` in place and overwrite ``path`` with the result.

    The text block is rewritten over itself with `dedent_inplace`; bytes past
    the block are kept. The file is then rewritten from offset 0 and truncated.

    Args:
        path (Path): File to rewrite.
        original (bytes): Current content of ``path``.
        length (int | None): Optional explicit length bound.

    Returns:
        bytes: The content written to ``path``.
    """
    buffer = bytearray(original)
    with flat_view(buffer) as view:
        end: int = block_end(view, length)
    written: int = dedent_inplace(buffer, length)
    # drop the stale remainder of the block (and its terminator), keep the tail
    del buffer[written:end]

    with path.open("r+b") as fh:
        fh.write(buffer)
        fh.truncate()
    logger.debug("Rewrote %s in place (%d -> %d byte(s))", path, len(original), len(buffer))
    return bytes(buffer)


def write_result(
    source: InputSource,
    original: bytes,
    content: bytes,
    *,
    length: int | None,
    strategy: FileWriteStrategy,
) -> None:
    """Write ``content`` back to the file behind ``source`` using ``strategy``.

    Raises:
        BytedentError: Mapped from the underlying `OSError`.
    """
    path: Path | None = source.path
    if path is None:
        raise BytedentUsageError("Cannot write results back to STDIN.")
    try:
        if strategy == FileWriteStrategy.IN_PLACE:
            write_inplace(path, original, length=length)
        else:
            write_atomic(path, content)
    except OSError as exc:
        raise from_os_error(path, exc) from exc

