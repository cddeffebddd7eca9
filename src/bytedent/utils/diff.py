# topmark:header:start
#
#   project      : ByteDent
#   file         : diff.py
#   file_relpath : src/bytedent/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

Inputs are raw bytes; they are decoded as UTF-8 with replacement characters
for display only. Line endings are kept so that CR/LF changes stay visible.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from bytedent.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(original: bytes, updated: bytes, *, label: str) -> list[str]:
    """Return a unified diff between two byte strings.

    Args:
        original: Content before dedenting.
        updated: Content after dedenting.
        label: Name shown in the ``---``/``+++`` header lines.

    Returns:
        The diff lines (with line endings); empty when the contents are equal.
    """
    before: list[str] = original.decode("utf-8", errors="replace").splitlines(keepends=True)
    after: list[str] = updated.decode("utf-8", errors="replace").splitlines(keepends=True)
    lines = list(
        difflib.unified_diff(
            before,
            after,
            fromfile=f"{label} (original)",
            tofile=f"{label} (dedented)",
        )
    )
    logger.trace("Diff for %s: %d line(s)", label, len(lines))
    return lines


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # show control characters explicitly
        content = line.replace("\r", "\\r").replace("\t", "\\t")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers is True:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)


def plain_patch(patch: Sequence[str]) -> str:
    """Render a unified diff without color, ensuring each line ends with a newline."""
    return "".join(line if line.endswith("\n") else line + "\n" for line in patch)
