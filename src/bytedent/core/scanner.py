# topmark:header:start
#
#   project      : ByteDent
#   file         : scanner.py
#   file_relpath : src/bytedent/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indent scanner: detect the common leading whitespace of a text block.

The scanner walks the lines of a bounded text block and computes the longest
run of space/tab bytes, starting at column 0, that is a byte-for-byte prefix
of every non-blank line.

Rules:
    * Blank lines (nothing but spaces/tabs before the newline run or the end
      of the block) never constrain the common indent.
    * Tabs and spaces are both indentation but they are not equal: the lines
      ``"  a"`` and ``"\\ta"`` share no indent.
    * A single non-blank line at column 0 means there is no common indent, and
      scanning stops right there.

The scanner is read-only and stateless; it returns a `CommonIndent` snapshot
or ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bytedent.config.logging import get_logger
from bytedent.core.text import (
    INDENT_SET,
    NEWLINE_SET,
    bounded_view,
    flat_view,
    next_line,
    span,
)

if TYPE_CHECKING:
    from bytedent.config.logging import BytedentLogger
    from bytedent.core.text import BytesLike

logger: BytedentLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CommonIndent:
    """Common indent shared by all non-blank lines of a text block.

    Attributes:
        offset (int): Byte offset, into the text block, of the line that anchors
            the indent. The block holds ``indent`` at ``[offset:offset + size]``.
        size (int): Length of the common indent in bytes (always > 0).
        indent (bytes): Owned copy of the indent bytes, used for byte-equality
            matching while rewriting.
    """

    offset: int
    size: int
    indent: bytes

    def matches(self, view: memoryview, pos: int, end: int) -> bool:
        """Return True if ``view[pos:end]`` starts with this indent."""
        return end - pos >= self.size and view[pos : pos + self.size] == self.indent

    def escaped(self) -> str:
        """Return the indent with tabs spelled as ``\\t`` for display."""
        return self.indent.decode("ascii").replace("\t", "\\t")


def indent_size(text: BytesLike, start: int = 0, end: int | None = None) -> int:
    """Return the number of space/tab bytes at the start of a line.

    Args:
        text (BytesLike): Buffer holding the line.
        start (int): Offset of the line start.
        end (int | None): Exclusive bound; defaults to the end of the buffer.

    Returns:
        int: Length of the indent run starting at ``start``.
    """
    view: memoryview = flat_view(text)
    stop: int = len(view) if end is None else min(end, len(view))
    return span(view, start, stop, INDENT_SET)


def _shared_prefix(view: memoryview, a: int, b: int, size: int) -> int:
    """Return how many of the first ``size`` bytes at ``a`` and ``b`` are equal."""
    for i in range(size):
        if view[a + i] != view[b + i]:
            return i
    return size


def find_common_indent(text: BytesLike, length: int | None = None) -> CommonIndent | None:
    """Find the common indent of every non-blank line in ``text``.

    Args:
        text (BytesLike): The text block.
        length (int | None): Optional explicit length bound. When ``None`` the
            block ends at the first NUL byte or at the end of the buffer.

    Returns:
        CommonIndent | None: The common indent, or ``None`` when the block is
            empty, holds only blank lines, or has a non-blank line at column 0.
    """
    view: memoryview = bounded_view(text, length)
    end: int = len(view)

    anchor: int = -1
    common: int = 0

    pos: int = 0
    while pos < end:
        size: int = span(view, pos, end, INDENT_SET)
        first: int = pos + size
        if first == end:
            # trailing whitespace-only line: nothing left to constrain
            break

        if view[first] in NEWLINE_SET:
            # blank lines never constrain the common indent, even if indented
            pos = first + span(view, first, end, NEWLINE_SET)
            continue

        if size == 0:
            logger.trace("Line at offset %d starts at column 0: no common indent", pos)
            common = 0
            break

        if anchor < 0:
            common = size
        else:
            common = _shared_prefix(view, anchor, pos, min(common, size))
        anchor = pos

        if common == 0:
            logger.trace("Indent at offset %d shares no prefix with the common indent", pos)
            break

        pos = next_line(view, first, end)

    if common == 0:
        return None

    result = CommonIndent(
        offset=anchor,
        size=common,
        indent=view[anchor : anchor + common].tobytes(),
    )
    logger.trace("Common indent: %d byte(s) anchored at offset %d", result.size, result.offset)
    return result
