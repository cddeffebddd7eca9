# topmark:header:start
#
#   project      : ByteDent
#   file         : rewriter.py
#   file_relpath : src/bytedent/core/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dedent rewriter: re-emit a text block with its common indent removed.

All call shapes share one routine, `_rewrite`, which copies the block line by
line into a destination view while:

    * skipping the common indent on every line that starts with it,
    * reducing blank lines to their newline run (any whitespace is dropped),
    * never writing more than ``capacity`` bytes,
    * writing a single NUL terminator after the content when room is left.

Call shapes:
    - `dedent_into`: fixed-capacity destination, possibly the source itself.
    - `dedent_inplace`: the source buffer is the destination.
    - `dedent`: growable destination; returns a new value and never truncates.
    - `dedented_size`: how many bytes `dedent_into` needs for the full result.

Truncation contract:
    The return value is always the number of bytes **actually written**
    (terminator excluded). When the dedented text does not fit, exactly
    ``capacity`` bytes are written, no terminator follows, and the function
    returns ``capacity``. Compare the result against the capacity, or size the
    destination with `dedented_size`, to tell the two apart.

In-place safety:
    The rewritten text is never longer than the original, so the write offset
    never passes the read offset. When source and destination share memory,
    each chunk is materialized before it is written (``memmove`` semantics).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from bytedent.config.logging import get_logger
from bytedent.core.scanner import find_common_indent
from bytedent.core.text import (
    INDENT_SET,
    NEWLINE_SET,
    bounded_view,
    cspan,
    flat_view,
    span,
)

if TYPE_CHECKING:
    from bytedent.config.logging import BytedentLogger
    from bytedent.core.scanner import CommonIndent
    from bytedent.core.text import BytesLike

logger: BytedentLogger = get_logger(__name__)


def _copy_bytes(
    dest: memoryview,
    dest_pos: int,
    src: memoryview,
    src_pos: int,
    size: int,
    *,
    aliased: bool,
) -> None:
    """Copy ``size`` bytes from ``src[src_pos:]`` to ``dest[dest_pos:]``."""
    if size <= 0:
        return
    if aliased:
        # same buffer, same start: dest_pos never passes src_pos
        if dest_pos == src_pos:
            return
        dest[dest_pos : dest_pos + size] = src[src_pos : src_pos + size].tobytes()
    else:
        dest[dest_pos : dest_pos + size] = src[src_pos : src_pos + size]


def _rewrite(src: memoryview, dest: memoryview, capacity: int, *, aliased: bool) -> int:
    """Dedent the bounded block ``src`` into ``dest``; return the bytes written.

    Args:
        src (memoryview): Bounded, flat view of the text block.
        dest (memoryview): Flat, writable destination view.
        capacity (int): Maximum number of bytes to write (``<= len(dest)``).
        aliased (bool): Whether ``src`` and ``dest`` are the same buffer (in place).

    Returns:
        int: Number of bytes written, terminator excluded.
    """
    end: int = len(src)
    common: CommonIndent | None = find_common_indent(src)

    written: int = 0
    pos: int = 0
    while written < capacity and pos < end:
        if common is not None and common.matches(src, pos, end):
            pos += common.size

        content_start: int = pos + span(src, pos, end, INDENT_SET)
        content: int = cspan(src, content_start, end, NEWLINE_SET)
        newlines: int = span(src, content_start + content, end, NEWLINE_SET)
        line_end: int = content_start + content + newlines

        if content > 0:
            chunk_start: int = pos
        elif newlines > 0:
            # blank line: keep only its newline run
            chunk_start = line_end - newlines
        else:
            break

        size: int = min(line_end - chunk_start, capacity - written)
        _copy_bytes(dest, written, src, chunk_start, size, aliased=aliased)
        written += size
        pos = line_end

    if written < capacity:
        dest[written] = 0
    elif pos < end:
        logger.debug("Output truncated at %d byte(s); no terminator written", capacity)

    return written


def dedent_into(
    text: BytesLike | None,
    dest: BytesLike | None,
    *,
    length: int | None = None,
    capacity: int | None = None,
) -> int:
    """Dedent ``text`` into the fixed-capacity buffer ``dest``.

    ``dest`` may be the same buffer as ``text`` (see `dedent_inplace`), or another
    range of the buffer ``text`` views.

    Args:
        text (BytesLike | None): The text block; ``None`` is an empty block.
        dest (BytesLike | None): Writable destination buffer; ``None`` is a no-op.
        length (int | None): Optional explicit length bound for ``text``.
        capacity (int | None): Number of bytes ``dest`` may receive, terminator
            included. Defaults to ``len(dest)``.

    Returns:
        int: Bytes written, terminator excluded. Equal to ``capacity`` when the
            output did not fit (no terminator is written in that case).

    Raises:
        TypeError: If ``dest`` is read-only.
        ValueError: If ``capacity`` is negative or exceeds the size of ``dest``.
    """
    if dest is None:
        return 0

    dview: memoryview = flat_view(dest)
    if dview.readonly:
        raise TypeError("destination buffer is read-only")
    if capacity is None:
        capacity = len(dview)
    elif capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    elif capacity > len(dview):
        raise ValueError(f"capacity {capacity} exceeds destination size {len(dview)}")
    if capacity == 0:
        return 0

    src: memoryview = bounded_view(b"" if text is None else text, length)
    aliased: bool = text is dest
    if not aliased and src.obj is dview.obj:
        # different ranges of one buffer: read a snapshot so writes never reach unread input
        src = memoryview(src.tobytes())
    written: int = _rewrite(src, dview, capacity, aliased=aliased)
    logger.trace("Dedented %d byte(s) into %d byte(s) (aliased=%s)", len(src), written, aliased)
    return written


def dedent_inplace(
    buffer: bytearray | memoryview,
    length: int | None = None,
    *,
    resize: bool = False,
) -> int:
    """Dedent ``buffer`` over itself.

    This is destructive: the dedented text replaces the original bytes at the
    start of ``buffer``. Capacity is ``length`` when given (so bytes past the
    block are left alone), otherwise the whole buffer.

    Args:
        buffer (bytearray | memoryview): Writable buffer holding the text block.
        length (int | None): Optional explicit length bound.
        resize (bool): If True, truncate ``buffer`` (which must then be a
            ``bytearray``) to the dedented length afterwards.

    Returns:
        int: Length of the dedented text, terminator excluded.

    Raises:
        TypeError: If ``resize`` is requested for a buffer that cannot shrink.
    """
    if resize and not isinstance(buffer, bytearray):
        raise TypeError(f"cannot resize a {type(buffer).__name__}; pass a bytearray")

    with flat_view(buffer) as view:
        size: int = len(view)
    capacity: int = size if length is None else min(max(length, 0), size)

    written: int = dedent_into(buffer, buffer, length=length, capacity=capacity)
    if resize:
        del buffer[written:]  # type: ignore[union-attr]
    return written


@overload
def dedent(text: str, length: int | None = None) -> str: ...


@overload
def dedent(text: bytes | bytearray | memoryview, length: int | None = None) -> bytes: ...


def dedent(text: str | BytesLike, length: int | None = None) -> str | bytes:
    """Return a dedented copy of ``text``.

    This is the growable variant: the result always holds the full dedented
    text. ``str`` input is processed through its UTF-8 encoding and returned as
    ``str``; ``length`` then counts characters. Any bytes-like input yields
    ``bytes``.

    Args:
        text (str | BytesLike): The text block.
        length (int | None): Optional explicit length bound.

    Returns:
        str | bytes: The dedented text.

    Example:
        >>> dedent("    if x:\\n        y()\\n")
        'if x:\\n    y()\\n'
    """
    if isinstance(text, str):
        if length is not None:
            if length < 0:
                raise ValueError(f"length must be >= 0, got {length}")
            text = text[:length]
        return dedent(text.encode("utf-8")).decode("utf-8")

    buffer = bytearray(bounded_view(text, length))
    dedent_inplace(buffer, resize=True)
    return bytes(buffer)


def dedented_size(text: BytesLike, length: int | None = None) -> int:
    """Return the number of bytes the full dedented text occupies.

    A destination of ``dedented_size(text) + 1`` bytes receives the whole
    text plus its terminator.

    Args:
        text (BytesLike): The text block.
        length (int | None): Optional explicit length bound.

    Returns:
        int: Size of the dedented text, terminator excluded.
    """
    src: memoryview = bounded_view(text, length)
    scratch = memoryview(bytearray(len(src)))
    return _rewrite(src, scratch, len(scratch), aliased=False)
