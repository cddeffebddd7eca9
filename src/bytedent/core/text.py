# topmark:header:start
#
#   project      : ByteDent
#   file         : text.py
#   file_relpath : src/bytedent/core/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded byte views over text blocks.

A *text block* is a read-only byte range. Callers hand ByteDent any
bytes-like object (``bytes``, ``bytearray``, ``memoryview``) plus an optional
explicit length bound; this module normalizes both into a flat
``memoryview`` that ends at the first of:

- the explicit ``length`` bound (when given),
- the first NUL byte (the C-style terminator),
- the end of the underlying buffer.

The span helpers mirror ``strspn``/``strcspn`` over such a view and never
look past the ``end`` they are given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Union

from bytedent.constants import INDENT_BYTES, NEWLINE_BYTES, NUL

if TYPE_CHECKING:
    from collections.abc import Set

#: Buffer types accepted as a text block.
BytesLike = Union[bytes, bytearray, memoryview]

# Byte values as ints, since indexing a memoryview yields ints.
INDENT_SET: Final[frozenset[int]] = frozenset(INDENT_BYTES)
NEWLINE_SET: Final[frozenset[int]] = frozenset(NEWLINE_BYTES)


def flat_view(data: BytesLike) -> memoryview:
    """Return a flat, unsigned-byte ``memoryview`` over ``data``.

    Args:
        data (BytesLike): Any object exposing the buffer protocol.

    Returns:
        memoryview: A one-dimensional view with item size 1.

    Raises:
        TypeError: If ``data`` does not support the buffer protocol (e.g. ``str``).
    """
    if isinstance(data, str):
        raise TypeError("text blocks must be bytes-like; encode str input first")
    view = memoryview(data)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view


def block_end(view: memoryview, length: int | None = None) -> int:
    """Return the exclusive end offset of the text block held in ``view``.

    Args:
        view (memoryview): Flat byte view of the block.
        length (int | None): Explicit length bound, or ``None`` for "unbounded"
            (stop at the terminator or the end of the buffer).

    Returns:
        int: The block end, never larger than ``len(view)``.

    Raises:
        ValueError: If ``length`` is negative.
    """
    limit: int = len(view)
    if length is not None:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        limit = min(limit, length)
    # The terminator ends the block even when an explicit bound is larger.
    nul: int = view[:limit].tobytes().find(NUL)
    return nul if nul >= 0 else limit


def bounded_view(text: BytesLike, length: int | None = None) -> memoryview:
    """Return a read-only view over exactly the bytes of the text block.

    Args:
        text (BytesLike): The text block.
        length (int | None): Optional explicit length bound.

    Returns:
        memoryview: Read-only view sliced to the block end.
    """
    view: memoryview = flat_view(text)
    return view[: block_end(view, length)].toreadonly()


def span(view: memoryview, start: int, end: int, accept: Set[int]) -> int:
    """Return the length of the run starting at ``start`` made only of ``accept`` bytes."""
    pos: int = start
    while pos < end and view[pos] in accept:
        pos += 1
    return pos - start


def cspan(view: memoryview, start: int, end: int, reject: Set[int]) -> int:
    """Return the length of the run starting at ``start`` containing no ``reject`` bytes."""
    pos: int = start
    while pos < end and view[pos] not in reject:
        pos += 1
    return pos - start


def next_line(view: memoryview, start: int, end: int) -> int:
    """Return the offset of the line following the one at ``start``.

    Skips the content run, then the newline run that follows it.
    """
    pos: int = start + cspan(view, start, end, NEWLINE_SET)
    return pos + span(view, pos, end, NEWLINE_SET)
