# topmark:header:start
#
#   project      : ByteDent
#   file         : test_text.py
#   file_relpath : tests/core/test_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded views and span helpers."""

from __future__ import annotations

import array

import pytest

from bytedent.core.text import (
    INDENT_SET,
    NEWLINE_SET,
    block_end,
    bounded_view,
    cspan,
    flat_view,
    next_line,
    span,
)


@pytest.mark.parametrize(
    ("data", "length", "expected"),
    [
        (b"abc", None, 3),
        (b"abc", 2, 2),
        (b"abc", 10, 3),
        (b"a\0bc", None, 1),
        (b"a\0bc", 3, 1),
        (b"ab\0", 1, 1),
        (b"", None, 0),
    ],
)
def test_block_end(data: bytes, length: int | None, expected: int) -> None:
    """The block ends at the bound, the first NUL, or the buffer end."""
    assert block_end(flat_view(data), length) == expected


def test_block_end_on_sliced_view() -> None:
    """Offsets are relative to the view, not to the underlying buffer."""
    view = memoryview(b"\0xy\0z")[1:]
    assert block_end(view) == 2


def test_bounded_view_is_read_only() -> None:
    """The bounded view never allows writes to the caller's buffer."""
    view = bounded_view(bytearray(b"ab\0cd"))
    assert view.readonly
    assert view.tobytes() == b"ab"


def test_flat_view_casts_wide_items() -> None:
    """Multi-byte item buffers are viewed as unsigned bytes."""
    arr = array.array("H", [0x2020, 0x0A61])
    view = flat_view(arr)
    assert view.format == "B"
    assert len(view) == 4


def test_span_helpers() -> None:
    """span/cspan/next_line stop at the given end."""
    view = flat_view(b" \tab\r\n\ncd")
    assert span(view, 0, len(view), INDENT_SET) == 2
    assert cspan(view, 2, len(view), NEWLINE_SET) == 2
    assert span(view, 4, len(view), NEWLINE_SET) == 3
    assert next_line(view, 0, len(view)) == 7
    assert next_line(view, 7, len(view)) == 9
    assert span(view, 0, 1, INDENT_SET) == 1
