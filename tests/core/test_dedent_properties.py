# topmark:header:start
#
#   project      : ByteDent
#   file         : test_dedent_properties.py
#   file_relpath : tests/core/test_dedent_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the dedent rewriter.

Asserts, over generated blocks:
1) dedenting is idempotent and never grows the text,
2) in-place output matches output into a disjoint destination,
3) fixed-capacity output is a prefix of the full result, with the documented
   truncation contract, and
4) for LF-only text the result agrees with `textwrap.dedent`.
"""

from __future__ import annotations

import textwrap

from hypothesis import given, settings
from hypothesis import strategies as st

from bytedent import dedent, dedent_inplace, dedent_into, dedented_size, find_common_indent
from tests.strategies_bytedent import s_block_bytes, s_indented_block, s_text


@given(data=s_block_bytes())
def test_dedent_is_idempotent(data: bytes) -> None:
    """A dedented block has nothing left to strip."""
    once: bytes = dedent(data)
    assert dedent(once) == once
    assert find_common_indent(once) is None


@given(data=s_block_bytes())
def test_dedent_never_grows(data: bytes) -> None:
    """The dedented text is never longer than the block."""
    assert len(dedent(data)) <= len(data)
    assert dedented_size(data) == len(dedent(data))


@given(data=s_block_bytes())
def test_inplace_matches_disjoint_destination(data: bytes) -> None:
    """Aliased and disjoint destinations produce identical bytes."""
    disjoint = bytearray(len(data) + 1)
    n_disjoint: int = dedent_into(data, disjoint)

    buf = bytearray(data)
    n_inplace: int = dedent_inplace(buf)

    assert n_inplace == n_disjoint
    assert buf[:n_inplace] == disjoint[:n_disjoint]


@settings(max_examples=50)
@given(data=s_block_bytes(), room=st.integers(min_value=0, max_value=64))
def test_capacity_contract(data: bytes, room: int) -> None:
    """Output is clamped to the capacity and terminated only when room is left."""
    full: bytes = dedent(data)
    capacity: int = min(room, len(data) + 1)
    dest = bytearray(b"\xff" * capacity)

    written: int = dedent_into(data, dest)

    assert written == min(capacity, len(full))
    assert dest[:written] == full[:written]
    if written < capacity:
        assert dest[written] == 0


@given(text=st.one_of(s_text(), s_indented_block()))
def test_agrees_with_textwrap_for_lf_text(text: str) -> None:
    """Without CR or NUL bytes the result matches the standard library."""
    assert dedent(text) == textwrap.dedent(text)
