# topmark:header:start
#
#   project      : ByteDent
#   file         : test_bounds_property.py
#   file_relpath : tests/core/test_bounds_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for text block bounds (explicit length and NUL terminator).

The block ends at ``min(length, first NUL, buffer end)``; nothing past it is
ever read or written. These run many examples and are marked
``hypothesis_slow`` (run them with ``nox -s property_test``).
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from bytedent import dedent, dedent_inplace, find_common_indent
from tests.strategies_bytedent import s_block_bytes

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

SLOW_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=500,
)


@SLOW_SETTINGS
@given(data=s_block_bytes(), cut=st.integers(min_value=0, max_value=80))
def test_length_bound_equals_slicing(data: bytes, cut: int) -> None:
    """Bounding by ``length`` behaves exactly like slicing the block first."""
    assert dedent(data, cut) == dedent(data[:cut])
    assert find_common_indent(data, cut) == find_common_indent(data[:cut])


@SLOW_SETTINGS
@given(head=s_block_bytes(), tail=s_block_bytes())
def test_nul_terminates_the_block(head: bytes, tail: bytes) -> None:
    """Bytes after the first NUL never influence the result."""
    assert dedent(head + b"\0" + tail) == dedent(head)


@SLOW_SETTINGS
@given(data=s_block_bytes(), cut=st.integers(min_value=0, max_value=80))
def test_inplace_leaves_bytes_past_length_alone(data: bytes, cut: int) -> None:
    """In-place dedent with a length bound never touches the rest of the buffer."""
    buf = bytearray(data)
    bound: int = min(cut, len(data))

    written: int = dedent_inplace(buf, cut)

    assert buf[bound:] == data[bound:]
    assert bytes(buf[:written]) == dedent(data, cut)
