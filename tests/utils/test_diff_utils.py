# topmark:header:start
#
#   project      : ByteDent
#   file         : test_diff_utils.py
#   file_relpath : tests/utils/test_diff_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: unified diffs of byte strings and their rendering."""

from __future__ import annotations

from bytedent.utils.diff import plain_patch, render_patch, unified_diff


def test_unified_diff_labels_and_lines() -> None:
    patch: list[str] = unified_diff(b"  a\n  b\n", b"a\nb\n", label="x.txt")

    assert patch[0] == "--- x.txt (original)\n"
    assert patch[1] == "+++ x.txt (dedented)\n"
    assert "-  a\n" in patch
    assert "+b\n" in patch


def test_unified_diff_equal_inputs_is_empty() -> None:
    assert unified_diff(b"same\n", b"same\n", label="x") == []


def test_unified_diff_tolerates_invalid_utf8() -> None:
    patch: list[str] = unified_diff(b"  \xff\n", b"\xff\n", label="bin")

    assert "+\ufffd\n" in patch


def test_plain_patch_terminates_every_line() -> None:
    patch: list[str] = unified_diff(b"  a", b"a", label="eof")

    rendered: str = plain_patch(patch)

    assert rendered.endswith("\n")
    assert "+a\n" in rendered


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and a sequence of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1: str = render_patch(diff_text)
    s2: str = render_patch(diff_text.splitlines(keepends=True))

    assert s1 == s2
    assert "foo" in s1 and "bar" in s1


def test_render_patch_shows_tabs() -> None:
    rendered: str = render_patch(["+\tx\n"])

    assert "\\t" in rendered


def test_render_patch_empty_input_is_safe() -> None:
    assert render_patch("") == ""
