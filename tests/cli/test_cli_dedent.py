# topmark:header:start
#
#   project      : ByteDent
#   file         : test_cli_dedent.py
#   file_relpath : tests/cli/test_cli_dedent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `dedent` command.

Covers printing to stdout, writing back with both writer strategies, length
and capacity bounds, diffs, and the input/usage error exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from bytedent.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_dedent_stdin_prints_bytes(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["dedent", "-"], input_bytes=b"    a\n      b\n")

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"a\n  b\n"


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_dedent_stdin_round_trip_without_deprecation_warnings(isolation: Path) -> None:
    """Raw STDIN reads and raw stdout writes use the interpreter's byte streams."""
    result: Result = run_cli_in(isolation, ["dedent", "-"], input_bytes=b"\t\xffa\r\n")

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"\xffa\r\n"


def test_dedent_stdin_with_apply_still_prints(isolation: Path) -> None:
    """Content read from STDIN has no file to write back to."""
    result: Result = run_cli_in(
        isolation, ["dedent", "--apply", "-"], input_bytes=b"\ta\n\tb"
    )

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"a\nb"


def test_dedent_file_prints_without_touching_it(isolation: Path) -> None:
    target: Path = isolation / "snippet.txt"
    target.write_bytes(b"  x\n  y\n")

    result: Result = run_cli_in(isolation, ["dedent", "snippet.txt"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"x\ny\n"
    assert target.read_bytes() == b"  x\n  y\n"


def test_dedent_keeps_bytes_past_length(isolation: Path) -> None:
    """Bytes after the ``--length`` bound are passed through unchanged."""
    result: Result = run_cli_in(
        isolation, ["dedent", "--length", "8", "-"], input_bytes=b"  a\n  b\n  c\n"
    )

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"a\nb\n  c\n"


@pytest.mark.parametrize("strategy", ["atomic", "inplace"])
def test_dedent_apply_rewrites_file(isolation: Path, strategy: str) -> None:
    target: Path = isolation / f"apply_{strategy}.txt"
    target.write_bytes(b"    def f():\n        pass\n\n    x = 1\n")

    result: Result = run_cli_in(
        isolation, ["dedent", "--apply", "--strategy", strategy, target.name]
    )

    assert_SUCCESS(result)
    assert target.read_bytes() == b"def f():\n    pass\n\nx = 1\n"
    assert f"Dedented {target.name}" in result.output


@pytest.mark.parametrize("strategy", ["atomic", "inplace"])
def test_dedent_apply_keeps_tail_after_nul(isolation: Path, strategy: str) -> None:
    """The text block ends at the first NUL; the NUL and everything after it survive."""
    target: Path = isolation / f"nul_{strategy}.bin"
    target.write_bytes(b"  a\n  b\0  tail")

    result: Result = run_cli_in(
        isolation, ["dedent", "--apply", "--strategy", strategy, target.name]
    )

    assert_SUCCESS(result)
    assert target.read_bytes() == b"a\nb\0  tail"


def test_dedent_apply_strategy_from_config(isolation: Path) -> None:
    (isolation / "bytedent.toml").write_text(
        'root = true\n\n[writer]\nstrategy = "inplace"\n', encoding="utf-8"
    )
    target: Path = isolation / "cfg_strategy.txt"
    target.write_bytes(b"\t\tone\n\t\ttwo\n")

    result: Result = run_cli_in(isolation, ["dedent", "--apply", target.name])

    assert_SUCCESS(result)
    assert target.read_bytes() == b"one\ntwo\n"


def test_dedent_apply_unchanged_file_is_not_reported(isolation: Path) -> None:
    target: Path = isolation / "flat.txt"
    target.write_bytes(b"a\n  b\n")

    result: Result = run_cli_in(isolation, ["dedent", "--apply", target.name])

    assert_SUCCESS(result)
    assert "Dedented" not in result.output
    assert target.read_bytes() == b"a\n  b\n"


def test_dedent_capacity_fits(isolation: Path) -> None:
    result: Result = run_cli_in(
        isolation, ["dedent", "--capacity", "16", "-"], input_bytes=b"  ab\n  cd\n"
    )

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"ab\ncd\n"


def test_dedent_capacity_truncates(isolation: Path) -> None:
    result: Result = run_cli_in(
        isolation, ["dedent", "--capacity", "4", "-"], input_bytes=b"  ab\n  cd\n"
    )

    assert result.exit_code == ExitCode.TRUNCATED, result.output
    assert result.stdout_bytes.startswith(b"ab\nc")
    assert "truncated to 4 of 6 byte(s)" in result.output


def test_dedent_apply_with_capacity_is_rejected(isolation: Path) -> None:
    target: Path = isolation / "cap.txt"
    target.write_bytes(b"  a\n")

    result: Result = run_cli_in(
        isolation, ["dedent", "--apply", "--capacity", "8", target.name]
    )

    assert_USAGE_ERROR(result)
    assert target.read_bytes() == b"  a\n"


def test_dedent_apply_with_config_capacity_is_rejected(isolation: Path) -> None:
    (isolation / "bytedent.toml").write_text(
        "root = true\n\n[output]\ncapacity = 8\n", encoding="utf-8"
    )
    target: Path = isolation / "cfg_cap.txt"
    target.write_bytes(b"  a\n")

    result: Result = run_cli_in(isolation, ["dedent", "--apply", target.name])

    assert_USAGE_ERROR(result)


def test_dedent_diff_shows_changes(isolation: Path) -> None:
    target: Path = isolation / "diffme.txt"
    target.write_bytes(b"  a\n  b\n")

    result: Result = run_cli_in(isolation, ["--no-color", "dedent", "--diff", target.name])

    assert_SUCCESS(result)
    assert "--- diffme.txt (original)" in result.output
    assert "+++ diffme.txt (dedented)" in result.output
    assert "-  a" in result.output
    assert "+a" in result.output
    assert target.read_bytes() == b"  a\n  b\n"


def test_dedent_diff_is_empty_when_unchanged(isolation: Path) -> None:
    target: Path = isolation / "nodiff.txt"
    target.write_bytes(b"a\nb\n")

    result: Result = run_cli_in(isolation, ["--no-color", "dedent", "--diff", target.name])

    assert_SUCCESS(result)
    assert result.output == ""


def test_dedent_uses_config_files_patterns(isolation: Path) -> None:
    (isolation / "bytedent.toml").write_text(
        'root = true\n\n[input]\nfiles = ["snips/*.txt"]\n', encoding="utf-8"
    )
    snips: Path = isolation / "snips"
    snips.mkdir()
    (snips / "a.txt").write_bytes(b" 1\n")
    (snips / "b.txt").write_bytes(b"  2\n")
    (isolation / "other.txt").write_bytes(b"   3\n")

    result: Result = run_cli_in(isolation, ["dedent", "--apply"])

    assert_SUCCESS(result)
    assert (snips / "a.txt").read_bytes() == b"1\n"
    assert (snips / "b.txt").read_bytes() == b"2\n"
    assert (isolation / "other.txt").read_bytes() == b"   3\n"


def test_dedent_glob_argument(isolation: Path) -> None:
    (isolation / "g1.txt").write_bytes(b" a\n")
    (isolation / "g2.txt").write_bytes(b" b\n")

    result: Result = run_cli_in(isolation, ["dedent", "g*.txt"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"a\nb\n"


def test_dedent_missing_file(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["dedent", "does_not_exist.txt"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "does_not_exist.txt" in result.output


def test_dedent_missing_file_does_not_stop_others(isolation: Path) -> None:
    target: Path = isolation / "present.txt"
    target.write_bytes(b"  ok\n")

    result: Result = run_cli_in(
        isolation, ["dedent", "--apply", "missing_first.txt", target.name]
    )

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert target.read_bytes() == b"ok\n"


def test_dedent_without_inputs_is_usage_error(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["dedent"])

    assert_USAGE_ERROR(result)
    assert "No input files" in result.output


def test_dedent_stdin_dash_must_be_alone(isolation: Path) -> None:
    (isolation / "x.txt").write_bytes(b" x\n")

    result: Result = run_cli_in(isolation, ["dedent", "-", "x.txt"], input_bytes=b" y\n")

    assert_USAGE_ERROR(result)


def test_dedent_invalid_extra_config(isolation: Path) -> None:
    bad: Path = isolation / "bad_extra.toml"
    bad.write_text("[input\n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["dedent", "--config", bad.name, "-"], input_bytes=b"")

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
