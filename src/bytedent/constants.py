# topmark:header:start
#
#   project      : ByteDent
#   file         : constants.py
#   file_relpath : src/bytedent/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BYTEDENT_VERSION: str = get_version("bytedent")
except PackageNotFoundError:  # running from a source checkout
    BYTEDENT_VERSION = "0.0.0"

# Bytes that make up an indent run. Only ASCII space and tab count.
INDENT_BYTES: bytes = b" \t"

# Bytes that delimit lines. They are skipped as a run, never normalized.
NEWLINE_BYTES: bytes = b"\r\n"

# C-style terminator: ends an unbounded text block.
NUL: bytes = b"\0"

# Config file names discovered in each directory (in merge order).
PYPROJECT_TOML_NAME: str = "pyproject.toml"
BYTEDENT_TOML_NAME: str = "bytedent.toml"

# Section holding ByteDent settings inside pyproject.toml.
PYPROJECT_TOOL_SECTION: str = "bytedent"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "BYTEDENT_LOG_LEVEL"

VALUE_NOT_SET: str = "<not set>"
