# topmark:header:start
#
#   project      : ByteDent
#   file         : types.py
#   file_relpath : src/bytedent/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small shared types for the config layer.

Kept free of project imports so that `bytedent.config.io`, the config model
and the CLI can all import from here.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

#: CLI override mapping passed to `MutableConfig.apply_cli_args`.
ArgsLike = Mapping[str, Any]

#: A parsed TOML table, unwrapped to plain Python values.
TomlTable = dict[str, Any]


class FileWriteStrategy(str, Enum):
    """How ``dedent --apply`` puts results back on disk.

    Attributes:
        ATOMIC: Write a sibling temp file, then ``os.replace`` the original.
        IN_PLACE: Dedent the file's own bytes, rewrite, then truncate.
    """

    ATOMIC = "atomic"
    IN_PLACE = "inplace"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Look up a strategy by value or member name, ignoring case.

        ``None`` and unknown names both give ``None``; callers keep their
        current strategy in that case.
        """
        if key_name is None:
            return None
        wanted: str = key_name.strip().lower()
        return next(
            (m for m in cls if wanted in (m.value, m.name.lower())),
            None,
        )
