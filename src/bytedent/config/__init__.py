# topmark:header:start
#
#   project      : ByteDent
#   file         : __init__.py
#   file_relpath : src/bytedent/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for ByteDent.

Configuration is read from ``bytedent.toml`` files and the ``[tool.bytedent]``
table of ``pyproject.toml``, merged with built-in defaults and CLI overrides,
and frozen into an immutable `Config` snapshot.
"""

from __future__ import annotations

from bytedent.config.model import Config, MutableConfig
from bytedent.config.types import FileWriteStrategy

__all__ = [
    "Config",
    "FileWriteStrategy",
    "MutableConfig",
]
