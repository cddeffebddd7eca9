# topmark:header:start
#
#   project      : ByteDent
#   file         : keys.py
#   file_relpath : src/bytedent/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ByteDent configuration.

This module defines the authoritative string constants used when reading and
writing ByteDent configuration from TOML sources (``bytedent.toml`` and
``[tool.bytedent]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ByteDent configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - The ordering mirrors `load_defaults_dict` so defaults and parsing stay aligned.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_FILES: Final[str] = "files"
    KEY_LENGTH: Final[str] = "length"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_CAPACITY: Final[str] = "capacity"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_STRATEGY: Final[str] = "strategy"

    # Allowed top-level keys under [tool.bytedent] / bytedent.toml.
    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            SECTION_INPUT,
            SECTION_OUTPUT,
            SECTION_WRITER,
        }
    )

    # Allowed keys per section.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_INPUT: frozenset({KEY_FILES, KEY_LENGTH}),
        SECTION_OUTPUT: frozenset({KEY_CAPACITY}),
        SECTION_WRITER: frozenset({KEY_STRATEGY}),
    }
