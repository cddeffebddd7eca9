# topmark:header:start
#
#   project      : ByteDent
#   file         : io.py
#   file_relpath : src/bytedent/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, query and render TOML configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are handed to
the rest of the config layer as plain `dict` structures.

The value getters never raise: a missing key or a value of the wrong shape
yields the default (or ``None``) and a log record, so a typo in a config file
degrades gracefully instead of aborting a run.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bytedent.config.keys import Toml
from bytedent.config.logging import get_logger
from bytedent.config.types import FileWriteStrategy

if TYPE_CHECKING:
    from pathlib import Path

    from bytedent.config.logging import BytedentLogger
    from bytedent.config.types import TomlTable

logger: BytedentLogger = get_logger(__name__)


class TomlLoadError(ValueError):
    """Raised by `load_toml_dict` in strict mode when a TOML file cannot be loaded."""


# --- TOML file I/O ---


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``bytedent.toml`` or ``pyproject.toml``).
        strict (bool): If True, raise instead of returning an empty dict on failure.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        TomlLoadError: In strict mode, when the file cannot be read or parsed.

    Notes:
        - Outside strict mode, errors are logged and an empty dict is returned.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if strict:
            raise TomlLoadError(f"Cannot read {path}: {e}") from e
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if strict:
            raise TomlLoadError(f"Invalid TOML in {path}: {e}") from e
        return {}


def load_defaults_dict() -> TomlTable:
    """Return ByteDent's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. Unset optional values
    (``length``, ``capacity``) are simply absent, since TOML has no ``null``.

    Returns:
        TomlTable: A new dict, so callers can mutate it safely.
    """
    return {
        Toml.KEY_ROOT: False,
        Toml.SECTION_INPUT: {
            Toml.KEY_FILES: [],
        },
        Toml.SECTION_OUTPUT: {},
        Toml.SECTION_WRITER: {
            Toml.KEY_STRATEGY: FileWriteStrategy.ATOMIC.value,
        },
    }


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string, dropping ``None`` entries.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def unknown_keys(table: TomlTable) -> list[str]:
    """Return dotted names of keys in ``table`` that are not part of the schema.

    Args:
        table (TomlTable): The ByteDent table (``bytedent.toml`` or ``[tool.bytedent]``).

    Returns:
        list[str]: Unknown keys, e.g. ``["input.lenght", "colour"]``.
    """
    unknown: list[str] = []
    for key, value in table.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            unknown.append(key)
            continue
        allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(key)
        if allowed is not None and isinstance(value, dict):
            sub: TomlTable = cast("TomlTable", value)
            unknown.extend(f"{key}.{k}" for k in sub if k not in allowed)
    return unknown


# --- Value getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict when missing or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        TomlTable: The sub-table or ``{}``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for '%s', got %r; ignoring", key, value)
    return {}


def get_bool_value(table: TomlTable, key: str, default: bool = False) -> bool:
    """Extract a boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (bool): Default value if the key is not found or not a bool.

    Returns:
        bool: The extracted boolean value, or ``default``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    logger.debug("Cannot coerce %r to bool, returning default (%r)", value, default)
    return default


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None


def get_string_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings; non-string items are dropped with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str]: The string items (possibly empty).
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected a list for '%s', got %r; ignoring", key, value)
        return []
    items: list[Any] = cast("list[Any]", value)
    out: list[str] = []
    for item in items:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string entry in '%s': %r", key, item)
    return out


def get_size_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional non-negative integer (a byte count).

    ``bool`` is rejected even though it is a subclass of ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The value, or ``None`` when absent or invalid.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected an integer for '%s', got %r; ignoring", key, value)
        return None
    if value < 0:
        logger.warning("Expected a non-negative size for '%s', got %d; ignoring", key, value)
        return None
    return value
