# topmark:header:start
#
#   project      : ByteDent
#   file         : model.py
#   file_relpath : src/bytedent/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the CLI commands.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       ``pyproject.toml`` (``[tool.bytedent]``) is merged first, then ``bytedent.toml``
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) CLI overrides

Path semantics:
    - ``[input] files`` entries are glob patterns; relative ones are anchored
      to the directory of the config file that declares them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from bytedent.config.io import (
    get_bool_value,
    get_size_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    unknown_keys,
)
from bytedent.config.keys import Toml
from bytedent.config.logging import get_logger
from bytedent.config.types import FileWriteStrategy
from bytedent.constants import (
    BYTEDENT_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bytedent.config.logging import BytedentLogger
    from bytedent.config.types import ArgsLike, TomlTable

logger: BytedentLogger = get_logger(__name__)

# Marker recorded in `config_files` when CLI overrides are applied.
CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ByteDent.

    This snapshot is produced by `MutableConfig.freeze` after merging defaults,
    project files, extra config files, and CLI overrides.

    Attributes:
        timestamp (str): ISO-formatted timestamp when the draft was created.
        verbosity_level (int | None): None = inherit, 0 = terse, 1+ = verbose output.
        apply_changes (bool | None): Whether to write results back to files.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        files (tuple[str, ...]): Default input glob patterns (absolute when declared in a file).
        length (int | None): Explicit length bound applied to each input; None = unbounded.
        capacity (int | None): Fixed destination capacity; None = growable destination.
        write_strategy (FileWriteStrategy): How ``--apply`` writes files.
    """

    timestamp: str
    verbosity_level: int | None
    apply_changes: bool | None
    config_files: tuple[Path | str, ...]
    files: tuple[str, ...]
    length: int | None
    capacity: int | None
    write_strategy: FileWriteStrategy

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: A dict shaped like ``bytedent.toml``; unset values are ``None``
                and dropped by the renderer.
        """
        return {
            Toml.SECTION_INPUT: {
                Toml.KEY_FILES: list(self.files),
                Toml.KEY_LENGTH: self.length,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_CAPACITY: self.capacity,
            },
            Toml.SECTION_WRITER: {
                Toml.KEY_STRATEGY: self.write_strategy.value,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            timestamp=self.timestamp,
            verbosity_level=self.verbosity_level,
            apply_changes=self.apply_changes,
            config_files=list(self.config_files),
            files=list(self.files),
            length=self.length,
            capacity=self.capacity,
            write_strategy=self.write_strategy,
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration draft used while discovering and merging sources.

    Optional fields use ``None`` for "not set by this layer" so that
    `merge_with` can tell an explicit value from an absent one.
    """

    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    verbosity_level: int | None = None
    apply_changes: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    files: list[str] = field(default_factory=lambda: [])
    length: int | None = None
    capacity: int | None = None
    write_strategy: FileWriteStrategy | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            timestamp=self.timestamp,
            verbosity_level=self.verbosity_level,
            apply_changes=self.apply_changes,
            config_files=tuple(self.config_files),
            files=tuple(self.files),
            length=self.length,
            capacity=self.capacity,
            write_strategy=self.write_strategy or FileWriteStrategy.ATOMIC,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a draft from the built-in defaults (no I/O)."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None) -> MutableConfig:
        """Build a draft from a parsed ByteDent table.

        Args:
            data (TomlTable): Contents of ``bytedent.toml`` or ``[tool.bytedent]``.
            config_file (Path | None): The file ``data`` came from; relative
                ``files`` patterns are anchored to its directory.

        Returns:
            MutableConfig: The draft; values absent from ``data`` stay unset.
        """
        for key in unknown_keys(data):
            logger.warning("Unknown config key '%s' in %s", key, config_file or "<defaults>")

        input_tbl: TomlTable = get_table_value(data, Toml.SECTION_INPUT)
        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        writer_tbl: TomlTable = get_table_value(data, Toml.SECTION_WRITER)

        draft = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        cfg_dir: Path | None = config_file.parent.resolve() if config_file is not None else None
        for pattern in get_string_list_value(input_tbl, Toml.KEY_FILES):
            if cfg_dir is not None and not Path(pattern).is_absolute():
                anchored: str = str(cfg_dir / pattern)
                logger.debug("Anchored config files entry against %s: %s", cfg_dir, anchored)
                draft.files.append(anchored)
            else:
                draft.files.append(pattern)

        draft.length = get_size_value_or_none(input_tbl, Toml.KEY_LENGTH)
        draft.capacity = get_size_value_or_none(output_tbl, Toml.KEY_CAPACITY)

        raw_strategy: str | None = get_string_value_or_none(writer_tbl, Toml.KEY_STRATEGY)
        draft.write_strategy = FileWriteStrategy.from_name(raw_strategy)
        if raw_strategy is not None and draft.write_strategy is None:
            valid_values: str = ", ".join(e.value for e in FileWriteStrategy)
            logger.warning(
                "Invalid writer strategy '%s' (allowed values: %s); ignoring",
                raw_strategy,
                valid_values,
            )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``bytedent.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.bytedent]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.
            strict (bool): Raise `TomlLoadError` when the file cannot be parsed.

        Returns:
            MutableConfig | None: The draft, or None if ``pyproject.toml`` has no
                ``[tool.bytedent]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path, strict=strict)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def _declares_root(cls, path: Path) -> bool:
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
        return get_bool_value(data, Toml.KEY_ROOT)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last; within a directory
        ``pyproject.toml`` comes before ``bytedent.toml`` so the latter wins. A
        config declaring ``root = true`` stops the upward walk after its directory.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, BYTEDENT_TOML_NAME):
                p: Path = cur / name
                if p.is_file():
                    dir_entries.append(p)
                    logger.debug("Discovered config file: %s", p)
                    if cls._declares_root(p):
                        root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        input_paths: Iterable[Path] | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            input_paths (Iterable[Path] | None): Discovery anchor(s). The first path
                (or CWD if none) is used as the starting directory for upward discovery.
            extra_config_files (Iterable[Path] | None): Explicit additional config
                files to merge after discovery (their given order). These are parsed
                strictly.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        anchors: list[Path] = list(input_paths or [])
        anchor: Path = anchors[0] if anchors else Path.cwd()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra), strict=True)
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            timestamp=self.timestamp,
            verbosity_level=other.verbosity_level
            if other.verbosity_level is not None
            else self.verbosity_level,
            apply_changes=other.apply_changes
            if other.apply_changes is not None
            else self.apply_changes,
            config_files=self.config_files + other.config_files,
            files=other.files or self.files,
            length=other.length if other.length is not None else self.length,
            capacity=other.capacity if other.capacity is not None else self.capacity,
            write_strategy=other.write_strategy
            if other.write_strategy is not None
            else self.write_strategy,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft.
        Recognized keys: ``verbosity_level``, ``apply_changes``, ``length``,
        ``capacity``, ``write_strategy``.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("verbosity_level") is not None:
            self.verbosity_level = args["verbosity_level"]
        if args.get("apply_changes") is not None:
            self.apply_changes = args["apply_changes"]
        if args.get("length") is not None:
            self.length = args["length"]
        if args.get("capacity") is not None:
            self.capacity = args["capacity"]
        if args.get("write_strategy") is not None:
            self.write_strategy = FileWriteStrategy.from_name(str(args["write_strategy"]))
        return self
