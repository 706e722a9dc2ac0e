# topmark:header:start
#
#   project      : DtsGen
#   file         : model.py
#   file_relpath : src/dtsgen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the CLI.
    - `MutableConfig`: a mutable builder used while merging sources; it
      can be frozen into `Config` and thawed back for edits.

Precedence (last wins): built-in defaults → config file → CLI arguments.
A ``None`` value always means "inherit from the previous layer".

Path semantics:
    - ``input`` / ``output`` declared in a config file are normalized against that
      config file's directory.
    - CLI paths are taken as given (relative to the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dtsgen.config.io import (
    extract_dtsgen_table,
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    load_toml_dict,
)
from dtsgen.config.logging import get_logger
from dtsgen.constants import DTSGEN_TOML_NAME, PYPROJECT_TOML_NAME
from dtsgen.core.errors import ConfigError

if TYPE_CHECKING:
    from dtsgen.config.io import TomlTable
    from dtsgen.config.logging import DtsgenLogger

logger: DtsgenLogger = get_logger(__name__)

# Marker recorded in `config_files` when CLI arguments were applied.
CLI_OVERRIDE_STR = "<CLI overrides>"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DtsGen.

    Attributes:
        input_path (Path | None): The intermediate type definition file.
        output_path (Path | None): Where to write the declaration file; ``None`` = stdout.
        with_header (bool): Whether to prepend the tooling disclaimer header.
        config_files (tuple[Path | str, ...]): Config sources used, in merge order.
    """

    input_path: Path | None
    output_path: Path | None
    with_header: bool
    config_files: tuple[Path | str, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            input_path=self.input_path,
            output_path=self.output_path,
            with_header=self.with_header,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging config sources.

    Attributes:
        input_path (Path | None): The intermediate type definition file.
        output_path (Path | None): Where to write the declaration file.
        with_header (bool | None): Header toggle; ``None`` = inherit.
        config_files (list[Path | str]): Config sources used, in merge order.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    with_header: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config` (header defaults to on)."""
        return Config(
            input_path=self.input_path,
            output_path=self.output_path,
            with_header=True if self.with_header is None else self.with_header,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults."""
        return cls(with_header=True)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a DtsGen settings table.

        Args:
            data (TomlTable): The settings table (keys ``input``, ``output``, ``header``).
            config_file (Path | None): The file ``data`` came from; relative paths are
                resolved against its directory.

        Returns:
            MutableConfig: The draft.
        """
        where: str = str(config_file) if config_file is not None else "<dict>"
        base: Path | None = config_file.parent if config_file is not None else None

        def _path(key: str) -> Path | None:
            raw: str | None = get_string_value_or_none_checked(data, key, where=where)
            if raw is None:
                return None
            p = Path(raw)
            if base is not None and not p.is_absolute():
                p = base / p
            return p

        known: set[str] = {"input", "output", "header"}
        for key in data:
            if key not in known:
                logger.warning("Unknown config key '%s' in %s", key, where)

        return cls(
            input_path=_path("input"),
            output_path=_path("output"),
            with_header=get_bool_value_or_none_checked(data, "header", where=where),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from ``dtsgen.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml`` carries
                no ``[tool.dtsgen]`` table.

        Raises:
            ConfigError: If the file is unreadable or not valid TOML.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_dtsgen_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_local_config_file(cls, directory: Path) -> Path | None:
        """Return the config file to use in ``directory``, if any.

        ``dtsgen.toml`` takes precedence over ``pyproject.toml``.
        """
        for name in (DTSGEN_TOML_NAME, PYPROJECT_TOML_NAME):
            candidate: Path = directory / name
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load_merged(
        cls, *, config_file: Path | None = None, cwd: Path | None = None
    ) -> MutableConfig:
        """Merge defaults with an explicit or discovered config file.

        An explicit file and a discovered ``dtsgen.toml`` must load cleanly. A
        discovered ``pyproject.toml`` belongs to the surrounding project as well,
        so a broken one is reported as a warning and skipped.

        Args:
            config_file (Path | None): Explicit config file (``--config``). When ``None``,
                ``cwd`` is searched via `discover_local_config_file`.
            cwd (Path | None): Directory to search; defaults to `Path.cwd`.

        Returns:
            MutableConfig: The merged draft (CLI arguments not yet applied).

        Raises:
            ConfigError: If an explicit config file or a discovered ``dtsgen.toml``
                cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()
        path: Path | None = config_file or cls.discover_local_config_file(cwd or Path.cwd())
        if path is None:
            return draft

        try:
            loaded: MutableConfig | None = cls.from_toml_file(path)
        except ConfigError as exc:
            if config_file is not None or path.name != PYPROJECT_TOML_NAME:
                raise
            logger.warning("Ignoring %s: %s", path, exc)
            return draft

        if loaded is not None:
            draft = draft.merge_with(loaded)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            input_path=other.input_path if other.input_path is not None else self.input_path,
            output_path=other.output_path if other.output_path is not None else self.output_path,
            with_header=other.with_header if other.with_header is not None else self.with_header,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI (or API) overrides in place.

        Recognized keys: ``input`` and ``output`` (str or Path), ``header`` (bool).
        Keys that are absent or ``None`` leave the current value untouched.

        Args:
            args (Mapping[str, Any]): Parsed arguments mapping.

        Returns:
            MutableConfig: This instance, for chaining.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("input") is not None:
            self.input_path = Path(args["input"])
        if args.get("output") is not None:
            self.output_path = Path(args["output"])
        if args.get("header") is not None:
            self.with_header = bool(args["header"])
        return self
