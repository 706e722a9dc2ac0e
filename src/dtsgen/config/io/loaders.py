# topmark:header:start
#
#   project      : DtsGen
#   file         : loaders.py
#   file_relpath : src/dtsgen/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

DtsGen reads its settings from ``dtsgen.toml`` (top-level keys) or from the
``[tool.dtsgen]`` table of ``pyproject.toml``. Parsing is done with `tomlkit`
and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dtsgen.config.logging import get_logger
from dtsgen.constants import PYPROJECT_TOML_NAME
from dtsgen.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger

    from .types import TomlTable

logger: DtsgenLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``dtsgen.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_dtsgen_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DtsGen settings table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.dtsgen]``; any other file holds the
    settings at top level.

    Args:
        path (Path): The file the document was read from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The settings table, or ``None`` if ``pyproject.toml`` has no
            ``[tool.dtsgen]`` table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data

    tool: Any = data.get("tool", {})
    section: Any = tool.get("dtsgen") if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.dtsgen] section in %s", path)
        return None
    return cast("TomlTable", section)
