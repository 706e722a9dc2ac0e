# topmark:header:start
#
#   project      : DtsGen
#   file         : getters.py
#   file_relpath : src/dtsgen/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of one optional key. A missing key
yields ``None`` (inherit). A value of the wrong type is logged as a warning
and also treated as ``None``, so a user mistake never changes defaulting
behavior silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from dtsgen.config.logging import get_logger

if TYPE_CHECKING:
    from dtsgen.config.logging import DtsgenLogger

    from .types import TomlTable

logger: DtsgenLogger = get_logger(__name__)


def get_string_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    return None


def get_bool_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are not coerced.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    return None
