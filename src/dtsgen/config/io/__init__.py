# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for DtsGen configuration.

This package centralizes **pure** helpers for reading and validating TOML used
by the configuration layer. Keeping them apart from the model avoids import
cycles and keeps `dtsgen.config.model` small.

TOML parsing:
    DtsGen uses `tomlkit` for parsing (``load_toml_dict``) and returns plain dicts.
"""

from __future__ import annotations

from .getters import get_bool_value_or_none_checked, get_string_value_or_none_checked
from .loaders import extract_dtsgen_table, load_toml_dict
from .types import TomlTable

__all__ = [
    "TomlTable",
    "extract_dtsgen_table",
    "get_bool_value_or_none_checked",
    "get_string_value_or_none_checked",
    "load_toml_dict",
]
