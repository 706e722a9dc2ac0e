# topmark:header:start
#
#   project      : DtsGen
#   file         : constants.py
#   file_relpath : src/dtsgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtsGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DTSGEN_VERSION: str = get_version("dtsgen")

# Config sources looked up in the working directory when no --config is given:
DTSGEN_TOML_NAME: str = "dtsgen.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Grouping key of records without a namespace. Takes part in the namespace sort.
TOP_LEVEL_NAMESPACE: str = "__TOP_LEVEL__"

# Leading spaces applied to members of a wrapped namespace block.
NAMESPACE_INDENT: int = 2

TYPE_DEF_HEADER: str = """/* tslint:disable */
/* eslint-disable */

/* auto-generated by NAPI-RS */

"""

EXTERNAL_OBJECT_PREAMBLE: str = """export class ExternalObject<T> {
  readonly '': {
    readonly '': unique symbol
    [K: symbol]: T
  }
}

"""
