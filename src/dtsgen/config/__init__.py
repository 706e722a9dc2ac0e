# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DtsGen.

Settings come from built-in defaults, then ``dtsgen.toml`` or the
``[tool.dtsgen]`` table of ``pyproject.toml``, then CLI overrides. Build a
`MutableConfig`, merge, then ``freeze()`` into a `Config` before use.
"""

from __future__ import annotations

from dtsgen.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
