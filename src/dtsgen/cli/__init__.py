# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtsGen CLI package.

This package groups all Click command definitions and supporting utilities
for the DtsGen command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        dtsgen = "dtsgen.cli.main:cli"

All subcommands live in [`dtsgen.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
