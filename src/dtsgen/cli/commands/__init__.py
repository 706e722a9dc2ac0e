# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the DtsGen CLI."""

from __future__ import annotations
