# topmark:header:start
#
#   project      : DtsGen
#   file         : __main__.py
#   file_relpath : src/dtsgen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DtsGen via ``python -m dtsgen``.

Delegates to :func:`dtsgen.cli.main.cli`, the single authoritative CLI entry
point.

Examples:
    Generate declarations next to the intermediate file::

        python -m dtsgen generate type_def.tmp -o index.d.ts
"""

from __future__ import annotations

from dtsgen.cli.main import cli

if __name__ == "__main__":
    cli()
