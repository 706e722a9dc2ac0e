# topmark:header:start
#
#   project      : DtsGen
#   file         : version.py
#   file_relpath : src/dtsgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtsGen `version` command.

Prints the current DtsGen version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dtsgen.constants import DTSGEN_VERSION

if TYPE_CHECKING:
    from dtsgen.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of DtsGen.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of DtsGen."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": DTSGEN_VERSION}))
    else:
        console.print(console.styled(DTSGEN_VERSION, bold=True))
