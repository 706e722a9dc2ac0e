# topmark:header:start
#
#   project      : DtsGen
#   file         : generate.py
#   file_relpath : src/dtsgen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DtsGen `generate` command.

Turns an intermediate type definition file into a ``.d.ts`` declaration file.

Input and output come from the positional INPUT / ``--output`` arguments, or
from ``input`` / ``output`` in ``dtsgen.toml`` or ``[tool.dtsgen]`` in
``pyproject.toml``. Without an output file the declarations are printed to
stdout.

With ``--check`` nothing is written; the command exits with
``ExitCode.WOULD_CHANGE`` when the output file is missing or stale.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dtsgen import api
from dtsgen.cli.errors import DtsgenIOError, DtsgenUsageError, from_core_error
from dtsgen.config.logging import get_logger
from dtsgen.config.model import MutableConfig
from dtsgen.core.errors import DtsgenError
from dtsgen.core.exit_codes import ExitCode
from dtsgen.utils.diff import render_patch, unified_patch
from dtsgen.utils.file import read_existing_text, write_text_file

if TYPE_CHECKING:
    from dtsgen.cli.console import ClickConsole
    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.config.model import Config

logger: DtsgenLogger = get_logger(__name__)


def _resolve_config(
    *,
    config_file: Path | None,
    input_path: Path | None,
    output_path: Path | None,
    header: bool | None,
) -> Config:
    try:
        draft: MutableConfig = MutableConfig.load_merged(config_file=config_file)
    except DtsgenError as exc:
        raise from_core_error(exc) from exc

    draft.apply_cli_args({"input": input_path, "output": output_path, "header": header})
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


@click.command(
    name="generate",
    help="Generate a TypeScript declaration file from an intermediate type definition file.",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    required=False,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write declarations to this file instead of stdout.",
)
@click.option(
    "--header/--no-header",
    "header",
    default=None,
    help="Prepend the tooling disclaimer header (default: on).",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of ./dtsgen.toml or ./pyproject.toml.",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with code 2 if the output file is missing or out of date.",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    default=False,
    help="Show a unified diff between the output file and the generated declarations.",
)
def generate_command(
    *,
    input_path: Path | None,
    output_path: Path | None,
    header: bool | None,
    config_file: Path | None,
    check: bool,
    show_diff: bool,
) -> None:
    """Generate a declaration file (see module docstring for the full contract)."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = _resolve_config(
        config_file=config_file,
        input_path=input_path,
        output_path=output_path,
        header=header,
    )
    if config.input_path is None:
        raise DtsgenUsageError("No input file: pass INPUT or set 'input' in the config file.")
    if config.output_path is None and (check or show_diff):
        raise DtsgenUsageError("'--check' and '--diff' require an output file.")

    try:
        text: str = api.generate(config.input_path, with_header=config.with_header)
    except DtsgenError as exc:
        raise from_core_error(exc) from exc

    if config.output_path is None:
        console.print(text, nl=False)
        return

    out: Path = config.output_path
    try:
        current: str | None = read_existing_text(out)
    except (OSError, UnicodeDecodeError) as exc:
        raise DtsgenIOError(f"Cannot read existing output {out}: {exc}") from exc
    up_to_date: bool = current == text

    if show_diff and not up_to_date:
        patch: str = render_patch(unified_patch(current or "", text, path=str(out)))
        console.status(patch if console.enable_color else click.unstyle(patch), nl=False)

    if check:
        if up_to_date:
            console.status(f"{out} is up to date.")
            return
        console.status(console.styled(f"{out} would change.", fg="yellow"))
        ctx.exit(ExitCode.WOULD_CHANGE)

    if up_to_date:
        console.status(f"{out} is up to date.")
        return

    try:
        write_text_file(out, text)
    except (OSError, UnicodeEncodeError) as exc:
        raise DtsgenIOError(f"Cannot write {out}: {exc}") from exc
    console.status(console.styled(f"Wrote {out}", fg="green"))
