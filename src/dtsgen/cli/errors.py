# topmark:header:start
#
#   project      : DtsGen
#   file         : errors.py
#   file_relpath : src/dtsgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DtsGen CLI.

Usage:
    Commands translate core [`DtsgenError`][dtsgen.core.errors.DtsgenError]
    failures with `from_core_error` and raise the result, so Click prints the
    message and exits with the matching `ExitCode`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dtsgen.core.errors import (
    ConfigError,
    DtsgenError,
    EmptyInputError,
    MalformedRecordError,
    TypeDefIOError,
)
from dtsgen.core.exit_codes import ExitCode


class DtsgenCliError(click.ClickException):
    """Base class for all DtsGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class DtsgenUsageError(DtsgenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DtsgenConfigError(DtsgenCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DtsgenFileNotFoundError(DtsgenCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DtsgenIOError(DtsgenCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DtsgenDataError(DtsgenCliError):
    """Error for malformed records or an input without records."""

    exit_code = ExitCode.DATA_ERROR


def from_core_error(exc: DtsgenError) -> DtsgenCliError:
    """Map a core error onto the CLI error carrying the right exit code.

    Args:
        exc (DtsgenError): The error raised by the API or config layer.

    Returns:
        DtsgenCliError: The Click exception to raise.
    """
    message: str = str(exc)
    if isinstance(exc, TypeDefIOError):
        if isinstance(exc.__cause__, FileNotFoundError):
            return DtsgenFileNotFoundError(message)
        return DtsgenIOError(message)
    if isinstance(exc, (MalformedRecordError, EmptyInputError)):
        return DtsgenDataError(message)
    if isinstance(exc, ConfigError):
        return DtsgenConfigError(message)
    return DtsgenCliError(message)
