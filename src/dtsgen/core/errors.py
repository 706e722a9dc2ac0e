# topmark:header:start
#
#   project      : DtsGen
#   file         : errors.py
#   file_relpath : src/dtsgen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DtsGen generation pipeline.

Every condition here is fatal: the pipeline never recovers locally and never
produces partial output. Callers (the CLI, build glue) decide how to report
them. An ``impl`` record without a matching ``struct`` is *not* an error; it is
dropped by the merger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DtsgenError(Exception):
    """Base class for all DtsGen errors."""


class TypeDefIOError(DtsgenError):
    """The intermediate type definition file cannot be opened or read.

    Attributes:
        path (Path): The path that failed to load.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read type definitions from {path}: {reason}")


class MalformedRecordError(DtsgenError):
    """A non-empty line of the intermediate file is not a valid record.

    Attributes:
        source (str): Name of the input (file path or ``<string>``).
        line_no (int): 1-based line number of the offending line.
        reason (str): Why the line was rejected.
    """

    def __init__(self, source: str, line_no: int, reason: str) -> None:
        self.source = source
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{source}:{line_no}: malformed type definition record: {reason}")


class EmptyInputError(DtsgenError):
    """No records were loaded, so there is nothing to emit."""

    def __init__(self, message: str = "No type definitions found") -> None:
        super().__init__(message)


class ConfigError(DtsgenError):
    """A configuration file is missing, unreadable or malformed."""
