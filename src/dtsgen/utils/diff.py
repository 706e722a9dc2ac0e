# topmark:header:start
#
#   file         : diff.py
#   file_relpath : src/dtsgen/utils/diff.py
#   project      : DtsGen
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff helpers for ``generate --check --diff``.

The diff compares the declaration file on disk with freshly generated text and
is rendered with chalk colors for terminal display.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk


def unified_patch(old: str, new: str, *, path: str) -> list[str]:
    """Return a unified diff between ``old`` and ``new`` as a list of lines.

    Args:
        old (str): Current file content (empty if the file does not exist yet).
        new (str): Generated content.
        path (str): File name shown in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines including their line endings; empty if identical.
    """
    return list(
        difflib.unified_diff(
            old.splitlines(keepends=True),
            new.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (generated)",
        )
    )


def render_patch(patch: Sequence[str]) -> str:
    """Render a colorized preview of a unified diff.

    Carriage returns are shown as a literal ``\\r`` so CRLF drift stays visible.

    Args:
        patch (Sequence[str]): Diff lines as returned by `unified_patch`.

    Returns:
        str: The colorized diff, one line per patch line.
    """
    lines: list[str] = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
