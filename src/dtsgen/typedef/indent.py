# topmark:header:start
#
#   project      : DtsGen
#   file         : indent.py
#   file_relpath : src/dtsgen/typedef/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Brace-depth re-indentation of declaration fragments.

Fragments arrive unindented (or indented arbitrarily). `correct_indent` trims
every line and recomputes its leading whitespace from the number of currently
open ``{`` lines:

- a line ending in ``{`` sits at the current depth, then opens a level;
- a line ending in ``}`` closes a level first, so it aligns with its opener;
- a line starting with ``*`` (JSDoc interior) gets one extra space and never
  changes the depth;
- blank lines are emitted empty.

This is a textual heuristic, not a lexer: braces inside string or template
literals are counted like any other brace.
"""

from __future__ import annotations

from typing import Final

INDENT_WIDTH: Final[int] = 2


def correct_indent(src: str, indent: int) -> str:
    """Re-indent ``src`` by brace depth, starting every top-level line at ``indent``.

    Args:
        src (str): Text to re-indent; its own leading whitespace is ignored.
        indent (int): Number of spaces applied to lines at depth 0.

    Returns:
        str: The re-indented text. It ends with a newline iff ``src`` does.
    """
    lines: list[str] = src.split("\n")
    if src.endswith("\n"):
        # Splitting leaves an empty tail after the final newline
        lines.pop()

    depth: int = 0
    result: list[str] = []
    for raw in lines:
        line: str = raw.strip()
        if not line:
            result.append("")
            continue

        in_doc_comment: bool = line.startswith("*")
        if in_doc_comment:
            width = indent + depth * INDENT_WIDTH + 1
        elif line.endswith("{"):
            width = indent + depth * INDENT_WIDTH
            depth += 1
        else:
            if line.endswith("}") and depth > 0:
                depth -= 1
            width = indent + depth * INDENT_WIDTH

        result.append(" " * width + line)

    text: str = "\n".join(result)
    if src.endswith("\n"):
        text += "\n"
    return text
