# topmark:header:start
#
#   file         : file.py
#   file_relpath : src/dtsgen/utils/file.py
#   project      : DtsGen
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers used by the CLI to read and write declaration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def read_existing_text(path: Path) -> str | None:
    """Return the UTF-8 content of ``path``, or ``None`` if it does not exist.

    Args:
        path (Path): The file to read.

    Returns:
        str | None: The file content with newlines untranslated, or ``None``.
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8", newline="") as fp:
        return fp.read()


def write_text_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` verbatim (no newline translation).

    The text is encoded before the file is opened, so an unencodable text
    leaves an existing file untouched. Missing parent directories are created.

    Args:
        path (Path): Destination file.
        content (str): Text to write.

    Raises:
        UnicodeEncodeError: If ``content`` is not encodable as UTF-8.
        OSError: If the file cannot be written.
    """
    data: bytes = content.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fp:
        fp.write(data)
    logger.info("Wrote %d byte(s) to %s", len(data), path)
