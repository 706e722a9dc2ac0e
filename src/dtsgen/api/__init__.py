# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public DtsGen API (stable surface).

This module exposes a **small, typed API** for build glue that wants to
generate declaration files without going through the CLI.

Versioning policy
-----------------
- The **signatures** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Notes:
-----
- `load_records` is the only function that touches the filesystem (read only).
- `render_declarations` is a pure function of its input.
- Every failure is raised as a [`DtsgenError`][dtsgen.core.errors.DtsgenError]
  subclass; nothing is retried and no partial output is produced.

```python
from pathlib import Path

from dtsgen import api

text = api.generate(Path("target/type_def.tmp"), with_header=True)
Path("index.d.ts").write_text(text, encoding="utf-8")
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.core.errors import (
    ConfigError,
    DtsgenError,
    EmptyInputError,
    MalformedRecordError,
    TypeDefIOError,
)
from dtsgen.typedef.emitter import emit_declarations
from dtsgen.typedef.loader import load_records
from dtsgen.typedef.merger import merge_records
from dtsgen.typedef.model import TypeDefKind, TypeDefRecord
from dtsgen.typedef.ordering import sort_records

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger

__all__ = [
    "ConfigError",
    "DtsgenError",
    "EmptyInputError",
    "MalformedRecordError",
    "TypeDefIOError",
    "TypeDefKind",
    "TypeDefRecord",
    "generate",
    "load_records",
    "render_declarations",
]

logger: DtsgenLogger = get_logger(__name__)


def render_declarations(records: Sequence[TypeDefRecord], *, with_header: bool = True) -> str:
    """Render loaded records into the final declaration text.

    Args:
        records (Sequence[TypeDefRecord]): Records in input order.
        with_header (bool): Whether to prepend the tooling disclaimer header.

    Returns:
        str: The declaration file text.

    Raises:
        EmptyInputError: If ``records`` is empty.
    """
    if not records:
        raise EmptyInputError()

    groups: dict[str, list[TypeDefRecord]] = merge_records(sort_records(records))
    return emit_declarations(groups, with_header=with_header)


def generate(path: Path, *, with_header: bool = True) -> str:
    """Load the intermediate file at ``path`` and render it.

    Args:
        path (Path): Path to the intermediate type definition file.
        with_header (bool): Whether to prepend the tooling disclaimer header.

    Returns:
        str: The declaration file text.
    """
    records: list[TypeDefRecord] = load_records(path)
    logger.info("Generating declarations for %d record(s) from %s", len(records), path)
    return render_declarations(records, with_header=with_header)
