# topmark:header:start
#
#   project      : DtsGen
#   file         : ordering.py
#   file_relpath : src/dtsgen/typedef/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Total order over type definition records.

Structs sort before every other kind so that each class body is fully
assembled before anything that may reference it. Within each partition records
sort by exported name (code point order, which matches UTF-8 byte order).

The sort is applied once, globally, before namespace grouping; grouping keeps
the relative order it receives.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtsgen.typedef.model import TypeDefRecord


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_records(a: TypeDefRecord, b: TypeDefRecord) -> int:
    """Compare two records: structs first, then by name.

    Args:
        a (TypeDefRecord): Left-hand record.
        b (TypeDefRecord): Right-hand record.

    Returns:
        int: ``-1`` if ``a`` sorts first, ``1`` if ``b`` does, ``0`` if tied.
    """
    if a.is_struct != b.is_struct:
        return -1 if a.is_struct else 1
    return _cmp(a.name, b.name)


def sort_records(records: Iterable[TypeDefRecord]) -> list[TypeDefRecord]:
    """Return ``records`` in emission order (stable for ties)."""
    return sorted(records, key=cmp_to_key(compare_records))
