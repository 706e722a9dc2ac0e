# topmark:header:start
#
#   project      : DtsGen
#   file         : merger.py
#   file_relpath : src/dtsgen/typedef/merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group sorted records by namespace and fold ``impl`` bodies into their struct.

The merge is a single left-to-right pass. Each namespace group tracks the
position of its structs by name; an ``impl`` record replaces the struct at that
position with a copy whose body has the impl fragment appended. Impl records
never cross namespace boundaries, and an impl without a same-named struct in
its group is dropped.

Because structs sort before every other kind, an impl listed earlier in the
input than its struct still finds it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.typedef.model import TypeDefKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.typedef.model import TypeDefRecord

logger: DtsgenLogger = get_logger(__name__)


def append_fragment(body: str, fragment: str) -> str:
    """Append ``fragment`` to ``body``, newline-separated unless ``body`` is empty."""
    if not body:
        return fragment
    return f"{body}\n{fragment}"


def merge_records(records: Iterable[TypeDefRecord]) -> dict[str, list[TypeDefRecord]]:
    """Group ``records`` by namespace key and merge impl blocks into structs.

    Args:
        records (Iterable[TypeDefRecord]): Records, already sorted by
            [`sort_records`][dtsgen.typedef.ordering.sort_records].

    Returns:
        dict[str, list[TypeDefRecord]]: Namespace key to group members, each group in
            the order received. Keys are in first-seen order; the emitter sorts them.
    """
    groups: dict[str, list[TypeDefRecord]] = {}
    # namespace key -> struct name -> index into groups[namespace key]
    struct_slots: dict[str, dict[str, int]] = {}

    for record in records:
        key: str = record.namespace_key

        if record.kind is TypeDefKind.IMPL:
            index: int | None = struct_slots.get(key, {}).get(record.name)
            if index is None:
                # A dropped impl must not open an (empty) namespace group
                logger.debug(
                    "Dropping impl '%s' in namespace %s: no matching struct",
                    record.name,
                    key,
                )
                continue
            group: list[TypeDefRecord] = groups[key]
            target: TypeDefRecord = group[index]
            group[index] = replace(
                target, definition=append_fragment(target.definition, record.definition)
            )
            continue

        group = groups.setdefault(key, [])
        group.append(record)
        if record.kind is TypeDefKind.STRUCT:
            struct_slots.setdefault(key, {})[record.name] = len(group) - 1

    logger.debug(
        "Merged into %d namespace group(s): %s",
        len(groups),
        {key: len(members) for key, members in groups.items()},
    )
    return groups
