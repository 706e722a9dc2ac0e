# topmark:header:start
#
#   project      : DtsGen
#   file         : emitter.py
#   file_relpath : src/dtsgen/typedef/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render merged namespace groups into declaration file text.

Output layout:

1. the optional tooling header (`TYPE_DEF_HEADER`);
2. the fixed ``ExternalObject<T>`` preamble;
3. every namespace group in ascending key order. The top-level group is
   emitted at column 0; any other group is wrapped in
   ``export namespace <key> { ... }`` with its members indented by 2.

The text always ends with exactly one newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dtsgen.config.logging import get_logger
from dtsgen.constants import (
    EXTERNAL_OBJECT_PREAMBLE,
    NAMESPACE_INDENT,
    TOP_LEVEL_NAMESPACE,
    TYPE_DEF_HEADER,
)
from dtsgen.typedef.indent import correct_indent
from dtsgen.typedef.model import TypeDefKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from dtsgen.config.logging import DtsgenLogger
    from dtsgen.typedef.model import TypeDefRecord

logger: DtsgenLogger = get_logger(__name__)


def _render_struct(record: TypeDefRecord, doc: str) -> str:
    text: str = f"{doc}export class {record.name} {{\n{record.definition}\n}}"
    if record.original_name is not None and record.original_name != record.name:
        return f"{text}\nexport type {record.original_name} = {record.name}\n\n"
    return f"{text}\n\n"


def render_record(record: TypeDefRecord, indent: int) -> str:
    """Render one record with its kind's template, re-indented at ``indent``.

    Args:
        record (TypeDefRecord): The (merged) record to render.
        indent (int): Base indentation for the rendered declaration.

    Returns:
        str: The declaration text, including its trailing blank line(s).
    """
    doc: str = record.doc_comment or ""
    match record.kind:
        case TypeDefKind.INTERFACE:
            text = f"{doc}export interface {record.name} {{\n{record.definition}\n}}\n\n"
        case TypeDefKind.ENUM:
            text = f"{doc}export const enum {record.name} {{\n{record.definition}\n}}\n\n"
        case TypeDefKind.STRUCT:
            text = _render_struct(record, doc)
        case _:
            text = f"{doc}{record.definition}\n"
    return correct_indent(text, indent)


def emit_declarations(
    groups: Mapping[str, Sequence[TypeDefRecord]],
    *,
    with_header: bool = True,
) -> str:
    """Assemble the declaration file from merged namespace groups.

    Args:
        groups (Mapping[str, Sequence[TypeDefRecord]]): Output of
            [`merge_records`][dtsgen.typedef.merger.merge_records].
        with_header (bool): Whether to prepend the tooling disclaimer header.

    Returns:
        str: The complete declaration text.
    """
    parts: list[str] = []
    if with_header:
        parts.append(TYPE_DEF_HEADER)
    parts.append(EXTERNAL_OBJECT_PREAMBLE)

    for namespace in sorted(groups):
        members: Sequence[TypeDefRecord] = groups[namespace]
        logger.trace("Emitting %d record(s) for namespace %s", len(members), namespace)
        if namespace == TOP_LEVEL_NAMESPACE:
            parts.extend(render_record(record, 0) for record in members)
        else:
            parts.append(f"export namespace {namespace} {{\n")
            parts.extend(render_record(record, NAMESPACE_INDENT) for record in members)
            parts.append("}\n")

    return "".join(parts).rstrip() + "\n"
