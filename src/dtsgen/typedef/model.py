# topmark:header:start
#
#   project      : DtsGen
#   file         : model.py
#   file_relpath : src/dtsgen/typedef/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model for intermediate type definition records.

A record describes one exported symbol. Records are immutable; the merger
builds updated copies (via `dataclasses.replace`) when it folds ``impl``
bodies into a ``struct``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dtsgen.constants import TOP_LEVEL_NAMESPACE


class TypeDefKind(str, Enum):
    """Kind tag of a record, as spelled on the wire."""

    CONST = "const"
    FN = "fn"
    STRUCT = "struct"
    IMPL = "impl"
    ENUM = "enum"
    INTERFACE = "interface"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return all wire spellings, in declaration order."""
        return tuple(member.value for member in cls)


@dataclass(frozen=True, slots=True)
class TypeDefRecord:
    """One exported symbol description.

    Attributes:
        kind (TypeDefKind): Determines the emission template and merge behavior.
        name (str): Exported identifier.
        definition (str): Raw, unindented body or signature (``def`` on the wire).
        original_name (str | None): Internal identifier of a struct exported under
            an alias; emits ``export type <original_name> = <name>`` when it differs.
        doc_comment (str | None): Documentation text emitted verbatim before the
            declaration.
        namespace (str | None): Grouping key; ``None`` means top level.
    """

    kind: TypeDefKind
    name: str
    definition: str
    original_name: str | None = None
    doc_comment: str | None = None
    namespace: str | None = None

    @property
    def namespace_key(self) -> str:
        """Grouping key used by the merger (the top-level sentinel when unset)."""
        return self.namespace if self.namespace is not None else TOP_LEVEL_NAMESPACE

    @property
    def is_struct(self) -> bool:
        """Whether this record defines a class-like structure."""
        return self.kind is TypeDefKind.STRUCT
