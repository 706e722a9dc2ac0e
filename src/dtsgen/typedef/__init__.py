# topmark:header:start
#
#   project      : DtsGen
#   file         : __init__.py
#   file_relpath : src/dtsgen/typedef/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type definition records and the stages that turn them into a declaration file.

The stages run strictly in this order:

1. [`loader`][dtsgen.typedef.loader] decodes the line-delimited JSON input.
2. [`ordering`][dtsgen.typedef.ordering] sorts records (structs first, then by name).
3. [`merger`][dtsgen.typedef.merger] groups records by namespace and folds
   ``impl`` bodies into their ``struct``.
4. [`emitter`][dtsgen.typedef.emitter] renders each group, re-indenting every
   fragment with [`indent`][dtsgen.typedef.indent].
"""

from __future__ import annotations

from dtsgen.typedef.model import TypeDefKind, TypeDefRecord

__all__ = ["TypeDefKind", "TypeDefRecord"]
