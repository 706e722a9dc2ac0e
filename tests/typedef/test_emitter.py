# topmark:header:start
#
#   project      : DtsGen
#   file         : test_emitter.py
#   file_relpath : tests/typedef/test_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-kind templates and whole-file assembly of the declaration text."""

from __future__ import annotations

import pytest

from tests.conftest import mark_pipeline, rec
from dtsgen.constants import EXTERNAL_OBJECT_PREAMBLE, TOP_LEVEL_NAMESPACE, TYPE_DEF_HEADER
from dtsgen.typedef.emitter import emit_declarations, render_record


@mark_pipeline
@pytest.mark.parametrize(
    ("kind", "definition", "expected"),
    [
        ("interface", "a: number", "export interface N {\n  a: number\n}\n\n"),
        ("enum", "A = 0,\nB = 1", "export const enum N {\n  A = 0,\n  B = 1\n}\n\n"),
        ("struct", "a: number", "export class N {\n  a: number\n}\n\n"),
        ("const", "export const N = 1", "export const N = 1\n"),
        ("fn", "export function N(): void", "export function N(): void\n"),
    ],
)
def test_render_record_templates(kind: str, definition: str, expected: str) -> None:
    """Every kind renders with its own template at indent 0."""
    assert render_record(rec(kind, "N", definition), 0) == expected


@mark_pipeline
def test_render_struct_with_alias_adds_type_alias() -> None:
    """A struct whose internal name differs is followed by a type alias."""
    out: str = render_record(rec("struct", "Foo", "a: number", original_name="RsFoo"), 0)
    assert out == "export class Foo {\n  a: number\n}\nexport type RsFoo = Foo\n\n"


@mark_pipeline
def test_render_struct_with_same_original_name_has_no_alias() -> None:
    out: str = render_record(rec("struct", "Foo", "", original_name="Foo"), 0)
    assert "export type" not in out


@mark_pipeline
def test_render_prepends_doc_comment() -> None:
    """The doc comment is emitted before the declaration and re-indented with it."""
    record = rec("fn", "f", "export function f(): void", doc_comment="/**\n * Does f.\n */\n")
    assert render_record(record, 2) == "  /**\n   * Does f.\n   */\n  export function f(): void\n"


@mark_pipeline
def test_render_empty_struct_body_keeps_blank_line() -> None:
    assert render_record(rec("struct", "E"), 0) == "export class E {\n\n}\n\n"


@mark_pipeline
def test_emit_struct_with_impl_and_const() -> None:
    """Header off: preamble, the merged class, then the constant; one trailing newline."""
    groups = {
        TOP_LEVEL_NAMESPACE: [
            rec("struct", "Foo", "a: number\nbar(): void"),
            rec("const", "X", "export const X = 1"),
        ]
    }
    assert emit_declarations(groups, with_header=False) == (
        EXTERNAL_OBJECT_PREAMBLE
        + "export class Foo {\n  a: number\n  bar(): void\n}\n\nexport const X = 1\n"
    )


@mark_pipeline
def test_emit_header_toggle() -> None:
    """The tooling header is emitted first when enabled and absent otherwise."""
    groups = {TOP_LEVEL_NAMESPACE: [rec("const", "X", "export const X = 1")]}
    with_header: str = emit_declarations(groups, with_header=True)
    without: str = emit_declarations(groups, with_header=False)
    assert with_header == TYPE_DEF_HEADER + without
    assert without.startswith(EXTERNAL_OBJECT_PREAMBLE)


@mark_pipeline
def test_emit_wraps_namespace_and_indents_members() -> None:
    groups = {"ns": [rec("interface", "I", "a: number"), rec("const", "c", "export const c = 1")]}
    out: str = emit_declarations(groups, with_header=False)
    assert out == (
        EXTERNAL_OBJECT_PREAMBLE
        + "export namespace ns {\n"
        + "  export interface I {\n    a: number\n  }\n\n"
        + "  export const c = 1\n"
        + "}\n"
    )


@mark_pipeline
def test_emit_orders_namespaces_by_key_including_sentinel() -> None:
    """``A`` sorts before the top-level sentinel and ``a`` after it."""
    groups = {
        "a": [rec("const", "lower", "export const lower = 1")],
        TOP_LEVEL_NAMESPACE: [rec("const", "top", "export const top = 1")],
        "A": [rec("const", "upper", "export const upper = 1")],
    }
    out: str = emit_declarations(groups, with_header=False)
    upper: int = out.index("export namespace A {")
    top: int = out.index("export const top = 1")
    lower: int = out.index("export namespace a {")
    assert upper < top < lower


@mark_pipeline
def test_emit_with_no_groups_is_preamble_only() -> None:
    out: str = emit_declarations({}, with_header=False)
    assert out == EXTERNAL_OBJECT_PREAMBLE.rstrip() + "\n"


@mark_pipeline
@pytest.mark.parametrize("with_header", [True, False])
def test_emit_ends_with_exactly_one_newline(with_header: bool) -> None:
    groups = {
        TOP_LEVEL_NAMESPACE: [rec("struct", "S", "x: number")],
        "z": [rec("enum", "E", "A = 0")],
    }
    out: str = emit_declarations(groups, with_header=with_header)
    assert out.endswith("}\n")
    assert not out.endswith("\n\n")
