# topmark:header:start
#
#   project      : DtsGen
#   file         : test_api_generate.py
#   file_relpath : tests/api/test_api_generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end behavior of the public API (`dtsgen.api`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.conftest import mark_pipeline, rec, write_typedef_file
from dtsgen import api
from dtsgen.constants import EXTERNAL_OBJECT_PREAMBLE, TYPE_DEF_HEADER

if TYPE_CHECKING:
    from pathlib import Path

    from dtsgen.typedef.model import TypeDefRecord

RECORDS: list[TypeDefRecord] = [
    rec("impl", "Foo", "bar(): void"),
    rec("const", "X", "export const X = 1"),
    rec("struct", "Foo", "a: number", doc_comment="/** Foo */\n"),
    rec("fn", "inner", "export function inner(): void", namespace="ns"),
    rec("struct", "Bar", "", original_name="RsBar", namespace="ns"),
    rec("impl", "Bar", "constructor()", namespace="ns"),
    rec("impl", "Missing", "nothing()", namespace="ns"),
]

EXPECTED_BODY = """\
/** Foo */
export class Foo {
  a: number
  bar(): void
}

export const X = 1
export namespace ns {
  export class Bar {
    constructor()
  }
  export type RsBar = Bar

  export function inner(): void
}
"""


@mark_pipeline
def test_public_names_are_exported() -> None:
    for name in api.__all__:
        assert hasattr(api, name), name


@mark_pipeline
def test_render_declarations_full_layout() -> None:
    text: str = api.render_declarations(RECORDS, with_header=True)
    assert text == TYPE_DEF_HEADER + EXTERNAL_OBJECT_PREAMBLE + EXPECTED_BODY


@mark_pipeline
def test_render_declarations_rejects_empty_input() -> None:
    with pytest.raises(api.EmptyInputError):
        api.render_declarations([])


@mark_pipeline
def test_generate_reads_file(tmp_path: Path) -> None:
    path: Path = write_typedef_file(tmp_path / "type_def.tmp", RECORDS)
    assert api.generate(path, with_header=False) == EXTERNAL_OBJECT_PREAMBLE + EXPECTED_BODY


@mark_pipeline
def test_generate_empty_file_raises(tmp_path: Path) -> None:
    path: Path = tmp_path / "empty.tmp"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(api.EmptyInputError):
        api.generate(path)


@mark_pipeline
def test_generate_missing_file_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(api.TypeDefIOError):
        api.generate(tmp_path / "absent.tmp")


@mark_pipeline
def test_generate_malformed_file_raises(tmp_path: Path) -> None:
    path: Path = tmp_path / "bad.tmp"
    path.write_text('{"kind": "fn", "name": "a", "def": ""}\n{"kind": 1}\n', encoding="utf-8")
    with pytest.raises(api.MalformedRecordError) as excinfo:
        api.generate(path)
    assert excinfo.value.line_no == 2
    assert isinstance(excinfo.value, api.DtsgenError)


@mark_pipeline
@given(order=st.permutations(RECORDS))
def test_output_is_independent_of_input_order(order: list[TypeDefRecord]) -> None:
    """Distinct names per kind make the result a function of the record set only.

    Impl fragments for one struct are the exception (their order is kept), and
    each struct here has at most one impl.
    """
    assert api.render_declarations(order, with_header=False) == (
        EXTERNAL_OBJECT_PREAMBLE + EXPECTED_BODY
    )
