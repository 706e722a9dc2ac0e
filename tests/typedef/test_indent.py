# topmark:header:start
#
#   project      : DtsGen
#   file         : test_indent.py
#   file_relpath : tests/typedef/test_indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Brace-depth re-indentation of declaration fragments."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.conftest import mark_pipeline
from dtsgen.typedef.indent import correct_indent

RAW = """
class A {
  foo() {
    a = b
  }

bar = () => {

}
    boz = 1
  }

namespace B {
    namespace C {
type D = A
    }
}
"""

EXPECTED = """
class A {
  foo() {
    a = b
  }

  bar = () => {

  }
  boz = 1
}

namespace B {
  namespace C {
    type D = A
  }
}
"""

# Small alphabet that exercises every branch of the heuristic.
s_fragment = st.text(alphabet=st.sampled_from(list("{}* ab\t\n\r;")), max_size=120)


@mark_pipeline
def test_nested_blocks_are_reindented() -> None:
    """Openers sit at their depth, closers align with their opener."""
    assert correct_indent(RAW, 0) == EXPECTED


@mark_pipeline
def test_base_indent_applies_to_every_nonblank_line() -> None:
    """A base indent shifts every structural line; blank lines stay empty."""
    out: str = correct_indent("a {\n\nb\n}\n", 2)
    assert out == "  a {\n\n    b\n  }\n"


@mark_pipeline
def test_doc_comment_interior_lines_get_one_extra_space() -> None:
    """Lines starting with ``*`` get one extra space and never change the depth."""
    src = "/**\n* Docs {\n*/\nclass A {\n/**\n * field\n */\nx: number\n}\n"
    expected = "/**\n * Docs {\n */\nclass A {\n  /**\n   * field\n   */\n  x: number\n}\n"
    assert correct_indent(src, 0) == expected


@mark_pipeline
@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("", ""),
        ("\n", "\n"),
        ("a", "a"),
        ("a\n", "a\n"),
        ("a\n\n", "a\n\n"),
        ("   \t  \n", "\n"),
    ],
)
def test_trailing_newline_is_preserved_exactly(src: str, expected: str) -> None:
    """Output ends with a newline iff the input does."""
    assert correct_indent(src, 0) == expected


@mark_pipeline
def test_unbalanced_closer_at_depth_zero_does_not_go_negative() -> None:
    """A stray ``}`` at depth 0 stays at the base indent and later lines are unaffected."""
    assert correct_indent("}\n}\na {\nb\n}", 4) == "    }\n    }\n    a {\n      b\n    }"


@mark_pipeline
def test_line_both_closing_and_opening_counts_as_opener() -> None:
    """``} else {`` ends with ``{``: it is emitted at the current depth and opens a level."""
    src = "if (a) {\nx\n} else {\ny\n}"
    assert correct_indent(src, 0) == "if (a) {\n  x\n  } else {\n    y\n  }"


@mark_pipeline
def test_braces_inside_strings_are_counted() -> None:
    """The heuristic is textual: a brace at the end of a string literal opens a level."""
    assert correct_indent("const s = '{\nx\n", 0) == "const s = '{\n  x\n"


@mark_pipeline
def test_crlf_line_endings_are_trimmed() -> None:
    """A trailing carriage return is whitespace and is removed with the line trim."""
    assert correct_indent("a {\r\nb\r\n}\r\n", 0) == "a {\n  b\n}\n"


@mark_pipeline
@settings(max_examples=200)
@given(src=s_fragment, indent=st.integers(min_value=0, max_value=8))
def test_reindent_is_a_fixed_point(src: str, indent: int) -> None:
    """Re-indenting already re-indented text with the same base indent is a no-op."""
    once: str = correct_indent(src, indent)
    assert correct_indent(once, indent) == once


@mark_pipeline
@given(src=s_fragment, indent=st.integers(min_value=0, max_value=8))
def test_blank_lines_carry_no_whitespace(src: str, indent: int) -> None:
    """No output line is whitespace-only; every non-empty line starts at the base indent."""
    for line in correct_indent(src, indent).split("\n"):
        assert line == "" or line.strip() != ""
        if line:
            assert line.startswith(" " * indent)
