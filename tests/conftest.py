# topmark:header:start
#
#   project      : DtsGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DtsGen test suite.

This file sets up global fixtures, typed marker wrappers and record builders
shared by the stage, API and CLI tests.
"""

from __future__ import annotations

import json
import logging as std_logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from dtsgen.config import logging
from dtsgen.typedef.model import TypeDefKind, TypeDefRecord

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_dtsgen_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the developer's DTSGEN_LOG_LEVEL out of test runs and restore root logging.

    CLI tests call `setup_logging`, which replaces the root handlers with one bound
    to Click's captured stderr; the original handlers and level are put back
    afterwards.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    root: std_logging.Logger = std_logging.getLogger()
    handlers: list[std_logging.Handler] = root.handlers[:]
    level: int = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging so failing tests show full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def rec(
    kind: TypeDefKind | str,
    name: str,
    definition: str = "",
    *,
    original_name: str | None = None,
    doc_comment: str | None = None,
    namespace: str | None = None,
) -> TypeDefRecord:
    """Build a `TypeDefRecord` tersely (``kind`` may be the wire spelling)."""
    return TypeDefRecord(
        kind=TypeDefKind(kind),
        name=name,
        definition=definition,
        original_name=original_name,
        doc_comment=doc_comment,
        namespace=namespace,
    )


def to_json_line(record: TypeDefRecord) -> str:
    """Serialize ``record`` the way the upstream macro layer does (one JSON line)."""
    obj: dict[str, Any] = {"kind": record.kind.value, "name": record.name, "def": record.definition}
    if record.original_name is not None:
        obj["original_name"] = record.original_name
    if record.doc_comment is not None:
        obj["js_doc"] = record.doc_comment
    if record.namespace is not None:
        obj["js_mod"] = record.namespace
    return json.dumps(obj)


def write_typedef_file(path: Path, records: Iterable[TypeDefRecord]) -> Path:
    """Write ``records`` as an intermediate type definition file and return ``path``."""
    path.write_text("".join(f"{to_json_line(r)}\n" for r in records), encoding="utf-8")
    return path
