# topmark:header:start
#
#   project      : DtsGen
#   file         : loader.py
#   file_relpath : src/dtsgen/typedef/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load the intermediate type definition file.

The input is UTF-8 text with one JSON object per non-empty line::

    {"kind": "struct", "name": "Foo", "def": "a: number", "js_mod": "ns"}

Keys:
  * ``kind`` (required): one of `TypeDefKind` values.
  * ``name`` (required), ``def`` (required): strings.
  * ``original_name``, ``doc_comment`` (alias ``js_doc``), ``namespace``
    (alias ``js_mod``): optional strings; ``null`` means absent.

Unknown keys are ignored. Lines that are exactly empty are skipped; anything
else that fails to decode aborts the whole load with `MalformedRecordError`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from dtsgen.config.logging import get_logger
from dtsgen.core.errors import MalformedRecordError, TypeDefIOError
from dtsgen.typedef.model import TypeDefKind, TypeDefRecord

if TYPE_CHECKING:
    from pathlib import Path

    from dtsgen.config.logging import DtsgenLogger

logger: DtsgenLogger = get_logger(__name__)

# Optional record fields and the wire keys accepted for each (first match wins).
_OPTIONAL_KEYS: dict[str, tuple[str, ...]] = {
    "original_name": ("original_name",),
    "doc_comment": ("doc_comment", "js_doc"),
    "namespace": ("namespace", "js_mod"),
}


def _check_unicode(value: str, key: str, *, source: str, line_no: int) -> str:
    # JSON "\ud800" escapes decode to lone surrogates, which are not valid text
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedRecordError(
            source, line_no, f"field '{key}' is not valid Unicode ({exc.reason})"
        ) from exc
    return value


def _optional_str(
    obj: dict[str, Any],
    keys: tuple[str, ...],
    *,
    source: str,
    line_no: int,
) -> str | None:
    for key in keys:
        value: Any = obj.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise MalformedRecordError(
                source, line_no, f"field '{key}' must be a string, got {type(value).__name__}"
            )
        return _check_unicode(value, key, source=source, line_no=line_no)
    return None


def _required_str(obj: dict[str, Any], key: str, *, source: str, line_no: int) -> str:
    if key not in obj:
        raise MalformedRecordError(source, line_no, f"missing field '{key}'")
    value: Any = obj[key]
    if not isinstance(value, str):
        raise MalformedRecordError(
            source, line_no, f"field '{key}' must be a string, got {type(value).__name__}"
        )
    return _check_unicode(value, key, source=source, line_no=line_no)


def parse_record(line: str, *, line_no: int = 1, source: str = "<string>") -> TypeDefRecord:
    """Decode a single input line into a `TypeDefRecord`.

    Args:
        line (str): One line of the intermediate file (without its newline).
        line_no (int): 1-based line number, used in error messages.
        source (str): Name of the input, used in error messages.

    Returns:
        TypeDefRecord: The decoded record.

    Raises:
        MalformedRecordError: If the line is not a JSON object of the expected shape.
    """
    try:
        obj: Any = json.loads(line)
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(source, line_no, f"invalid JSON ({exc.msg})") from exc

    if not isinstance(obj, dict):
        raise MalformedRecordError(
            source, line_no, f"expected a JSON object, got {type(obj).__name__}"
        )

    kind_raw: str = _required_str(obj, "kind", source=source, line_no=line_no)
    try:
        kind = TypeDefKind(kind_raw)
    except ValueError as exc:
        raise MalformedRecordError(
            source,
            line_no,
            f"unknown kind '{kind_raw}' (expected one of: {', '.join(TypeDefKind.values())})",
        ) from exc

    optional: dict[str, str | None] = {
        field: _optional_str(obj, keys, source=source, line_no=line_no)
        for field, keys in _OPTIONAL_KEYS.items()
    }

    return TypeDefRecord(
        kind=kind,
        name=_required_str(obj, "name", source=source, line_no=line_no),
        definition=_required_str(obj, "def", source=source, line_no=line_no),
        **optional,
    )


def load_records_from_text(text: str, *, source: str = "<string>") -> list[TypeDefRecord]:
    """Decode every non-empty line of ``text``, preserving input order.

    Input order matters downstream: it decides the order in which ``impl``
    bodies are appended to their struct.

    Args:
        text (str): The whole intermediate file content.
        source (str): Name of the input, used in error messages.

    Returns:
        list[TypeDefRecord]: Records in input order.

    Raises:
        MalformedRecordError: On the first line that fails to decode.
    """
    records: list[TypeDefRecord] = []
    for line_no, raw in enumerate(text.split("\n"), start=1):
        line: str = raw.removesuffix("\r")
        if not line:
            continue
        records.append(parse_record(line, line_no=line_no, source=source))

    logger.debug("Loaded %d type definition record(s) from %s", len(records), source)
    return records


def load_records(path: Path) -> list[TypeDefRecord]:
    """Read and decode the intermediate type definition file at ``path``.

    Args:
        path (Path): Path to the intermediate file.

    Returns:
        list[TypeDefRecord]: Records in file order.

    Raises:
        TypeDefIOError: If the file cannot be opened, read, or decoded as UTF-8.
        MalformedRecordError: If a non-empty line is not a valid record.
    """
    logger.debug("Reading type definitions from %s", path)
    try:
        with path.open("r", encoding="utf-8", newline="") as fp:
            text: str = fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TypeDefIOError(path, str(exc)) from exc

    return load_records_from_text(text, source=str(path))
