"""Load a MIME part tree from a JSON document.

WHY: The encoder works on Python dataclasses, but trees often come from
outside Python: fixtures, templates, other services, the command line.
A JSON description validated against a schema gives those callers a
stable, documented format and clear errors before anything is encoded.

HOW: The document is validated with jsonschema against
schemas/part.schema.json, then converted recursively into the IR. Each
header field object carries a "field" discriminator ("mime-version",
"content-type", ..., "generic"). Bodies are {"data": text},
{"data_base64": b64}, {"part": {...}} or a list of data/part objects.

RULES:
- Schema violations raise TreeLoadError carrying the JSON path
- "data" strings are stored as UTF-8; "data_base64" is decoded to bytes
- Disposition dates are ISO 8601 strings; a trailing "Z" means UTC
- mime-version defaults to 1.0 when major/minor are omitted
- Object key order is kept, so media type parameters encode in the
  order they appear in the document
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from mime_encoder.core.ir import (
    Body,
    BodyItem,
    ContentDescription,
    ContentDisposition,
    ContentId,
    ContentTransferEncoding,
    ContentType,
    Data,
    Disposition,
    DispositionParameters,
    DispositionType,
    Field,
    GenericField,
    MediaType,
    Mechanism,
    MimeVersion,
    Part,
)
from mime_encoder.errors import TreeLoadError

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "part.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Return the part tree schema, loading it from disk on first use."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _join_path(path: str, key: Union[str, int]) -> str:
    return "{}/{}".format(path, key) if path else str(key)


def _parse_timestamp(value: str, path: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise TreeLoadError("Invalid ISO 8601 timestamp: {!r}".format(value), path) from None


def _load_disposition(raw: Dict[str, Any], path: str) -> Disposition:
    params = raw.get("parameters", {})
    params_path = _join_path(path, "parameters")
    dates = {}
    for key in ("creation-date", "modification-date", "read-date"):
        if key in params:
            dates[key.replace("-", "_")] = _parse_timestamp(
                params[key], _join_path(params_path, key),
            )
    return Disposition(
        type=DispositionType(raw["type"]),
        parameters=DispositionParameters(
            filename=params.get("filename"),
            size=params.get("size"),
            **dates,
        ),
    )


def _load_field(raw: Dict[str, Any], path: str) -> Field:
    kind = raw["field"]
    if kind == "mime-version":
        return MimeVersion(raw.get("major", 1), raw.get("minor", 0))
    if kind == "content-type":
        return ContentType(MediaType(
            type=raw["type"],
            subtype=raw["subtype"],
            parameters=raw.get("parameters", {}),
        ))
    if kind == "content-transfer-encoding":
        return ContentTransferEncoding(Mechanism(raw["mechanism"]))
    if kind == "content-id":
        return ContentId(raw["id"])
    if kind == "content-description":
        return ContentDescription(raw["text"])
    if kind == "content-disposition":
        return ContentDisposition(_load_disposition(raw, path))
    if kind == "generic":
        return GenericField(raw["name"], raw["text"])
    raise TreeLoadError("Unknown header field kind: {!r}".format(kind), path)


def _load_item(raw: Dict[str, Any], path: str) -> BodyItem:
    if "part" in raw:
        return _load_part(raw["part"], _join_path(path, "part"))
    if "data_base64" in raw:
        try:
            content = base64.b64decode(raw["data_base64"], validate=True)
        except (binascii.Error, ValueError):
            raise TreeLoadError("Invalid base64 payload", _join_path(path, "data_base64")) from None
        return Data(content)
    return Data(raw["data"])


def _load_body(raw: Union[Dict[str, Any], List[Any]], path: str) -> Body:
    if isinstance(raw, list):
        return tuple(_load_item(item, _join_path(path, i)) for i, item in enumerate(raw))
    return _load_item(raw, path)


def _load_part(raw: Dict[str, Any], path: str) -> Part:
    header_path = _join_path(path, "header")
    header = tuple(
        _load_field(field, _join_path(header_path, i))
        for i, field in enumerate(raw.get("header", []))
    )
    return Part(header=header, body=_load_body(raw["body"], _join_path(path, "body")))


def load_part(document: Dict[str, Any]) -> Part:
    """Validate a JSON part-tree document and build the Part it describes.

    Args:
        document: Parsed JSON (dicts, lists, strings, ints).

    Returns:
        The root Part of the tree.

    Raises:
        TreeLoadError: If the document does not match the schema or holds
            values the schema cannot check (timestamps, base64).
    """
    try:
        jsonschema.validate(instance=document, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        path = "/".join(str(p) for p in exc.absolute_path)
        raise TreeLoadError(exc.message, path) from exc
    return _load_part(document, "")


def load_part_file(path: Union[str, Path]) -> Part:
    """Read a JSON part-tree document from ``path`` and load it.

    Raises:
        TreeLoadError: If the file is not UTF-8 JSON or not a valid tree.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as exc:
            raise TreeLoadError("Invalid JSON: {}".format(exc)) from exc
        except UnicodeDecodeError as exc:
            raise TreeLoadError("File is not valid UTF-8: {}".format(path)) from exc
    return load_part(document)
