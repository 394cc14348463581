"""Canonical JSON encoding.

One byte sequence per logical value: object keys sorted by code point, no
insignificant whitespace, UTF-8 output, integers as integers and floats in
their shortest round-trip form.  Two objects holding the same key/value pairs
encode identically whatever their insertion order, and
``canonical_json(parse(canonical_json(v))) == canonical_json(v)``.
"""

from __future__ import annotations

import json
import math
from typing import Any

from .errors import EncodingError


def canonical_json(value: Any) -> bytes:
    """Serialize a JSON value to canonical JSON bytes.

    Args:
        value: ``None``, bool, int, float, str, list/tuple, or dict with str
            keys, nested arbitrarily.

    Returns:
        UTF-8 encoded canonical JSON bytes.

    Raises:
        EncodingError: If the value contains a non-finite float, a non-string
            object key, an unsupported type, a reference cycle, or nesting
            too deep to encode.
    """
    try:
        normalized = _normalize(value, set())
        text = json.dumps(
            normalized,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except RecursionError as exc:
        raise EncodingError("value is nested too deeply to encode", cause=exc) from exc
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"string is not valid unicode: {exc}", cause=exc) from exc


encode = canonical_json


def parse(data: bytes | str) -> Any:
    """Parse JSON text back into a value.

    Raises:
        EncodingError: If the text is not valid JSON or uses the non-standard
            ``NaN``/``Infinity`` literals.
    """
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise EncodingError(f"invalid JSON: {exc}", cause=exc) from exc


def _reject_constant(name: str) -> Any:
    raise EncodingError(f"non-finite number {name} has no canonical form")


def _normalize(value: Any, active: set[int]) -> Any:
    """Recursively validate a value and convert tuples to lists."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"non-finite number {value!r} has no canonical form")
        return float(value)
    if isinstance(value, (list, tuple, dict)):
        marker = id(value)
        if marker in active:
            raise EncodingError("cyclic structure has no canonical form")
        active.add(marker)
        try:
            if isinstance(value, dict):
                out: dict[str, Any] = {}
                for key, item in value.items():
                    if not isinstance(key, str):
                        raise EncodingError(f"object key must be a string, got {type(key).__name__}")
                    out[key] = _normalize(item, active)
                return out
            return [_normalize(item, active) for item in value]
        finally:
            active.discard(marker)
    raise EncodingError(f"cannot canonicalize type: {type(value).__name__}")
