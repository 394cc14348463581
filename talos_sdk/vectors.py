"""Test vector corpus model and loading.

Corpus JSON format::

    {
      "vectors":        [<TestVector>, ...],   # run as positive cases
      "negative_cases": [<TestVector>, ...]    # run as negative cases
    }

    TestVector: {"test_id": str, "inputs": {...}, "expected": {...},
                 "expected_error": {"code": str, "message_contains": str}?}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .errors import CorpusError


@dataclass(frozen=True)
class ExpectedError:
    """What a negative vector expects the raised error to look like.

    Empty strings mean "not checked".
    """

    code: str = ""
    message_contains: str = ""


@dataclass(frozen=True)
class TestVector:
    """A single declarative input/expected-output record."""

    __test__ = False  # not a pytest test class

    test_id: str
    inputs: Mapping[str, Any] = field(default_factory=dict)
    expected: Mapping[str, Any] = field(default_factory=dict)
    expected_error: ExpectedError | None = None


@dataclass(frozen=True)
class VectorCorpus:
    """Positive vectors followed by negative vectors, in file order."""

    vectors: tuple[TestVector, ...] = ()
    negative_cases: tuple[TestVector, ...] = ()

    def __len__(self) -> int:
        return len(self.vectors) + len(self.negative_cases)


# ----------------------------------------------------------------------
# Typed field extraction
#
# A field holding the wrong JSON type is treated as absent.
# ----------------------------------------------------------------------


def get_str(fields: Mapping[str, Any], key: str) -> str | None:
    value = fields.get(key)
    return value if isinstance(value, str) else None


def get_bool(fields: Mapping[str, Any], key: str) -> bool | None:
    value = fields.get(key)
    return value if isinstance(value, bool) else None


def get_int(fields: Mapping[str, Any], key: str) -> int | None:
    """Return an integer field; integral floats such as ``64.0`` count too."""
    value = fields.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------


def load_corpus(path: str | Path) -> VectorCorpus:
    """Read and parse a vector corpus file.

    Raises:
        CorpusError: If the file cannot be read, is not valid JSON, or does
            not have the corpus shape.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"Error reading file: {exc}") from exc
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise CorpusError(f"Error parsing JSON: {exc}") from exc
    return corpus_from_dict(data)


def corpus_from_dict(data: Any) -> VectorCorpus:
    """Build a VectorCorpus from already-parsed JSON data.

    Raises:
        CorpusError: If ``data`` does not have the corpus shape.
    """
    if not isinstance(data, dict):
        raise CorpusError("corpus root must be an object")
    return VectorCorpus(
        vectors=_vector_list(data.get("vectors"), "vectors"),
        negative_cases=_vector_list(data.get("negative_cases"), "negative_cases"),
    )


def _vector_list(value: Any, label: str) -> tuple[TestVector, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise CorpusError(f"{label} must be a list")
    return tuple(_vector(item, f"{label}[{idx}]") for idx, item in enumerate(value))


def _vector(value: Any, label: str) -> TestVector:
    if not isinstance(value, dict):
        raise CorpusError(f"{label} must be an object")
    test_id = value.get("test_id", "")
    if not isinstance(test_id, str):
        raise CorpusError(f"{label}.test_id must be a string")
    return TestVector(
        test_id=test_id,
        inputs=_object(value.get("inputs"), f"{label}.inputs"),
        expected=_object(value.get("expected"), f"{label}.expected"),
        expected_error=_expected_error(value.get("expected_error"), f"{label}.expected_error"),
    )


def _object(value: Any, label: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CorpusError(f"{label} must be an object")
    return value


def _expected_error(value: Any, label: str) -> ExpectedError | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise CorpusError(f"{label} must be an object")
    code = value.get("code")
    message_contains = value.get("message_contains")
    code = "" if code is None else code
    message_contains = "" if message_contains is None else message_contains
    if not isinstance(code, str) or not isinstance(message_contains, str):
        raise CorpusError(f"{label}.code and .message_contains must be strings")
    return ExpectedError(code=code, message_contains=message_contains)
