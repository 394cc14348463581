"""Tests for corpus loading and typed field extraction."""

import json

import pytest

from talos_sdk.errors import CorpusError
from talos_sdk.vectors import (
    ExpectedError,
    TestVector,
    VectorCorpus,
    corpus_from_dict,
    get_bool,
    get_int,
    get_str,
    load_corpus,
)


def _write(tmp_path, data) -> str:
    path = tmp_path / "vectors.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_corpus(tmp_path) -> None:
    path = _write(tmp_path, {
        "vectors": [
            {"test_id": "sign_a", "inputs": {"seed_hex": "00"}, "expected": {"verify": True}},
        ],
        "negative_cases": [
            {
                "test_id": "invalid_seed_short",
                "inputs": {"seed_hex": "00"},
                "expected": {},
                "expected_error": {"code": "TALOS_INVALID_INPUT", "message_contains": "32"},
            },
        ],
    })
    corpus = load_corpus(path)
    assert len(corpus) == 2
    assert corpus.vectors == (
        TestVector("sign_a", {"seed_hex": "00"}, {"verify": True}, None),
    )
    assert corpus.negative_cases[0].expected_error == ExpectedError(
        code="TALOS_INVALID_INPUT", message_contains="32"
    )


def test_missing_sections_are_empty() -> None:
    assert corpus_from_dict({}) == VectorCorpus()


def test_missing_vector_fields_default() -> None:
    corpus = corpus_from_dict({"vectors": [{"test_id": "x"}]})
    vector = corpus.vectors[0]
    assert vector.inputs == {}
    assert vector.expected == {}
    assert vector.expected_error is None


def test_partial_expected_error() -> None:
    corpus = corpus_from_dict({
        "negative_cases": [{"test_id": "x", "expected_error": {"code": None}}],
    })
    assert corpus.negative_cases[0].expected_error == ExpectedError()


def test_order_is_preserved() -> None:
    ids = [f"sign_{i}" for i in range(10)]
    corpus = corpus_from_dict({"vectors": [{"test_id": i} for i in ids]})
    assert [v.test_id for v in corpus.vectors] == ids


@pytest.mark.parametrize("data", [
    [],
    {"vectors": {}},
    {"vectors": ["sign_a"]},
    {"vectors": [{"test_id": 3}]},
    {"vectors": [{"test_id": "a", "inputs": []}]},
    {"negative_cases": [{"test_id": "a", "expected_error": "boom"}]},
    {"negative_cases": [{"test_id": "a", "expected_error": {"code": 1}}]},
])
def test_bad_shape(data) -> None:
    with pytest.raises(CorpusError):
        corpus_from_dict(data)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(CorpusError, match="Error reading file"):
        load_corpus(tmp_path / "nope.json")


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "vectors.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CorpusError, match="Error parsing JSON"):
        load_corpus(path)


def test_deeply_nested_json(tmp_path) -> None:
    path = tmp_path / "vectors.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    with pytest.raises(CorpusError, match="Error parsing JSON"):
        load_corpus(path)


# ---------------------------------------------------------------------------
# Typed extraction
# ---------------------------------------------------------------------------

FIELDS = {"s": "text", "b": False, "i": 64, "f": 64.0, "g": 1.5, "n": None}


def test_get_str() -> None:
    assert get_str(FIELDS, "s") == "text"
    assert get_str(FIELDS, "i") is None
    assert get_str(FIELDS, "missing") is None


def test_get_bool() -> None:
    assert get_bool(FIELDS, "b") is False
    assert get_bool(FIELDS, "s") is None
    assert get_bool(FIELDS, "i") is None


def test_get_int() -> None:
    assert get_int(FIELDS, "i") == 64
    assert get_int(FIELDS, "f") == 64
    assert get_int(FIELDS, "g") is None
    assert get_int(FIELDS, "b") is None
    assert get_int(FIELDS, "n") is None
