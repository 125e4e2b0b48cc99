from __future__ import annotations

import json

import pytest

from aide_report.decode import decode_cardinality, decode_terms
from aide_report.errors import DecodeError

from tests.search_fakes import terms_body


def test_decode_cardinality_value():
    assert decode_cardinality(b'{"aggregations":{"1":{"value": 7}}}') == 7


def test_decode_cardinality_accepts_text():
    assert decode_cardinality('{"aggregations":{"1":{"value": 0}}}') == 0


def test_decode_terms_preserves_backend_order():
    raw = json.dumps(
        {
            "aggregations": {
                "2": {
                    "buckets": [
                        {"key": "AS1", "doc_count": 10},
                        {"key": "AS2", "doc_count": 3},
                    ]
                }
            }
        }
    )
    buckets = decode_terms(raw)
    assert [b.key for b in buckets] == ["AS1", "AS2"]
    assert [b.doc_count for b in buckets] == [10, 3]


def test_decode_terms_does_not_resort():
    buckets = decode_terms(terms_body([("low", 1), ("high", 99)]))
    assert [b.key for b in buckets] == ["low", "high"]


def test_decode_terms_empty_buckets():
    assert decode_terms(terms_body([])) == []


def test_decode_terms_keeps_partial_results_when_timed_out(caplog):
    raw = json.dumps(
        {
            "timed_out": True,
            "aggregations": {"2": {"buckets": [{"key": "AS1", "doc_count": 1}]}},
        }
    )
    with caplog.at_level("WARNING", logger="aide_report.decode"):
        buckets = decode_terms(raw)
    assert len(buckets) == 1
    assert "timed out" in caplog.text


@pytest.mark.parametrize(
    "raw",
    [
        b'{"took": 5, "timed_out": false}',
        b'{"aggregations": {}}',
        b'{"aggregations": {"1": {"value": 7}}}',
        b'{"aggregations": {"2": {"buckets": [{"key": "AS1"}]}}}',
        b'{"aggregations": {"2": {"buckets": [{"key": "AS1", "doc_count": "10"}]}}}',
        b'{"aggregations": {"2": {"buckets": [{"key": 5, "doc_count": 10}]}}}',
        b'{"aggregations": {"2": {"buckets": [{"key": "AS1", "doc_count": -1}]}}}',
        b'{"aggregations": {"2": {"buckets": {"key": "AS1"}}}}',
        b"not json",
    ],
)
def test_decode_terms_rejects_malformed_responses(raw):
    with pytest.raises(DecodeError):
        decode_terms(raw)


@pytest.mark.parametrize(
    "raw",
    [
        b'{"took": 5}',
        b'{"aggregations": {"2": {"buckets": []}}}',
        b'{"aggregations": {"1": {}}}',
        b'{"aggregations": {"1": {"value": "7"}}}',
        b'{"aggregations": {"1": {"value": 7.5}}}',
        b"",
    ],
)
def test_decode_cardinality_rejects_malformed_responses(raw):
    with pytest.raises(DecodeError):
        decode_cardinality(raw)


def test_decode_rejects_already_parsed_payloads():
    with pytest.raises(DecodeError, match="raw JSON"):
        decode_cardinality({"aggregations": {"1": {"value": 7}}})
