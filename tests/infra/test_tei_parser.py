import json

import pytest

from rerank_proxy.core.errors import TEIError
from rerank_proxy.infra.tei.parser import parse_rerank_response


def test_parses_scores_in_backend_order():
    raw = json.dumps([{"index": 1, "score": 0.9}, {"index": 0, "score": 0.1}])

    results = parse_rerank_response(raw, expected_count=2)

    assert [(r.index, r.score) for r in results] == [(1, 0.9), (0, 0.1)]


def test_ignores_extra_fields():
    raw = json.dumps([{"index": 0, "score": 2, "text": "a dog"}])

    results = parse_rerank_response(raw, expected_count=1)

    assert results[0].score == 2.0


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        '{"error": "overloaded"}',
        '[{"index": 0}]',
        '[{"index": -1, "score": 0.5}]',
        '[{"index": "0", "score": 0.5}]',
        '[{"index": 0, "score": NaN}]',
        '[{"index": 0, "score": Infinity}]',
        '[{"index": 0, "score": -Infinity}]',
    ],
)
def test_malformed_reply_embeds_raw_body(raw):
    with pytest.raises(TEIError) as exc_info:
        parse_rerank_response(raw, expected_count=1)

    assert exc_info.value.message == (
        "Invalid response format from TEI service. "
        f"Expected array of scores, got: {raw}"
    )


@pytest.mark.parametrize("count", [0, 2])
def test_length_mismatch(count):
    raw = json.dumps([{"index": i, "score": 0.5} for i in range(count)])

    with pytest.raises(TEIError, match="length doesn't match"):
        parse_rerank_response(raw, expected_count=1)


def test_indices_are_not_range_checked():
    raw = json.dumps([{"index": 7, "score": 0.5}])

    assert parse_rerank_response(raw, expected_count=1)[0].index == 7
