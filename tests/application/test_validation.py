import pytest

from rerank_proxy.application.rerank.validation import validate_request
from rerank_proxy.core.errors import BadRequest


def test_valid_request_passes():
    assert validate_request("query", ["a", "b"], max_batch_size=2) is None


@pytest.mark.parametrize("query", ["", " ", "\t\n"])
def test_blank_query_rejected(query):
    with pytest.raises(BadRequest, match="Query cannot be empty"):
        validate_request(query, ["a"], max_batch_size=10)


def test_empty_documents_rejected():
    with pytest.raises(BadRequest, match="Documents list cannot be empty"):
        validate_request("query", [], max_batch_size=10)


def test_batch_over_limit_rejected():
    with pytest.raises(BadRequest) as exc_info:
        validate_request("query", ["a", "b", "c"], max_batch_size=2)

    assert exc_info.value.message == "Too many documents, max: 2"


def test_query_checked_before_documents():
    with pytest.raises(BadRequest, match="Query cannot be empty"):
        validate_request("", [], max_batch_size=10)


def test_empty_document_strings_are_allowed():
    validate_request("query", ["", "  "], max_batch_size=10)
