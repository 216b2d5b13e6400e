import logging

from rerank_proxy.core.errors import BadRequest

logger = logging.getLogger(__name__)


def validate_request(query: str, documents: list[str], max_batch_size: int) -> None:
    """
    Reject requests that must never reach the backend.
    Raises BadRequest; returns None when the request is acceptable.
    """
    if not query.strip():
        logger.warning("Empty query received")
        raise BadRequest("Query cannot be empty")

    if not documents:
        logger.warning("No documents provided")
        raise BadRequest("Documents list cannot be empty")

    if len(documents) > max_batch_size:
        logger.warning(f"Too many documents: {len(documents)}")
        raise BadRequest(f"Too many documents, max: {max_batch_size}")
