import json
import logging

from pydantic import ValidationError

from rerank_proxy.core.errors import TEIError
from rerank_proxy.infra.tei.schemas import TEIRankResult, TEIRerankResponse

logger = logging.getLogger(__name__)


def _log_raw_response(raw_body: str) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    try:
        pretty = json.dumps(json.loads(raw_body), indent=2)
        logger.debug(f"TEI Response:\n{pretty}")
    except ValueError:
        logger.debug(f"TEI Response (raw text):\n{raw_body}")


def parse_rerank_response(raw_body: str, expected_count: int) -> list[TEIRankResult]:
    """
    Decode a TEI `/rerank` reply and check it scores every submitted text.

    The reply must be a JSON array of {index, score} objects whose length
    equals `expected_count`. Indices are not checked for range or uniqueness.
    """
    _log_raw_response(raw_body)

    try:
        results = TEIRerankResponse.validate_json(raw_body)
    except ValidationError as e:
        logger.error(f"Failed to parse TEI response: {e}. Raw response: {raw_body}")
        raise TEIError(
            "Invalid response format from TEI service. "
            f"Expected array of scores, got: {raw_body}"
        ) from e

    if len(results) != expected_count:
        logger.error(
            f"TEI response length mismatch: expected {expected_count}, got {len(results)}"
        )
        raise TEIError("TEI response length doesn't match input documents")

    return results
