import logging

from rerank_proxy.application.rerank.ranking import rank
from rerank_proxy.application.rerank.schemas import RerankRequest, RerankResponse
from rerank_proxy.application.rerank.translate import to_rerank_response, to_tei_request
from rerank_proxy.application.rerank.validation import validate_request
from rerank_proxy.infra.tei.client import TEIClient
from rerank_proxy.infra.tei.parser import parse_rerank_response

logger = logging.getLogger(__name__)


class RerankService:
    def __init__(self, tei_client: TEIClient, max_batch_size: int):
        self.tei_client = tei_client
        self.max_batch_size = max_batch_size

    async def rerank(self, request: RerankRequest) -> RerankResponse:
        """
        Rerank the request's documents through TEI.

        Flow:
        1. Validate before any network call
        2. Translate to the TEI schema and call the backend
        3. Parse and length-check the reply
        4. Sort by score, translate back

        Any failure propagates as an AppError; partial results are never returned.
        """
        logger.info(f"Processing rerank request for query: '{request.query}'")
        logger.info(
            f"Number of documents: {len(request.documents)}, top_n: {request.top_n}"
        )
        logger.debug(f"Incoming request:\n{request.model_dump_json(indent=2)}")

        # 1. Validate
        validate_request(request.query, request.documents, self.max_batch_size)

        # 2. Call TEI
        tei_request = to_tei_request(request)
        logger.debug(f"TEI Request:\n{tei_request.model_dump_json(indent=2)}")
        raw_body = await self.tei_client.rerank(tei_request)

        # 3. Parse
        results = parse_rerank_response(raw_body, expected_count=len(request.documents))
        logger.info(f"TEI request successful, processing {len(results)} scores")

        # 4. Rank
        response = to_rerank_response(rank(results))
        logger.debug(f"Final response:\n{response.model_dump_json(indent=2)}")
        logger.info(
            f"Successfully processed rerank request, returning {len(response.results)} results"
        )
        return response
