from rerank_proxy.application.rerank.schemas import (
    RerankRequest,
    RerankResponse,
    RerankResult,
)
from rerank_proxy.infra.tei.schemas import TEIRankResult, TEIRerankRequest


def to_tei_request(request: RerankRequest) -> TEIRerankRequest:
    # Position in `texts` is the only link back to the caller's documents.
    return TEIRerankRequest(query=request.query, texts=list(request.documents))


def to_rerank_response(ranked: list[TEIRankResult]) -> RerankResponse:
    return RerankResponse(
        results=[
            RerankResult(index=result.index, relevance_score=result.score)
            for result in ranked
        ]
    )
