from fastapi import APIRouter, Depends

from rerank_proxy.application.rerank.rerank import RerankService
from rerank_proxy.application.rerank.schemas import (
    ErrorResponse,
    RerankRequest,
    RerankResponse,
)
from rerank_proxy.infra.lifecycle.dependencies import get_rerank_service

router = APIRouter(prefix="/rerank", tags=["rerank"])


@router.post(
    "",
    response_model=RerankResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def rerank(
    request: RerankRequest,
    rerank_service: RerankService = Depends(get_rerank_service),
):
    """
    Score documents against the query via TEI, most relevant first.
    """
    return await rerank_service.rerank(request)
