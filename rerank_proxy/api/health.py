from fastapi import APIRouter

from rerank_proxy.application.rerank.schemas import HealthResponse

SERVICE_NAME = "rerank-proxy"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """
    Liveness check. Does NOT check the TEI backend.
    """
    return HealthResponse(status="healthy", service=SERVICE_NAME)
