import httpx
from fastapi import Depends, Request

from rerank_proxy.application.rerank.rerank import RerankService
from rerank_proxy.core.config.settings import Settings
from rerank_proxy.core.errors import InternalError
from rerank_proxy.infra.tei.client import TEIClient


def get_settings(request: Request) -> Settings:
    """
    Get the settings the app was built with.
    Handlers use this instead of reading the environment.
    """
    return request.app.state.settings


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.
    Owned by the lifespan; requests served outside it are an internal error.
    """
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise InternalError("HTTP client is not available")
    return client


def get_tei_client(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> TEIClient:
    return TEIClient(settings.TEI_ENDPOINT, http_client, timeout=settings.TEI_TIMEOUT)


def get_rerank_service(
    settings: Settings = Depends(get_settings),
    tei_client: TEIClient = Depends(get_tei_client),
) -> RerankService:
    """Rerank service with injected TEI client."""
    return RerankService(tei_client, max_batch_size=settings.MAX_CLIENT_BATCH_SIZE)
