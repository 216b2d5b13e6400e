from contextlib import asynccontextmanager
from fastapi import FastAPI
from rerank_proxy.infra.tei.client import create_http_client
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    logger.info("Starting rerank proxy server")
    logger.info(f"TEI endpoint: {settings.TEI_ENDPOINT}")
    logger.info(f"Listening on port: {settings.TEI_PROXY_PORT}")
    logger.info(f"Max documents per request: {settings.MAX_CLIENT_BATCH_SIZE}")

    # Shared, pooled client for all TEI calls
    app.state.http_client = create_http_client()

    logger.info("Server started successfully")

    yield

    logger.info("Shutting down rerank proxy...")

    logger.info("Closing HTTP client...")
    await app.state.http_client.aclose()
    app.state.http_client = None

    logger.info("Shutdown complete.")
