import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from rerank_proxy.api.exceptions import (
    app_error_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from rerank_proxy.api.middleware import log_requests
from rerank_proxy.api.router import router as api_router
from rerank_proxy.core.config.settings import Settings, settings
from rerank_proxy.core.errors import AppError
from rerank_proxy.core.logging_config import setup_logging
from rerank_proxy.infra.lifecycle.app import lifespan

CORS_ALLOW_HEADERS = ["content-type", "authorization"]
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="Translates chat-UI rerank requests to a TEI reranker and back.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_headers=CORS_ALLOW_HEADERS,
        allow_methods=CORS_ALLOW_METHODS,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router)
    return app


setup_logging(settings.LOG_LEVEL)
app = create_app(settings)


def run() -> None:
    uvicorn.run(
        app,
        host=settings.TEI_PROXY_HOST,
        port=settings.TEI_PROXY_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
