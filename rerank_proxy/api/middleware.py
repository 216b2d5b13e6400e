import logging
import time

from fastapi import Request

logger = logging.getLogger("rerank_proxy.access")


async def log_requests(request: Request, call_next):
    start_time = time.perf_counter()

    response = await call_next(request)

    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} "
        f"status={response.status_code} time={process_time:.2f}ms"
    )

    return response
