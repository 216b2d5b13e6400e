import logging

import anyio
import httpx

from rerank_proxy.core.errors import InternalError, TEIError
from rerank_proxy.infra.tei.schemas import TEIRerankRequest

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """
    Build the pooled client shared by all requests.
    Raises InternalError if the client cannot be constructed.

    No per-phase timeouts: TEIClient bounds each call as a whole.
    """
    try:
        return httpx.AsyncClient(timeout=None, follow_redirects=True)
    except Exception as e:
        logger.error(f"Failed to create HTTP client: {e}")
        raise InternalError("HTTP client creation failed") from e


class TEIClient:
    """
    Thin client for the TEI `/rerank` endpoint.

    One POST per call, never retried. `timeout` caps the whole call, from
    connecting to reading the last byte of the body. Every failure is
    surfaced as TEIError with a message suitable for the caller.
    """

    def __init__(self, endpoint: str, http_client: httpx.AsyncClient, timeout: float):
        self.endpoint = endpoint
        self.client = http_client
        self.timeout = timeout

    @property
    def rerank_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/rerank"

    async def rerank(self, request: TEIRerankRequest) -> str:
        """POST the request and return the raw response body."""
        logger.info(f"Forwarding request to TEI endpoint: {self.endpoint}")

        try:
            with anyio.fail_after(self.timeout):
                return await self._post(request)
        except TimeoutError as e:
            logger.error(f"TEI request timed out after {self.timeout}s")
            raise TEIError(
                f"Failed to connect to TEI service: request timed out after {self.timeout}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"TEI request failed: {e!r}")
            raise TEIError(f"Failed to connect to TEI service: {e}") from e

    async def _post(self, request: TEIRerankRequest) -> str:
        async with self.client.stream(
            "POST", self.rerank_url, json=request.model_dump()
        ) as response:
            if not response.is_success:
                error_text = await self._read_error_body(response)
                status = f"{response.status_code} {response.reason_phrase}".strip()
                logger.error(f"TEI returned error {status}: {error_text}")
                raise TEIError(f"TEI service error {status}: {error_text}")

            try:
                await response.aread()
                return response.text
            except httpx.HTTPError as e:
                logger.error(f"Failed to read TEI response body: {e}")
                raise TEIError("Failed to read response from TEI service") from e

    @staticmethod
    async def _read_error_body(response: httpx.Response) -> str:
        try:
            await response.aread()
            return response.text
        except httpx.HTTPError:
            return "Unknown error"
