"""
Pytest fixtures for rerank proxy tests.
The TEI backend is replaced by an httpx.MockTransport; nothing touches the network.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from rerank_proxy.core.config.settings import Settings
from rerank_proxy.infra.lifecycle.dependencies import get_http_client
from rerank_proxy.main import create_app

TEI_ENDPOINT = "http://tei.test"
MAX_BATCH_SIZE = 5


class FakeTEI:
    """
    Stand-in for the TEI `/rerank` endpoint.

    By default scores text i as (i + 1) / 10, so the last document wins.
    Tests replace `handler` to simulate failures.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = self.score_by_position

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @staticmethod
    def score_by_position(request: httpx.Request) -> httpx.Response:
        texts = json.loads(request.content)["texts"]
        return httpx.Response(
            200,
            json=[{"index": i, "score": (i + 1) / 10} for i in range(len(texts))],
        )

    def reply(self, status_code: int = 200, **kwargs):
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


class FailingStream(httpx.AsyncByteStream):
    """Response body that breaks after the status line was received."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        TEI_ENDPOINT=TEI_ENDPOINT,
        MAX_CLIENT_BATCH_SIZE=MAX_BATCH_SIZE,
    )


@pytest.fixture
def fake_tei():
    return FakeTEI()


@pytest.fixture
def mock_http_client(fake_tei):
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_tei))


@pytest.fixture
def app(test_settings, mock_http_client):
    app = create_app(test_settings)

    async def override_get_http_client():
        return mock_http_client

    app.dependency_overrides[get_http_client] = override_get_http_client
    yield app
    app.dependency_overrides = {}


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_stream():
    return FailingStream()
