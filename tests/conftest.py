"""Pytest fixtures for Giftery client tests."""

import httpx
import pytest

from giftery.clients.mocks import MockGifteryService
from giftery.clients.real_http import GifteryClient


class RecordingTransport:
    """Answers every request with a fixed response and keeps what was sent."""

    def __init__(
        self,
        status_code: int = 200,
        body: str = '{"status":"ok","data":{"balance":"0"}}',
        error: Exception = None,
        content: bytes = None,
        headers: dict = None,
    ):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.headers = headers or {}
        self.error = error
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, headers=self.headers, content=self.content)
        return httpx.Response(self.status_code, headers=self.headers, text=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def make_client():
    """Build a client whose transport answers with the given status, body or error."""

    def _make(**kwargs):
        recorder = RecordingTransport(**kwargs)
        return GifteryClient(42, "s", transport=recorder.transport()), recorder

    return _make


@pytest.fixture
def client(recorder):
    return GifteryClient(42, "s", transport=recorder.transport())


@pytest.fixture
def mock_service():
    return MockGifteryService(client_id=7, secret="top-secret")


@pytest.fixture
def mock_client(mock_service):
    return GifteryClient(7, "top-secret", transport=mock_service.transport())
