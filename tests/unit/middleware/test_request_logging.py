"""Tests for the request logging middleware."""
import logging

import pytest
from unittest.mock import AsyncMock, Mock

from reformed_chapter.middleware.request_logging import RequestLoggingMiddleware, _client_address


@pytest.fixture
def call_next():
    """Mock call_next returning a 200 response."""
    mock_response = Mock(status_code=200)
    return AsyncMock(return_value=mock_response)


def _make_request(method="GET", path="/api/books", headers=None, client_host="127.0.0.1"):
    """Build a mock request."""
    request = Mock()
    request.method = method
    request.url = Mock(path=path)
    request.headers = headers or {}
    request.client = Mock(host=client_host) if client_host else None
    return request


class TestClientAddress:

    def test_prefers_first_forwarded_hop(self):
        request = _make_request(headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
        assert _client_address(request) == "203.0.113.7"

    def test_uses_real_ip_header(self):
        request = _make_request(headers={"X-Real-IP": " 198.51.100.2 "})
        assert _client_address(request) == "198.51.100.2"

    def test_falls_back_to_socket_peer(self):
        assert _client_address(_make_request(client_host="192.0.2.9")) == "192.0.2.9"

    def test_unknown_without_client(self):
        assert _client_address(_make_request(client_host=None)) == "unknown"


class TestRequestLoggingMiddleware:

    @pytest.mark.asyncio
    async def test_logs_completed_request(self, call_next, caplog):
        middleware = RequestLoggingMiddleware(Mock())

        with caplog.at_level(logging.INFO, logger="reformed_chapter.middleware.request_logging"):
            response = await middleware.dispatch(_make_request(), call_next)

        assert response.status_code == 200
        assert "GET /api/books -> 200" in caplog.text
        assert "client=127.0.0.1" in caplog.text

    @pytest.mark.asyncio
    async def test_logs_and_reraises_failures(self, caplog):
        middleware = RequestLoggingMiddleware(Mock())
        failing = AsyncMock(side_effect=RuntimeError("boom"))

        with caplog.at_level(logging.INFO, logger="reformed_chapter.middleware.request_logging"):
            with pytest.raises(RuntimeError):
                await middleware.dispatch(_make_request(method="POST", path="/api/create-payment-intent"), failing)

        assert "POST /api/create-payment-intent failed" in caplog.text
