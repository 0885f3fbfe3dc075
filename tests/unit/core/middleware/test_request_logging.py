"""Unit tests for request logging middleware."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from dinner_decider.core.middleware.logging import LoggingMiddleware


pytestmark = pytest.mark.unit


@pytest.fixture
def logging_client() -> TestClient:
    """App with LoggingMiddleware and two routes."""
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/ingredients")
    async def ingredients() -> list[dict[str, str]]:
        return []

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return TestClient(app)


class TestLoggingMiddleware:
    """Tests for LoggingMiddleware."""

    def test_logs_start_and_completion(self, logging_client: TestClient) -> None:
        """Should log both ends of a request."""
        with patch("dinner_decider.core.middleware.logging.logger") as mock_logger:
            logging_client.get("/ingredients")

        messages = [c.args[0] for c in mock_logger.info.call_args_list]
        assert messages == ["Request started", "Request completed"]
        assert mock_logger.info.call_args.kwargs == {"status_code": 200}

    def test_skips_excluded_paths(self, logging_client: TestClient) -> None:
        """Should not log health probes."""
        with patch("dinner_decider.core.middleware.logging.logger") as mock_logger:
            logging_client.get("/health")

        mock_logger.info.assert_not_called()

    def test_client_ip_prefers_forwarded_for(self) -> None:
        """Should use the first X-Forwarded-For address."""
        request = MagicMock()
        request.headers = {"x-forwarded-for": "10.0.0.1, 10.0.0.2"}

        assert LoggingMiddleware._get_client_ip(request) == "10.0.0.1"

    def test_client_ip_unknown_without_client(self) -> None:
        """Should fall back to 'unknown'."""
        request = MagicMock()
        request.headers = {}
        request.client = None

        assert LoggingMiddleware._get_client_ip(request) == "unknown"
