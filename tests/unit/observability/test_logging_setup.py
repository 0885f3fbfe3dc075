"""Unit tests for logging module.

Tests cover:
- Context variable management
- Logger retrieval
- JSON and text formatting
- Sink configuration
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import orjson
import pytest

from dinner_decider.observability.logging import (
    InterceptHandler,
    _format_json,
    _format_text,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    setup_logging,
)


pytestmark = pytest.mark.unit


def _record(message: str = "hello", exception: object = None) -> dict:
    level = MagicMock()
    level.name = "INFO"
    return {
        "time": datetime(2024, 1, 15, 12, 0, tzinfo=UTC),
        "level": level,
        "message": message,
        "name": "dinner_decider.test",
        "function": "fn",
        "line": 10,
        "extra": {"ingredient_id": 3},
        "exception": exception,
    }


@pytest.fixture(autouse=True)
def _clean_context() -> None:
    clear_context()


class TestContextManagement:
    """Tests for logging context management."""

    def test_bind_context_merges(self) -> None:
        """Should merge successive bindings."""
        bind_context(request_id="req-1")
        bind_context(path="/ingredients")

        assert get_context() == {"request_id": "req-1", "path": "/ingredients"}

    def test_clear_context(self) -> None:
        """Should drop every binding."""
        bind_context(request_id="req-1")
        clear_context()

        assert get_context() == {}

    def test_get_context_returns_copy(self) -> None:
        """Should not expose the stored dict."""
        bind_context(request_id="req-1")
        get_context()["request_id"] = "changed"

        assert get_context()["request_id"] == "req-1"


class TestGetLogger:
    """Tests for get_logger."""

    def test_binds_name(self) -> None:
        """Should bind the module name."""
        with patch("dinner_decider.observability.logging.logger") as mock_logger:
            get_logger("dinner_decider.x")

        mock_logger.bind.assert_called_once_with(name="dinner_decider.x")


class TestFormatters:
    """Tests for the JSON and text formatters."""

    def test_json_line_includes_extra_and_context(self) -> None:
        """Should emit one JSON object with extras and request context."""
        bind_context(request_id="req-9")
        record = _record()

        template = _format_json(record)

        assert template == "{extra[_json]}\n"
        payload = orjson.loads(record["extra"]["_json"])
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["ingredient_id"] == 3
        assert payload["request_id"] == "req-9"

    def test_json_line_includes_exception(self) -> None:
        """Should describe the exception type and value."""
        exception = MagicMock()
        exception.type = ValueError
        exception.value = ValueError("bad")
        record = _record(exception=exception)

        _format_json(record)

        payload = orjson.loads(record["extra"]["_json"])
        assert payload["exception"] == {"type": "ValueError", "value": "bad"}

    def test_text_format_escapes_context_braces(self) -> None:
        """Should keep context values out of the template syntax."""
        bind_context(note="{x}")

        fmt = _format_text(_record())

        assert "note={{x}}" in fmt
        assert fmt.endswith("<level>{message}</level>\n")

    def test_text_format_appends_exception(self) -> None:
        """Should add the exception placeholder when one is attached."""
        fmt = _format_text(_record(exception=MagicMock()))

        assert fmt.endswith("{exception}\n")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_sink_outside_development(self) -> None:
        """Should install the JSON formatter."""
        with (
            patch("dinner_decider.observability.logging.logger") as mock_logger,
            patch("dinner_decider.observability.logging.logging.basicConfig"),
        ):
            setup_logging("info", "json")

        mock_logger.remove.assert_called_once()
        kwargs = mock_logger.add.call_args.kwargs
        assert kwargs["format"] is _format_json
        assert kwargs["level"] == "INFO"

    def test_text_sink_in_development(self) -> None:
        """Should force the text formatter in development."""
        with (
            patch("dinner_decider.observability.logging.logger") as mock_logger,
            patch("dinner_decider.observability.logging.logging.basicConfig"),
        ):
            setup_logging("DEBUG", "json", is_development=True)

        assert mock_logger.add.call_args.kwargs["format"] is _format_text

    def test_intercepts_standard_logging(self) -> None:
        """Should route stdlib logging through InterceptHandler."""
        with (
            patch("dinner_decider.observability.logging.logger"),
            patch(
                "dinner_decider.observability.logging.logging.basicConfig"
            ) as mock_basic_config,
        ):
            setup_logging()

        handlers = mock_basic_config.call_args.kwargs["handlers"]
        assert isinstance(handlers[0], InterceptHandler)
        assert logging.getLogger("httpx").level == logging.WARNING
