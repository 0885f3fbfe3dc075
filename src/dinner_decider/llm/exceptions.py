"""LLM client exceptions.

This module defines exceptions specific to LLM client operations. Each
exception carries an ``LLMErrorKind`` so callers can map failures to HTTP
responses without inspecting message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class LLMErrorKind(StrEnum):
    """Failure modes of a generation request."""

    TRANSPORT = "transport"
    UPSTREAM_STATUS = "upstream_status"
    MALFORMED_ENVELOPE = "malformed_envelope"
    MALFORMED_CONTENT = "malformed_content"


class LLMError(Exception):
    """Base exception for LLM client errors."""

    kind: ClassVar[LLMErrorKind]


class LLMUnavailableError(LLMError):
    """Raised when the LLM service cannot be reached.

    Covers connection failures and request timeouts. Task cancellation is
    not converted and propagates as ``asyncio.CancelledError``.
    """

    kind = LLMErrorKind.TRANSPORT


class LLMTimeoutError(LLMUnavailableError):
    """Raised when an LLM request times out."""


class LLMResponseError(LLMError):
    """Raised when the LLM returns a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the service.
        body: Raw response body, kept for diagnostics.
    """

    kind = LLMErrorKind.UPSTREAM_STATUS

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Ollama API returned status {status_code}: {body}")


class LLMMalformedResponseError(LLMError):
    """Raised when the outer response envelope cannot be parsed."""

    kind = LLMErrorKind.MALFORMED_ENVELOPE


class LLMValidationError(LLMError):
    """Raised when LLM response fails schema validation.

    The LLM returned a response, but the embedded text doesn't conform to
    the expected structured output schema.
    """

    kind = LLMErrorKind.MALFORMED_CONTENT
