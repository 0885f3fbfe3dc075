"""HTTP client for Ollama LLM service.

This module provides an async HTTP client for communicating with
a local or remote Ollama instance for LLM inference.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from dinner_decider.llm.exceptions import (
    LLMMalformedResponseError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from dinner_decider.llm.models import OllamaGenerateRequest, OllamaGenerateResponse
from dinner_decider.observability.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class OllamaClient:
    """Async HTTP client for Ollama LLM service.

    Sends one non-streaming ``/api/generate`` request per call and parses
    the embedded JSON reply into a Pydantic model. A failed attempt is
    reported immediately; there are no retries.

    Attributes:
        base_url: Base URL of the Ollama service.
        model: Model to use for generation.
        timeout: HTTP request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the Ollama client.

        Args:
            base_url: Base URL of Ollama service (e.g., http://localhost:11434).
            model: Model name (e.g., llama2).
            timeout: HTTP request timeout in seconds (default: 30).
        """
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    @property
    def generate_url(self) -> str:
        """Get the generate endpoint URL."""
        return f"{self.base_url}/api/generate"

    async def initialize(self) -> None:
        """Initialize the HTTP client with connection pooling."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=20,
            ),
        )
        logger.info(
            "OllamaClient initialized",
            base_url=self.base_url,
            model=self.model,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("OllamaClient shutdown")

    async def _send(self, request: OllamaGenerateRequest) -> httpx.Response:
        """POST the request, translating transport failures."""
        if self._http_client is None:
            await self.initialize()

        assert self._http_client is not None

        try:
            return await self._http_client.post(
                self.generate_url,
                json=request.model_dump(exclude_none=True),
            )
        except httpx.TimeoutException as e:
            logger.warning(
                "Ollama request timeout",
                timeout=self.timeout,
                url=self.generate_url,
            )
            msg = f"Ollama request timeout after {self.timeout}s"
            raise LLMTimeoutError(msg) from e
        except httpx.RequestError as e:
            logger.warning(
                "Ollama connection error",
                url=self.generate_url,
                error=str(e),
            )
            msg = f"failed to send request to Ollama API: connection error: {e}"
            raise LLMUnavailableError(msg) from e

    async def generate(self, prompt: str, schema: type[T]) -> T:
        """Generate structured output matching a Pydantic schema.

        Args:
            prompt: Input prompt text.
            schema: Pydantic model class the embedded reply must satisfy.

        Returns:
            Instance of the schema class populated from the LLM response.

        Raises:
            LLMUnavailableError: If Ollama cannot be reached.
            LLMTimeoutError: If the request times out.
            LLMResponseError: If Ollama returns a non-success status.
            LLMMalformedResponseError: If the response envelope is not valid.
            LLMValidationError: If the embedded reply doesn't match schema.
        """
        request = OllamaGenerateRequest(
            model=self.model,
            prompt=prompt,
            stream=False,
            format="json",
        )

        response = await self._send(request)

        if not response.is_success:
            logger.error(
                "Ollama request failed",
                status_code=response.status_code,
                url=self.generate_url,
            )
            raise LLMResponseError(response.status_code, response.text)

        try:
            envelope = OllamaGenerateResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "Failed to parse Ollama response envelope",
                error=str(e),
                raw_response=response.text[:500],
            )
            msg = f"failed to unmarshal Ollama response: {e}"
            raise LLMMalformedResponseError(msg) from e

        try:
            parsed = schema.model_validate_json(envelope.response)
        except ValidationError as e:
            logger.warning(
                "Failed to parse structured LLM output",
                schema=schema.__name__,
                error=str(e),
                raw_response=envelope.response[:500],
            )
            msg = f"Response does not match {schema.__name__} schema: {e}"
            raise LLMValidationError(msg) from e

        logger.debug(
            "Ollama generation completed",
            model=envelope.model,
            prompt_tokens=envelope.prompt_eval_count,
            completion_tokens=envelope.eval_count,
        )
        return parsed
