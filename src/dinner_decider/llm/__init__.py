"""LLM integration.

This module provides:
- The Ollama HTTP client
- Typed LLM exceptions
- Prompt definitions
"""

from dinner_decider.llm.client import LLMClientProtocol, OllamaClient
from dinner_decider.llm.exceptions import (
    LLMError,
    LLMErrorKind,
    LLMMalformedResponseError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)


__all__ = [
    "LLMClientProtocol",
    "LLMError",
    "LLMErrorKind",
    "LLMMalformedResponseError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
    "OllamaClient",
]
