"""LLM Client Protocol definition.

Defines the interface that LLM clients must implement so the recipe
generator can be exercised against a fake in tests.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class LLMClientProtocol(Protocol):
    """Protocol for LLM client implementations.

    Key methods:
    - generate: Single structured generation request
    - initialize/shutdown: Lifecycle management for connection pools
    """

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def generate(self, prompt: str, schema: type[T]) -> T:
        """Generate structured output matching ``schema``.

        Args:
            prompt: Input prompt text.
            schema: Pydantic model the embedded response must satisfy.

        Returns:
            Instance of ``schema`` parsed from the model's reply.

        Raises:
            LLMError: Subclass matching the failure kind.
        """
        ...
