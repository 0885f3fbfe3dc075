"""Exceptions for the recipe service."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from dinner_decider.llm.exceptions import LLMError, LLMErrorKind


class RecipeServiceError(Exception):
    """Base exception for recipe service errors."""


class RecipeGenerationError(RecipeServiceError):
    """Raised when the LLM fails to produce recipe suggestions.

    Wraps the underlying ``LLMError`` and keeps its kind so the API layer
    can tell an unreachable backend from a garbled reply.
    """

    def __init__(self, message: str, cause: LLMError) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            cause: The LLM failure being wrapped.
        """
        self.cause = cause
        super().__init__(message)

    @property
    def kind(self) -> LLMErrorKind:
        """Failure kind of the wrapped LLM error."""
        return self.cause.kind
