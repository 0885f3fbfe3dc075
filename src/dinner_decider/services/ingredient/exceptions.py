"""Exceptions for the ingredient service."""

from __future__ import annotations


class IngredientServiceError(Exception):
    """Base exception for ingredient service errors."""


class IngredientValidationError(IngredientServiceError):
    """Raised when an ingredient request is missing or has malformed input.

    Attributes:
        field: Name of the offending field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
