"""Base class for LLM prompts.

Provides a standardized interface for defining prompts with:
- Typed input variables
- Structured output schemas
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BasePrompt(ABC, Generic[T]):
    """Base class for all LLM prompts.

    Keeps the prompt text next to the schema its reply must satisfy.

    Example:
        ```python
        class SuggestionPrompt(BasePrompt[RecipeResponse]):
            output_schema = RecipeResponse

            def format(self, ingredients: list[Ingredient]) -> str:
                return f"Suggest dinners using: {ingredients}"
        ```
    """

    # Override in subclasses
    output_schema: ClassVar[type[BaseModel]]
    """Pydantic model for structured output validation."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Format the prompt template with input variables.

        Args:
            **kwargs: Variables to substitute into template.

        Returns:
            Formatted prompt string ready for LLM.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__
