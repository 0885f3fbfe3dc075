"""Prompt definitions for LLM requests."""

from dinner_decider.llm.prompts.base import BasePrompt
from dinner_decider.llm.prompts.recipe_suggestion import (
    NO_INGREDIENTS_PLACEHOLDER,
    RecipeSuggestionPrompt,
)


__all__ = ["NO_INGREDIENTS_PLACEHOLDER", "BasePrompt", "RecipeSuggestionPrompt"]
