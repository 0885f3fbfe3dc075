"""Prompt for dinner recipe suggestions.

Asks the model for three dinner ideas built from the refrigerator contents,
answered in the JSON shape of ``RecipeResponse``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dinner_decider.llm.prompts.base import BasePrompt
from dinner_decider.schemas.recipe import RecipeResponse


if TYPE_CHECKING:
    from collections.abc import Sequence

    from dinner_decider.schemas.ingredient import Ingredient


NO_INGREDIENTS_PLACEHOLDER = "No ingredients available"

_TEMPLATE = """You are a professional chef and registered dietitian. Using the ingredients below, suggest three delicious and easy dinner menus.
For each menu, give the dish name, brief preparation steps, and any ingredients that are missing.
Always answer in JSON, following exactly this format.

{{
  "suggestions": [
    {{
      "name": "Dish name",
      "steps": ["Step 1", "Step 2", "Step 3"],
      "missing_items": ["Missing ingredient 1"]
    }}
  ]
}}

# Available ingredients
{ingredients}"""


class RecipeSuggestionPrompt(BasePrompt[RecipeResponse]):
    """Prompt requesting three dinner suggestions."""

    output_schema = RecipeResponse

    @staticmethod
    def format_ingredients(ingredients: Sequence[Ingredient]) -> str:
        """Render ingredients as ``name(quantity), name``.

        The quantity is omitted when empty. An empty list renders as
        the no-ingredients placeholder.
        """
        if not ingredients:
            return NO_INGREDIENTS_PLACEHOLDER

        parts = [
            f"{item.name}({item.quantity})" if item.quantity else item.name
            for item in ingredients
        ]
        return ", ".join(parts)

    def format(self, **kwargs: Any) -> str:
        """Build the prompt.

        Args:
            ingredients: Ingredients currently in the refrigerator.
        """
        ingredients: Sequence[Ingredient] = kwargs.get("ingredients") or []
        return _TEMPLATE.format(ingredients=self.format_ingredients(ingredients))
