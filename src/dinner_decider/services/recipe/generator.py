"""Recipe suggestion generator.

Turns a list of ingredients into a prompt, sends it to the LLM and
returns the parsed suggestions unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from dinner_decider.llm.prompts.recipe_suggestion import RecipeSuggestionPrompt
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.recipe import RecipeResponse


if TYPE_CHECKING:
    from collections.abc import Sequence

    from dinner_decider.llm.client.protocol import LLMClientProtocol
    from dinner_decider.schemas.ingredient import Ingredient

logger = get_logger(__name__)


@runtime_checkable
class RecipeGeneratorProtocol(Protocol):
    """Anything that can turn ingredients into recipe suggestions."""

    async def generate(self, ingredients: Sequence[Ingredient]) -> RecipeResponse:
        """Generate suggestions for the given ingredients.

        Raises:
            LLMError: Subclass matching the failure kind.
        """
        ...


class RecipeSuggestionGenerator:
    """Generates dinner suggestions through an LLM client."""

    def __init__(
        self,
        llm_client: LLMClientProtocol,
        prompt: RecipeSuggestionPrompt | None = None,
    ) -> None:
        self.llm_client = llm_client
        self.prompt = prompt or RecipeSuggestionPrompt()

    async def generate(self, ingredients: Sequence[Ingredient]) -> RecipeResponse:
        """Generate suggestions for the given ingredients.

        An empty list is valid; the prompt then says no ingredients are
        available.

        Raises:
            LLMError: Subclass matching the failure kind.
        """
        prompt_text = self.prompt.format(ingredients=ingredients)

        logger.debug(
            "Requesting recipe suggestions",
            prompt=self.prompt.name,
            ingredient_count=len(ingredients),
        )

        result = await self.llm_client.generate(prompt_text, RecipeResponse)

        logger.info(
            "Recipe suggestions generated",
            suggestion_count=len(result.suggestions),
        )
        return result
