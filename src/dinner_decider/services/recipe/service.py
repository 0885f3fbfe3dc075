"""Recipe service.

Reads the refrigerator contents and asks the generator for dinner ideas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dinner_decider.database.exceptions import DatabaseError
from dinner_decider.llm.exceptions import LLMError
from dinner_decider.observability.logging import get_logger
from dinner_decider.services.recipe.exceptions import (
    RecipeGenerationError,
    RecipeServiceError,
)


if TYPE_CHECKING:
    from dinner_decider.database.repositories.protocol import IngredientStore
    from dinner_decider.schemas.recipe import RecipeResponse
    from dinner_decider.services.recipe.generator import RecipeGeneratorProtocol

logger = get_logger(__name__)


class RecipeService:
    """Service for recipe suggestions."""

    def __init__(
        self,
        repository: IngredientStore,
        generator: RecipeGeneratorProtocol,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Store to read ingredients from.
            generator: Generator that produces suggestions.
        """
        self.repository = repository
        self.generator = generator

    async def get_recipe_suggestion(self) -> RecipeResponse:
        """Suggest dinners from everything currently stored.

        Raises:
            RecipeServiceError: If the ingredients cannot be read.
            RecipeGenerationError: If generation fails; carries the LLM error kind.
        """
        try:
            ingredients = await self.repository.get_all()
        except DatabaseError as e:
            msg = f"failed to get ingredients: {e}"
            raise RecipeServiceError(msg) from e

        try:
            return await self.generator.generate(list(ingredients or []))
        except LLMError as e:
            logger.warning(
                "Recipe generation failed",
                kind=str(e.kind),
                error=str(e),
            )
            msg = f"failed to generate recipe suggestion: {e}"
            raise RecipeGenerationError(msg, cause=e) from e
