"""Recipe service package."""

from dinner_decider.services.recipe.exceptions import (
    RecipeGenerationError,
    RecipeServiceError,
)
from dinner_decider.services.recipe.generator import (
    RecipeGeneratorProtocol,
    RecipeSuggestionGenerator,
)
from dinner_decider.services.recipe.service import RecipeService


__all__ = [
    "RecipeGenerationError",
    "RecipeGeneratorProtocol",
    "RecipeService",
    "RecipeServiceError",
    "RecipeSuggestionGenerator",
]
