"""Database repositories."""

from dinner_decider.database.repositories.ingredient import IngredientRepository
from dinner_decider.database.repositories.protocol import IngredientStore


__all__ = ["IngredientRepository", "IngredientStore"]
