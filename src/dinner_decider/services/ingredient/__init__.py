"""Ingredient service package."""

from dinner_decider.services.ingredient.exceptions import (
    IngredientServiceError,
    IngredientValidationError,
)
from dinner_decider.services.ingredient.service import IngredientService


__all__ = [
    "IngredientService",
    "IngredientServiceError",
    "IngredientValidationError",
]
