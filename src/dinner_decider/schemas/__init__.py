"""Pydantic schemas for request/response validation."""

from dinner_decider.schemas.base import APIRequest, APIResponse, DownstreamResponse
from dinner_decider.schemas.health import (
    DependencyHealthResponse,
    HealthResponse,
    HealthStatus,
)
from dinner_decider.schemas.ingredient import (
    CreateIngredientRequest,
    Ingredient,
    NewIngredient,
    UpdateIngredientRequest,
)
from dinner_decider.schemas.recipe import RecipeResponse, RecipeSuggestion


__all__ = [
    "APIRequest",
    "APIResponse",
    "CreateIngredientRequest",
    "DependencyHealthResponse",
    "DownstreamResponse",
    "HealthResponse",
    "HealthStatus",
    "Ingredient",
    "NewIngredient",
    "RecipeResponse",
    "RecipeSuggestion",
    "UpdateIngredientRequest",
]
