"""FastAPI dependencies for service access.

This module provides reusable dependencies for accessing application services
in FastAPI route handlers. Services are initialized during application startup
and stored in app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from asyncpg import Pool

    from dinner_decider.core.config import Settings
    from dinner_decider.services.ingredient.service import IngredientService
    from dinner_decider.services.recipe.generator import RecipeGeneratorProtocol
    from dinner_decider.services.recipe.service import RecipeService


async def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with.

    Raises:
        HTTPException: 503 if settings are not attached to the app.
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)
    if settings is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application settings not available",
        )
    return settings


async def get_ingredient_service(request: Request) -> IngredientService:
    """Get the ingredient service from app state.

    Args:
        request: The incoming request.

    Returns:
        Initialized IngredientService.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: IngredientService | None = getattr(
        request.app.state, "ingredient_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Ingredient service not available",
        )
    return service


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: RecipeService | None = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe service not available",
        )
    return service


async def get_recipe_generator(request: Request) -> RecipeGeneratorProtocol:
    """Get the recipe generator used by the Ollama health check.

    Raises:
        HTTPException: 503 if the generator is not initialized.
    """
    generator: RecipeGeneratorProtocol | None = getattr(
        request.app.state, "recipe_generator", None
    )
    if generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe generator not available",
        )
    return generator


async def get_db_pool(request: Request) -> Pool | None:
    """Get the database pool, or None if it was never created."""
    return getattr(request.app.state, "db_pool", None)
