"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: open the database pool, the Ollama client and
  build the services stored in app.state
- Application shutdown: close connections
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from dinner_decider.core.config import Settings, get_settings
from dinner_decider.database.connection import (
    close_database_pool,
    get_database_pool,
    init_database_pool,
)
from dinner_decider.database.repositories.ingredient import IngredientRepository
from dinner_decider.llm.client.ollama import OllamaClient
from dinner_decider.observability.logging import get_logger, setup_logging
from dinner_decider.services.ingredient.service import IngredientService
from dinner_decider.services.recipe.generator import RecipeSuggestionGenerator
from dinner_decider.services.recipe.service import RecipeService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    # Database is critical - startup fails without it
    await init_database_pool(settings)
    pool = get_database_pool()
    app.state.db_pool = pool

    llm_client = await _init_llm_client(settings)
    app.state.llm_client = llm_client

    repository = IngredientRepository(pool)
    generator = RecipeSuggestionGenerator(llm_client)

    app.state.recipe_generator = generator
    app.state.ingredient_service = IngredientService(repository)
    app.state.recipe_service = RecipeService(repository, generator)

    logger.info("Application startup complete")


async def _init_llm_client(settings: Settings) -> OllamaClient:
    """Create and initialize the Ollama client."""
    client = OllamaClient(
        base_url=settings.ollama.url,
        model=settings.ollama.model,
        timeout=settings.ollama.timeout,
    )
    await client.initialize()
    return client


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    llm_client: OllamaClient | None = getattr(app.state, "llm_client", None)
    if llm_client is not None:
        await llm_client.shutdown()
        app.state.llm_client = None

    await close_database_pool()
    app.state.db_pool = None

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Resources initialized here are available throughout the application's
    lifetime.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
