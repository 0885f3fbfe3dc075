"""Shared test fixtures for the Dinner Decider service tests.

Provides in-memory fakes for the ingredient store and the recipe generator,
test settings, and an HTTP client bound to the application without running
its lifespan (no database or Ollama needed).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient


# Select config/environments/test before any settings are built
os.environ.setdefault("APP_ENV", "test")

from dinner_decider.core.config import Settings  # noqa: E402
from dinner_decider.core.config.settings import (  # noqa: E402
    ApiSettings,
    AppSettings,
    LoggingSettings,
    MetricsSettings,
    ObservabilitySettings,
)
from dinner_decider.factory import create_app  # noqa: E402
from dinner_decider.services.ingredient.service import IngredientService  # noqa: E402
from dinner_decider.services.recipe.service import RecipeService  # noqa: E402
from tests.fixtures.fakes import (  # noqa: E402
    FakeRecipeGenerator,
    InMemoryIngredientStore,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no metrics, no CORS, routes at the root."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(name="dinner-decider-test", version="0.0.1-test", debug=True),
        api=ApiSettings(v1_prefix="", cors_origins=[]),
        logging=LoggingSettings(level="DEBUG", format="text"),
        observability=ObservabilitySettings(metrics=MetricsSettings(enabled=False)),
    )


@pytest.fixture
def ingredient_store() -> InMemoryIngredientStore:
    """Empty in-memory ingredient store."""
    return InMemoryIngredientStore()


@pytest.fixture
def recipe_generator() -> FakeRecipeGenerator:
    """Recipe generator returning a canned suggestion."""
    return FakeRecipeGenerator()


@pytest.fixture
def app(
    test_settings: Settings,
    ingredient_store: InMemoryIngredientStore,
    recipe_generator: FakeRecipeGenerator,
) -> FastAPI:
    """Application wired to the in-memory fakes.

    The lifespan does not run under ASGITransport, so services are attached
    to app.state directly.
    """
    application = create_app(test_settings)
    application.state.ingredient_service = IngredientService(ingredient_store)
    application.state.recipe_service = RecipeService(ingredient_store, recipe_generator)
    application.state.recipe_generator = recipe_generator
    application.state.db_pool = None
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
