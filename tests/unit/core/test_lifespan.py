"""Unit tests for lifespan events.

Tests cover:
- Startup sequence and app.state wiring
- Shutdown sequence
- Startup failure when the database is unreachable
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from dinner_decider.core.config import Settings
from dinner_decider.core.events.lifespan import _init_llm_client, lifespan
from dinner_decider.services.ingredient.service import IngredientService
from dinner_decider.services.recipe.generator import RecipeSuggestionGenerator
from dinner_decider.services.recipe.service import RecipeService


pytestmark = pytest.mark.unit

MODULE = "dinner_decider.core.events.lifespan"


@pytest.fixture
def lifespan_app(test_settings: Settings) -> FastAPI:
    """Bare app carrying test settings in state."""
    app = FastAPI()
    app.state.settings = test_settings
    return app


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """Stand-in for OllamaClient."""
    client = MagicMock()
    client.initialize = AsyncMock()
    client.shutdown = AsyncMock()
    return client


class TestLifespan:
    """Tests for lifespan context manager."""

    async def test_startup_wires_services(
        self,
        lifespan_app: FastAPI,
        mock_llm_client: MagicMock,
    ) -> None:
        """Should open resources and build services into app.state."""
        pool = MagicMock()

        with (
            patch(f"{MODULE}.setup_logging") as mock_setup_logging,
            patch(f"{MODULE}.init_database_pool", new_callable=AsyncMock) as mock_init,
            patch(f"{MODULE}.get_database_pool", return_value=pool),
            patch(f"{MODULE}.close_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.OllamaClient", return_value=mock_llm_client),
        ):
            async with lifespan(lifespan_app):
                assert lifespan_app.state.db_pool is pool
                assert lifespan_app.state.llm_client is mock_llm_client
                assert isinstance(
                    lifespan_app.state.ingredient_service, IngredientService
                )
                assert isinstance(lifespan_app.state.recipe_service, RecipeService)
                assert isinstance(
                    lifespan_app.state.recipe_generator, RecipeSuggestionGenerator
                )

        mock_setup_logging.assert_called_once_with(
            log_level="DEBUG",
            log_format="text",
            is_development=False,
        )
        mock_init.assert_awaited_once()
        mock_llm_client.initialize.assert_awaited_once()

    async def test_shutdown_closes_resources(
        self,
        lifespan_app: FastAPI,
        mock_llm_client: MagicMock,
    ) -> None:
        """Should close the LLM client and database pool on exit."""
        with (
            patch(f"{MODULE}.setup_logging"),
            patch(f"{MODULE}.init_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.get_database_pool", return_value=MagicMock()),
            patch(
                f"{MODULE}.close_database_pool", new_callable=AsyncMock
            ) as mock_close,
            patch(f"{MODULE}.OllamaClient", return_value=mock_llm_client),
        ):
            async with lifespan(lifespan_app):
                pass

        mock_llm_client.shutdown.assert_awaited_once()
        mock_close.assert_awaited_once()
        assert lifespan_app.state.llm_client is None
        assert lifespan_app.state.db_pool is None

    async def test_startup_fails_without_database(
        self,
        lifespan_app: FastAPI,
    ) -> None:
        """Should refuse to start when the database cannot be reached."""
        with (
            patch(f"{MODULE}.setup_logging"),
            patch(
                f"{MODULE}.init_database_pool",
                new_callable=AsyncMock,
                side_effect=OSError("connection refused"),
            ),
            patch(f"{MODULE}.OllamaClient") as mock_client_cls,
            pytest.raises(OSError),
        ):
            async with lifespan(lifespan_app):
                pass

        mock_client_cls.assert_not_called()


class TestInitLLMClient:
    """Tests for _init_llm_client."""

    async def test_uses_ollama_settings(self, test_settings: Settings) -> None:
        """Should build the client from the ollama section."""
        with patch(f"{MODULE}.OllamaClient") as mock_client_cls:
            mock_client_cls.return_value.initialize = AsyncMock()
            client = await _init_llm_client(test_settings)

        mock_client_cls.assert_called_once_with(
            base_url=test_settings.ollama.url,
            model=test_settings.ollama.model,
            timeout=test_settings.ollama.timeout,
        )
        client.initialize.assert_awaited_once()
