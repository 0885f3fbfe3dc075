"""Unit tests for the application factory."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from dinner_decider.core.config import Settings
from dinner_decider.factory import create_app


pytestmark = pytest.mark.unit


def _paths(settings: Settings) -> set[str]:
    return {getattr(route, "path", "") for route in create_app(settings).routes}


class TestCreateApp:
    """Tests for create_app."""

    def test_stores_settings_in_state(self, test_settings: Settings) -> None:
        """Should expose settings through app.state."""
        app = create_app(test_settings)

        assert app.state.settings is test_settings
        assert app.title == test_settings.app.name

    def test_mounts_routes_at_root(self, test_settings: Settings) -> None:
        """Should mount every route without a prefix by default."""
        paths = _paths(test_settings)

        assert {
            "/health",
            "/health/db",
            "/health/ollama",
            "/ingredients",
            "/ingredients/{ingredient_id}",
            "/recipes/suggestion",
        } <= paths

    def test_honours_api_prefix(self, test_settings: Settings) -> None:
        """Should mount routes below a configured prefix."""
        settings = test_settings.model_copy(
            update={"api": test_settings.api.model_copy(update={"v1_prefix": "/api"})}
        )

        paths = _paths(settings)

        assert "/api/ingredients" in paths
        assert "/ingredients" not in paths

    def test_sets_up_metrics(self, test_settings: Settings) -> None:
        """Should hand the app and settings to setup_metrics."""
        with patch("dinner_decider.factory.setup_metrics") as mock_setup_metrics:
            app = create_app(test_settings)

        mock_setup_metrics.assert_called_once_with(app, test_settings)

    def test_docs_disabled_outside_development(self, test_settings: Settings) -> None:
        """Should hide the OpenAPI docs outside development."""
        app = create_app(test_settings)

        assert app.docs_url is None
        assert app.openapi_url is None
