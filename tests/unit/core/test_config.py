"""Unit tests for application configuration.

Tests cover:
- List parsing
- YAML loading per environment
- Environment variable overrides
- Computed properties
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dinner_decider.core.config import Settings, get_settings
from dinner_decider.core.config.settings import parse_list
from dinner_decider.core.config.yaml_source import deep_merge


if TYPE_CHECKING:
    from pathlib import Path


pytestmark = pytest.mark.unit


class TestParseList:
    """Tests for parse_list helper function."""

    def test_parses_comma_separated_string(self) -> None:
        """Should parse comma-separated string."""
        result = parse_list("http://localhost:3000, http://localhost:8080")
        assert result == ["http://localhost:3000", "http://localhost:8080"]

    def test_filters_empty_values(self) -> None:
        """Should drop empty entries."""
        assert parse_list("a,,b,") == ["a", "b"]

    def test_passes_through_list(self) -> None:
        """Should return list as-is."""
        origins = ["http://localhost:3000"]
        assert parse_list(origins) is origins


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_nested_dicts(self) -> None:
        """Should override leaves and keep untouched keys."""
        base = {"ollama": {"url": "http://a", "model": "llama2"}, "x": 1}
        override = {"ollama": {"model": "llama3"}}

        assert deep_merge(base, override) == {
            "ollama": {"url": "http://a", "model": "llama3"},
            "x": 1,
        }

    def test_does_not_mutate_base(self) -> None:
        """Should return a new dict."""
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestSettings:
    """Tests for Settings class."""

    def test_base_yaml_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should load service defaults from the base YAML files."""
        monkeypatch.setenv("APP_ENV", "development")
        settings = Settings()

        assert settings.app.name == "Dinner Decider"
        assert settings.server.port == 8080
        assert settings.api.v1_prefix == ""
        assert settings.database.name == "refrigerator"
        assert settings.database.health_check_timeout == 5.0
        assert settings.ollama.url == "http://localhost:11434"
        assert settings.ollama.model == "llama2"
        assert settings.ollama.timeout == 30.0
        assert settings.ollama.health_check_timeout == 10.0

    def test_test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should overlay config/environments/test on the base files."""
        monkeypatch.setenv("APP_ENV", "test")
        settings = Settings()

        assert settings.is_testing
        assert settings.app.debug is True
        assert settings.observability.metrics.enabled is False
        assert settings.api.cors_origins == []

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should let OLLAMA__MODEL override the YAML value."""
        monkeypatch.setenv("APP_ENV", "development")
        monkeypatch.setenv("OLLAMA__MODEL", "llama3")
        monkeypatch.setenv("DATABASE__PORT", "6543")

        settings = Settings()

        assert settings.ollama.model == "llama3"
        assert settings.database.port == 6543

    def test_config_dir_override(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        """Should read YAML from CONFIG_DIR when set."""
        (tmp_path / "base").mkdir()
        (tmp_path / "base" / "ollama.yaml").write_text(
            "ollama:\n  model: mistral\n", encoding="utf-8"
        )
        monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("APP_ENV", "staging")

        settings = Settings()

        assert settings.ollama.model == "mistral"
        assert settings.ollama.url == "http://localhost:11434"

    def test_environment_flags(self) -> None:
        """Should expose one flag per environment."""
        assert Settings(APP_ENV="development").is_development
        assert Settings(APP_ENV="production").is_production
        assert Settings(APP_ENV="test").is_testing


class TestSettingsComputedProperties:
    """Tests for Settings computed properties."""

    def test_database_url_excludes_password(self) -> None:
        """Should never include the password."""
        settings = Settings(
            DATABASE_PASSWORD="hunter2",
            database={
                "host": "db",
                "port": 5432,
                "name": "refrigerator",
                "user": "app",
            },
        )

        assert settings.database_url == "postgresql://app@db:5432/refrigerator"
        assert "hunter2" not in settings.database_url

    def test_database_url_without_user(self) -> None:
        """Should omit the user part when no user is configured."""
        settings = Settings(database={"host": "db", "user": None})

        assert settings.database_url.startswith("postgresql://db:")


class TestGetSettings:
    """Tests for get_settings."""

    def test_returns_cached_instance(self) -> None:
        """Should return the same object on repeated calls."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
