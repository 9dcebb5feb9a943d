"""Unit tests for Settings validators and env-var loading in config.py."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sentimerge.config import Settings, get_settings, load_settings
from sentimerge.core.exceptions import ConfigurationError
from sentimerge.lexicons import BUILTIN_LEXICONS
from sentimerge.processing.sentiment import CollisionStrategy


class TestParseLexicons:
    """Tests for parse lexicons."""

    def test_none_returns_empty_list(self) -> None:
        """None returns empty list."""
        assert Settings.parse_lexicons(None) == []

    def test_csv_string(self) -> None:
        """Test comma separated names are trimmed and lowered."""
        assert Settings.parse_lexicons("english, French ,emoji") == ["english", "french", "emoji"]

    def test_json_array_string(self) -> None:
        """Json array string."""
        assert Settings.parse_lexicons('["german", "italian"]') == ["german", "italian"]

    def test_unknown_name_rejected(self) -> None:
        """Unknown name rejected."""
        with pytest.raises(ValueError, match="klingon"):
            Settings.parse_lexicons("english,klingon")


class TestParseExtraNegations:
    """Tests for parse extra negations."""

    def test_lowercases(self) -> None:
        """Test negation markers are lower-cased."""
        assert Settings.parse_extra_negations("Nope, NAH") == ["nope", "nah"]

    def test_list_passthrough(self) -> None:
        """Test lists are accepted as is."""
        assert Settings.parse_extra_negations(["nah"]) == ["nah"]


class TestParseCollisionStrategy:
    """Tests for parse collision strategy."""

    def test_case_insensitive(self) -> None:
        """Test strategy names are case-insensitive."""
        assert Settings.parse_collision_strategy("MAX") is CollisionStrategy.max

    def test_unknown_raises_value_error(self) -> None:
        """Unknown raises value error."""
        with pytest.raises(ValueError, match="median"):
            Settings.parse_collision_strategy("median")


class TestDefaults:
    """Tests for defaults."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = Settings()
        assert settings.env == "development"
        assert settings.log_level == "INFO"
        assert settings.collision_strategy is CollisionStrategy.average
        assert settings.lexicons == list(BUILTIN_LEXICONS)
        assert settings.lexicon_files == []
        assert settings.extra_negations == []
        assert not settings.is_production


class TestEnvLoading:
    """Tests for env loading."""

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test every setting loads from its env var."""
        monkeypatch.setenv("SENTIMERGE_ENV", "production")
        monkeypatch.setenv("SENTIMERGE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SENTIMERGE_COLLISION_STRATEGY", "conservative")
        monkeypatch.setenv("SENTIMERGE_LEXICONS", "english,emoji")
        monkeypatch.setenv("SENTIMERGE_LEXICON_FILES", f"{tmp_path / 'a.json'},{tmp_path / 'b.json'}")
        monkeypatch.setenv("SENTIMERGE_EXTRA_NEGATIONS", '["Nope"]')

        settings = Settings()
        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.collision_strategy is CollisionStrategy.conservative
        assert settings.lexicons == ["english", "emoji"]
        assert settings.lexicon_files == [tmp_path / "a.json", tmp_path / "b.json"]
        assert settings.extra_negations == ["nope"]

    def test_invalid_lexicon_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid lexicon env."""
        monkeypatch.setenv("SENTIMERGE_LEXICONS", "english,klingon")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_strategy_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid strategy env."""
        monkeypatch.setenv("SENTIMERGE_COLLISION_STRATEGY", "median")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        """Get settings is cached."""
        assert get_settings() is get_settings()


class TestLoadSettings:
    """Tests for load_settings."""

    def test_returns_cached_settings(self) -> None:
        """Test valid environment returns the cached instance."""
        assert load_settings() is get_settings()

    def test_invalid_env_raises_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test validation failures surface as ConfigurationError naming the variable."""
        monkeypatch.setenv("SENTIMERGE_LEXICONS", "english,klingon")
        with pytest.raises(ConfigurationError, match="SENTIMERGE_LEXICONS.*klingon"):
            load_settings()
