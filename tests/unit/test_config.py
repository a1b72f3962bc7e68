"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from premium_estimator.core.config import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Settings defaults and validation."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.app_name == "Car Insurance Cost Estimator"
        assert settings.api_port == 8000
        assert settings.min_driver_age == 16
        assert settings.max_driver_age == 99
        assert settings.log_level == "INFO"

    def test_environment_flags(self) -> None:
        assert Settings(api_env="development").is_development
        assert Settings(api_env="production").is_production
        assert not Settings(api_env="staging").is_production

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValidationError):
            Settings(api_env="qa")

    def test_age_bounds_must_not_invert(self) -> None:
        with pytest.raises(ValidationError, match="max_driver_age"):
            Settings(min_driver_age=50, max_driver_age=40)

    def test_cors_origins_must_be_urls(self) -> None:
        with pytest.raises(ValidationError, match="Invalid CORS origin"):
            Settings(api_cors_origins=["localhost:3000"])

    def test_settings_are_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.api_port = 9000  # type: ignore[misc]

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_ENV", "staging")
        monkeypatch.setenv("MAX_DRIVER_AGE", "90")
        settings = Settings()
        assert settings.api_env == "staging"
        assert settings.max_driver_age == 90


class TestSettingsCache:
    """Cached settings accessor."""

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        clear_settings_cache()
        second = get_settings()
        assert second is not first
        assert second.log_level == "DEBUG"
