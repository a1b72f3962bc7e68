"""Test configuration and fixtures for the premium estimator."""

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from premium_estimator.core.config import Settings, clear_settings_cache, get_settings
from premium_estimator.models.rating import CoverageLevel, RatingInput, VehicleType


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Make every test start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Default settings for testing."""
    return Settings(api_env="development")


@pytest.fixture
def make_rating_input() -> Callable[..., RatingInput]:
    """Factory for rating inputs defaulting to the form's initial values."""

    def _make(
        driver_age: int = 35,
        state: str = "CA",
        vehicle_type: VehicleType = VehicleType.SEDAN,
        coverage_level: CoverageLevel = CoverageLevel.STANDARD,
    ) -> RatingInput:
        return RatingInput(
            driver_age=driver_age,
            state=state,
            vehicle_type=vehicle_type,
            coverage_level=coverage_level,
        )

    return _make


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """FastAPI application wired to the test settings."""
    from premium_estimator.main import create_app

    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client that runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client
