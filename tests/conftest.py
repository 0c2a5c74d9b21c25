"""
pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from user_service_api.app.core.config import Settings
from user_service_api.app.main import create_app
from user_service_api.app.services.user_service import InMemoryUserService


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def service() -> InMemoryUserService:
    """Empty in-memory user service."""
    return InMemoryUserService()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_demo_users=False, log_level="WARNING")


@pytest.fixture
def client(service: InMemoryUserService, test_settings: Settings) -> Iterator[TestClient]:
    """HTTP client for an app backed by the empty ``service`` fixture."""
    app = create_app(service=service, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(test_settings: Settings) -> Callable[..., TestClient]:
    """Factory for clients around a custom service."""

    def _make(service, **kwargs) -> TestClient:
        return TestClient(create_app(service=service, settings=test_settings), **kwargs)

    return _make
