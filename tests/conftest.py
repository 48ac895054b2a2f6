"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.

No Redis server is needed: the app runs on an in-memory repository, and the
Redis adapter is exercised against a mocked client.
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from main import create_app
from shorturl_app.config import Settings
from shorturl_app.exceptions import StorageError
from shorturl_app.storage.strategies import (
    URLRepository,
    InMemoryURLRepository,
    RedisURLRepository,
)


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta.total_seconds()


class UnavailableRepository(URLRepository):
    """Repository whose backend is always down"""

    async def save_url_mapping(self, short_code, original_url, user_id):
        raise StorageError("store is down")

    async def retrieve_initial_url(self, short_code):
        raise StorageError("store is down")


@pytest.fixture
def settings():
    return Settings(
        store_backend="memory",
        base_url="http://localhost:9808",
        environment="test",
        log_level="INFO",
        log_json=False,
        _env_file=None,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository(clock):
    """Fresh in-memory store with a controllable clock for each test"""
    return InMemoryURLRepository(clock=clock)


@pytest.fixture
def short_ttl_repository(clock):
    return InMemoryURLRepository(ttl=timedelta(seconds=2), clock=clock)


@pytest.fixture
def unavailable_repository():
    return UnavailableRepository()


@pytest.fixture
def redis_client():
    """Mocked redis.asyncio client"""
    client = AsyncMock()
    client.set.return_value = True
    client.get.return_value = None
    client.ping.return_value = True
    return client


@pytest.fixture
def redis_repository(redis_client):
    return RedisURLRepository(redis_client)


@pytest.fixture
def broken_redis_client(redis_client):
    error = RedisConnectionError("Connection refused")
    redis_client.set.side_effect = error
    redis_client.get.side_effect = error
    redis_client.ping.side_effect = error
    return redis_client


@pytest.fixture(scope="function")
def client(settings, repository):
    """
    Create a test client around the in-memory repository.
    This is the main fixture that tests will use.
    """
    app = create_app(settings=settings, repository=repository)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def unavailable_client(settings, unavailable_repository):
    """Test client whose store fails every operation"""
    app = create_app(settings=settings, repository=unavailable_repository)

    with TestClient(app) as test_client:
        yield test_client
