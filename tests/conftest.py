import logging

import pytest
import structlog

from weather_cache.entities import WeatherResultEntity
from weather_cache.exceptions import CacheUnavailableError
from weather_cache.services import WeatherService


class FakeCacheStore:
    """In-memory CacheStore that records calls and can simulate an outage."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str, int]] = []
        self.fail_get = False
        self.fail_set = False
        self.healthy = True

    def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        if self.fail_get:
            raise CacheUnavailableError("connection refused")
        return self.data.get(key)

    def set(self, key: str, value: str, ttl: int) -> None:
        self.set_calls.append((key, value, ttl))
        if self.fail_set:
            raise CacheUnavailableError("connection refused")
        self.data[key] = value
        self.ttls[key] = ttl

    def health_check(self) -> bool:
        return self.healthy


class FakeWeatherProvider:
    """WeatherProvider returning a fixed result or raising a fixed error."""

    def __init__(self, result: WeatherResultEntity | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[str] = []
        self.api_key = "test-key"

    async def fetch(self, query: str) -> WeatherResultEntity:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return WeatherResultEntity(location_name=query, temperature="72.46", condition="Clear")

    def is_available(self) -> bool:
        return bool(self.api_key)


@pytest.fixture
def fake_cache():
    """Empty in-memory cache store."""
    return FakeCacheStore()


@pytest.fixture
def fake_provider():
    """Provider answering 72.46 / Clear for any city."""
    return FakeWeatherProvider()


@pytest.fixture
def weather_service(fake_cache, fake_provider):
    """WeatherService wired to the fakes with a one hour TTL."""
    return WeatherService(cache=fake_cache, provider=fake_provider, ttl=3600)


@pytest.fixture
def boston_json():
    """Serialized result for the Boston example."""
    return '{"locationName":"Boston","temperature":"72.46","condition":"Clear"}'


@pytest.fixture
def restore_logging():
    """Undo configure_logging after a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    library_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    for name, library_level in library_levels.items():
        logging.getLogger(name).setLevel(library_level)
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
