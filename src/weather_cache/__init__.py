"""Weather Cache - current weather by city behind a Redis read-through cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, WeatherProvider)
    - repositories: Redis and Visual Crossing implementations
    - services: Read-through cache orchestration
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contract and cached value)
    - entities: Domain models (internal)
    - exceptions: Error taxonomy

Usage:
    ```python
    from weather_cache.services import WeatherService

    service = WeatherService.create(cache=repo, provider=provider, ttl=3600)
    body = await service.resolve("Boston")
    ```

For HTTP API:
    ```python
    from weather_cache.api.app import app
    ```
"""

from weather_cache.config import Settings, get_redis_client, get_settings
from weather_cache.context import AppContext
from weather_cache.dto import HealthCheckResponse, WeatherResponse
from weather_cache.entities import WeatherResultEntity
from weather_cache.exceptions import (
    CacheUnavailableError,
    InvalidInputError,
    UpstreamError,
    UpstreamFailure,
    UpstreamMalformedResponseError,
    UpstreamUnavailableError,
    WeatherCacheError,
)
from weather_cache.handlers import WeatherHandler
from weather_cache.protocols import CacheStore, WeatherProvider
from weather_cache.repositories import RedisCacheRepository, VisualCrossingProvider
from weather_cache.services import WeatherService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "get_redis_client",
    "AppContext",
    # Protocols (interfaces)
    "CacheStore",
    "WeatherProvider",
    # Services (business logic)
    "WeatherService",
    # Handlers (HTTP)
    "WeatherHandler",
    # Repositories (data access)
    "RedisCacheRepository",
    "VisualCrossingProvider",
    # Entities (domain models)
    "WeatherResultEntity",
    # DTOs (API contracts)
    "WeatherResponse",
    "HealthCheckResponse",
    # Errors
    "WeatherCacheError",
    "InvalidInputError",
    "CacheUnavailableError",
    "UpstreamFailure",
    "UpstreamUnavailableError",
    "UpstreamError",
    "UpstreamMalformedResponseError",
]
