"""Weather service for core business logic.

This service implements the read-through cache by coordinating the cache
store (Redis) and the weather provider (Visual Crossing).
"""

import structlog

from weather_cache.dto import WeatherResponse
from weather_cache.exceptions import CacheUnavailableError, InvalidInputError
from weather_cache.protocols import CacheStore, WeatherProvider

logger = structlog.get_logger(__name__)


class WeatherService:
    """Read-through cache for current weather by city.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: Redis in production, an in-memory fake in tests
    - WeatherProvider: Visual Crossing in production, a fake in tests

    The value returned by ``resolve`` is the serialized JSON that is also
    stored in the cache, so a hit and the original fetch are byte-identical.

    Example:
        ```python
        service = WeatherService.create(
            cache=RedisCacheRepository(redis_client),
            provider=VisualCrossingProvider.create(http_client, settings),
            ttl=settings.cache_expiration,
        )
        body = await service.resolve("Boston")
        ```
    """

    def __init__(self, cache: CacheStore, provider: WeatherProvider, ttl: int) -> None:
        """Initialize the weather service.

        Args:
            cache: Cache storage backend (required).
            provider: Upstream weather provider (required).
            ttl: Time-to-live for cache entries in seconds.
        """
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._cache = cache
        self._provider = provider
        self._ttl = ttl

    @classmethod
    def create(cls, cache: CacheStore, provider: WeatherProvider, ttl: int) -> "WeatherService":
        """Factory method to create WeatherService.

        Args:
            cache: Cache storage backend (required).
            provider: Upstream weather provider (required).
            ttl: Time-to-live in seconds.

        Returns:
            Configured WeatherService instance
        """
        return cls(cache=cache, provider=provider, ttl=ttl)

    async def resolve(self, query: str) -> str:
        """Return current weather for a city as serialized JSON.

        Business logic:
        1. Reject an empty query
        2. Serve a cache hit as-is
        3. On a miss, or when the cache is unreachable, fetch from upstream
        4. Write the fresh result back; a failed write is logged only
        5. Return the serialized result

        Args:
            query: The city string, used verbatim as the cache key

        Returns:
            The serialized weather result

        Raises:
            InvalidInputError: If the query is empty
            UpstreamUnavailableError: On provider transport failure
            UpstreamError: On a provider error status
            UpstreamMalformedResponseError: On an unusable provider response
        """
        if not query:
            raise InvalidInputError("City parameter is required")

        cached = self._lookup(query)
        if cached is not None:
            logger.info("Cache hit", city=query)
            return cached

        # Upstream errors propagate; nothing is cached for a failed fetch.
        result = await self._provider.fetch(query)
        serialized = WeatherResponse.from_entity(result).serialize()

        try:
            self._cache.set(query, serialized, self._ttl)
        except CacheUnavailableError as e:
            logger.warning("Failed to write weather data to cache", city=query, error=str(e))

        return serialized

    def _lookup(self, query: str) -> str | None:
        """Cache read where an unreachable store counts as a miss."""
        try:
            cached = self._cache.get(query)
        except CacheUnavailableError as e:
            logger.warning("Cache unavailable, fetching from upstream", city=query, error=str(e))
            return None

        if cached is None:
            logger.info("Cache miss", city=query)
        return cached

    @property
    def ttl(self) -> int:
        """Get the cache entry time-to-live in seconds."""
        return self._ttl

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache store."""
        return self._cache

    @property
    def provider(self) -> WeatherProvider:
        """Get the underlying weather provider."""
        return self._provider
