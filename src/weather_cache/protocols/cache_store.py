"""Cache storage protocol.

Defines the interface for the key-value store that holds serialized weather
results with a per-key expiration.

Implementations can include:
- Redis (default)
- In-memory fakes for tests
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed.

    Example:
        ```python
        from weather_cache.protocols import CacheStore

        repo: CacheStore = RedisCacheRepository(redis_client)
        ```
    """

    def get(self, key: str) -> str | None:
        """Fetch the value stored under a key.

        Args:
            key: The cache key (a city string, verbatim)

        Returns:
            The stored value, or None if the key is absent or expired

        Raises:
            CacheUnavailableError: If the store cannot be reached
        """
        ...

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value under a key with an expiration.

        Args:
            key: The cache key
            value: The serialized value
            ttl: Time-to-live in seconds

        Raises:
            CacheUnavailableError: If the store cannot be reached
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
