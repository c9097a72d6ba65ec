"""Redis implementation of CacheStore.

Plain string keys holding serialized weather results, each with its own
expiration (``SET key value EX ttl``). It satisfies the CacheStore protocol.
"""

import redis
import structlog

from weather_cache.exceptions import CacheUnavailableError

logger = structlog.get_logger(__name__)


class RedisCacheRepository:
    """Redis key-value cache with per-key TTL.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Every Redis failure is raised as ``CacheUnavailableError`` so callers
    deal with a single cache error type.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance.
        """
        self._client = redis_client

    def get(self, key: str) -> str | None:
        """Fetch the value stored under a key.

        Args:
            key: The cache key

        Returns:
            The stored value, or None if absent or expired

        Raises:
            CacheUnavailableError: If Redis cannot be reached or the value is not UTF-8
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheUnavailableError(f"Failed to read cache key {key!r}: {e}") from e

        if value is None:
            return None
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise CacheUnavailableError(f"Cache key {key!r} holds a value that is not UTF-8: {e}") from e
        return str(value)

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value with an expiration.

        Args:
            key: The cache key
            value: The serialized value
            ttl: Time-to-live in seconds

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheUnavailableError(f"Failed to write cache key {key!r}: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed", error=str(e))
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
