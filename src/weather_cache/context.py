"""Application context.

Holds the process-wide collaborators (settings and network clients) that
are created once at startup and passed explicitly to the layers that need
them.
"""

from dataclasses import dataclass

import httpx
import redis
import structlog

from weather_cache.config import Settings, get_redis_client

logger = structlog.get_logger(__name__)


@dataclass
class AppContext:
    """Settings plus the shared Redis and HTTP clients.

    Attributes:
        settings: Loaded application settings
        redis_client: Client for the cache store
        http_client: Async client for the weather provider
    """

    settings: Settings
    redis_client: redis.Redis
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, settings: Settings) -> "AppContext":
        """Build the context and its clients from settings.

        Args:
            settings: Application settings

        Returns:
            AppContext with unconnected clients (both connect lazily)
        """
        logger.info("Initializing Redis client", redis_url=settings.normalized_redis_url)
        return cls(
            settings=settings,
            redis_client=get_redis_client(settings),
            http_client=httpx.AsyncClient(
                timeout=httpx.Timeout(settings.upstream_timeout),
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            ),
        )

    async def aclose(self) -> None:
        """Close both clients."""
        await self.http_client.aclose()
        self.redis_client.close()
