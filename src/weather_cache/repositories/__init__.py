"""Repository layer for data access.

This layer wraps external dependencies (Redis, the Visual Crossing API)
behind protocol-based interfaces. The repositories are protocol-based
(structural typing), not inheritance-based.
"""

from weather_cache.protocols import CacheStore, WeatherProvider

from .redis_repository import RedisCacheRepository
from .visual_crossing_provider import VisualCrossingProvider

__all__ = [
    "CacheStore",
    "WeatherProvider",
    "RedisCacheRepository",
    "VisualCrossingProvider",
]
