"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, Visual Crossing → another provider)
- Unit testing with fake implementations
- Clear separation of concerns
"""

from .cache_store import CacheStore
from .weather_provider import WeatherProvider

__all__ = [
    "CacheStore",
    "WeatherProvider",
]
