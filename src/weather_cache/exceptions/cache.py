from .base import WeatherCacheError


class CacheUnavailableError(WeatherCacheError):
    """Exception for a cache store that could not be read or written."""

    pass
