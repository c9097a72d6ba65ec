"""Error taxonomy for the weather cache.

Upstream failures share the ``UpstreamFailure`` base so the HTTP layer can
map all of them to one response. ``CacheUnavailableError`` never reaches the
caller of ``WeatherService.resolve``.
"""

from .base import InvalidInputError, WeatherCacheError
from .cache import CacheUnavailableError
from .upstream import (
    UpstreamError,
    UpstreamFailure,
    UpstreamMalformedResponseError,
    UpstreamUnavailableError,
)

__all__ = [
    "WeatherCacheError",
    "InvalidInputError",
    "CacheUnavailableError",
    "UpstreamFailure",
    "UpstreamUnavailableError",
    "UpstreamError",
    "UpstreamMalformedResponseError",
]
