from .base import WeatherCacheError


class UpstreamFailure(WeatherCacheError):
    """Base exception for failures talking to the weather provider."""

    pass


class UpstreamUnavailableError(UpstreamFailure):
    """Exception for transport-level failures (connection error, timeout)."""

    pass


class UpstreamError(UpstreamFailure):
    """Exception for a non-success status code from the provider."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Weather API returned status code {status_code}")


class UpstreamMalformedResponseError(UpstreamFailure):
    """Exception for a provider response missing the expected fields or types."""

    pass
