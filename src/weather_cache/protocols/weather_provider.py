"""Weather provider protocol.

Defines the interface for an upstream service that returns current
conditions for a city.
"""

from typing import Protocol, runtime_checkable

from weather_cache.entities import WeatherResultEntity


@runtime_checkable
class WeatherProvider(Protocol):
    """Protocol for upstream weather providers.

    Example:
        ```python
        from weather_cache.protocols import WeatherProvider

        provider: WeatherProvider = VisualCrossingProvider(client, api_key="...")
        ```
    """

    async def fetch(self, query: str) -> WeatherResultEntity:
        """Fetch current conditions for a city.

        Args:
            query: The city string, verbatim

        Returns:
            The normalized weather result

        Raises:
            UpstreamUnavailableError: On transport failure
            UpstreamError: On a non-success status code
            UpstreamMalformedResponseError: On a response missing expected fields
        """
        ...

    def is_available(self) -> bool:
        """Check if the provider is configured for use.

        Returns:
            True if a credential is configured, False otherwise
        """
        ...
