"""Visual Crossing implementation of WeatherProvider.

Calls the timeline endpoint ``{base_url}/{city}?key={api_key}`` and reads
``currentConditions.temp`` and ``currentConditions.conditions`` from the
JSON body.

Failures are classified as:
- UpstreamUnavailableError: connection errors, timeouts
- UpstreamError: any status other than 200
- UpstreamMalformedResponseError: non-JSON body, missing or mistyped fields
"""

import math
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from weather_cache.config import Settings
from weather_cache.entities import WeatherResultEntity
from weather_cache.exceptions import (
    UpstreamError,
    UpstreamMalformedResponseError,
    UpstreamUnavailableError,
)

logger = structlog.get_logger(__name__)


class VisualCrossingProvider:
    """Visual Crossing timeline API client.

    This class satisfies the WeatherProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        async with httpx.AsyncClient(timeout=10.0) as client:
            provider = VisualCrossingProvider(client, api_key="...", base_url=URL)
            result = await provider.fetch("Boston")
            print(result.temperature)  # "72.46"
        ```
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        """Initialize the provider.

        Args:
            client: Shared async HTTP client (owns timeouts and pooling).
            api_key: Visual Crossing API key.
            base_url: Timeline endpoint without the trailing city segment.
        """
        self._client = client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @classmethod
    def create(cls, client: httpx.AsyncClient, settings: Settings) -> "VisualCrossingProvider":
        """Factory method to create the provider from settings.

        Args:
            client: Shared async HTTP client.
            settings: Application settings with the credential and endpoint.

        Returns:
            Configured VisualCrossingProvider
        """
        return cls(client=client, api_key=settings.weather_api_key, base_url=settings.weather_base_url)

    def build_url(self, query: str) -> str:
        """Timeline URL for a city, the city encoded as a single path segment."""
        return f"{self._base_url}/{quote(query, safe='')}"

    async def fetch(self, query: str) -> WeatherResultEntity:
        """Fetch current conditions for a city.

        Args:
            query: The city string, verbatim

        Returns:
            WeatherResultEntity whose location_name is the query itself

        Raises:
            UpstreamUnavailableError: On transport failure
            UpstreamError: On a non-200 status code
            UpstreamMalformedResponseError: On an unparseable or incomplete body
        """
        try:
            response = await self._client.get(self.build_url(query), params={"key": self._api_key})
        except httpx.TransportError as e:
            logger.error("Error calling weather API", city=query, error=str(e))
            raise UpstreamUnavailableError(f"Failed to call Weather API: {e}") from e

        if response.status_code != 200:
            logger.error("Weather API returned error status", city=query, status_code=response.status_code)
            raise UpstreamError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Failed to decode API response", city=query, error=str(e))
            raise UpstreamMalformedResponseError(f"Failed to decode API response: {e}") from e

        result = WeatherResultEntity(
            location_name=query,
            temperature=format_temperature(_current_temperature(payload)),
            condition=_current_condition(payload),
        )
        logger.info("Weather data fetched", city=query)
        return result

    def is_available(self) -> bool:
        """Check if an API key is configured."""
        return bool(self._api_key)


def format_temperature(value: float) -> str:
    """Two fraction digits, always with ``.`` as the separator."""
    return f"{value:.2f}"


def _current_conditions(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise UpstreamMalformedResponseError("API response is not a JSON object")
    current = payload.get("currentConditions")
    if not isinstance(current, dict):
        raise UpstreamMalformedResponseError("API response is missing currentConditions")
    return current


def _current_temperature(payload: Any) -> float:
    temp = _current_conditions(payload).get("temp")
    # bool is a subclass of int
    if isinstance(temp, bool) or not isinstance(temp, (int, float)):
        raise UpstreamMalformedResponseError("API response is missing numeric currentConditions.temp")
    try:
        value = float(temp)
    except OverflowError as e:
        raise UpstreamMalformedResponseError("API response currentConditions.temp is out of range") from e
    if not math.isfinite(value):
        raise UpstreamMalformedResponseError("API response currentConditions.temp is not a finite number")
    return value


def _current_condition(payload: Any) -> str:
    conditions = _current_conditions(payload).get("conditions")
    if not isinstance(conditions, str):
        raise UpstreamMalformedResponseError("API response is missing string currentConditions.conditions")
    return conditions
