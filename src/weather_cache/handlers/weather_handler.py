"""HTTP handlers for weather lookups.

Handlers turn service results and errors into HTTP responses: status codes,
content types and the plain-text error bodies clients rely on.
"""

import structlog
from fastapi import Response, status
from fastapi.responses import PlainTextResponse

from weather_cache.dto import HealthCheckResponse
from weather_cache.exceptions import InvalidInputError, UpstreamFailure
from weather_cache.services import WeatherService

logger = structlog.get_logger(__name__)

MISSING_CITY_MESSAGE = "City parameter is required"


class WeatherHandler:
    """HTTP handlers for weather operations.

    This handler delegates business logic to WeatherService
    and handles HTTP-specific concerns like:
    - Returning the cached JSON body unchanged
    - Setting appropriate status codes
    - Rendering errors as plain text

    Example:
        ```python
        handler = WeatherHandler(weather_service=service)

        @app.get("/weather/{city}")
        async def get_weather(city: str) -> Response:
            return await handler.get_weather(city)
        ```
    """

    def __init__(self, weather_service: WeatherService) -> None:
        """Initialize the weather handler.

        Args:
            weather_service: The weather service for business logic (required).
        """
        self._weather = weather_service

    async def get_weather(self, city: str) -> Response:
        """Handle GET /weather/{city} requests.

        Args:
            city: The city path parameter, verbatim

        Returns:
            200 with the JSON body, 400 for an empty city, 500 for upstream failures
        """
        logger.info("Received request for city", city=city)
        try:
            body = await self._weather.resolve(city)
        except InvalidInputError:
            return PlainTextResponse(MISSING_CITY_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
        except UpstreamFailure as e:
            logger.error("Failed to fetch weather data", city=city, error=str(e))
            return PlainTextResponse(
                f"Error fetching weather data: {e}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(content=body, media_type="application/json")

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with cache and upstream status
        """
        cache_healthy = self._weather.cache.health_check()
        upstream_configured = self._weather.provider.is_available()

        return HealthCheckResponse(
            status="healthy" if cache_healthy and upstream_configured else "unhealthy",
            cache_healthy=cache_healthy,
            upstream_configured=upstream_configured,
        )
