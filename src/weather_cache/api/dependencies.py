"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - AppContext and services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from weather_cache.config import get_settings
from weather_cache.context import AppContext
from weather_cache.handlers import WeatherHandler
from weather_cache.logging_config import configure_logging
from weather_cache.repositories import RedisCacheRepository, VisualCrossingProvider
from weather_cache.services import WeatherService

logger = structlog.get_logger(__name__)


def get_handler(request: Request) -> WeatherHandler:
    """Dependency injection for WeatherHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The WeatherHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "weather_handler", None)
    if handler is None:
        raise RuntimeError("WeatherHandler not initialized. Check lifespan setup.")
    return handler


def build_weather_service(context: AppContext) -> WeatherService:
    """Wire the Redis repository and the Visual Crossing provider into a WeatherService."""
    return WeatherService.create(
        cache=RedisCacheRepository(context.redis_client),
        provider=VisualCrossingProvider.create(context.http_client, context.settings),
        ttl=context.settings.cache_expiration,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. AppContext (settings, Redis client, HTTP client)
    2. Service (business logic) - wired from the context
    3. Handler (HTTP endpoints) - stored in app.state.weather_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the clients and removes everything from app.state on shutdown
    """
    settings = get_settings()
    configure_logging(settings)

    context = AppContext.create(settings)
    weather_service = build_weather_service(context)
    weather_handler = WeatherHandler(weather_service=weather_service)

    app.state.context = context
    app.state.weather_handler = weather_handler

    logger.info(
        "Weather service initialized",
        cache_expiration=settings.cache_expiration,
        cache_healthy=weather_service.cache.health_check(),
    )

    try:
        yield
    finally:
        await context.aclose()
        del app.state.weather_handler
        del app.state.context
        logger.info("Weather service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[WeatherHandler, Depends(get_handler)]
