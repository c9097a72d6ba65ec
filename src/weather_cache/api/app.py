import time

import structlog
from fastapi import FastAPI, Request, Response

from weather_cache.api.dependencies import HandlerDep, lifespan
from weather_cache.config import get_settings
from weather_cache.dto import HealthCheckResponse

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="Weather Cache API",
    description="Current weather by city, read through a Redis cache",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration for every request."""
    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    return response


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/weather/{city}")
async def get_weather(city: str, handler: HandlerDep) -> Response:
    """
    Get current weather for a city.

    Args:
        city: City name, used verbatim as the cache key and upstream lookup.

    Returns:
        JSON ``{"locationName", "temperature", "condition"}``, or a plain-text error.
    """
    return await handler.get_weather(city)


@app.get("/weather/")
@app.get("/weather")
async def get_weather_without_city(handler: HandlerDep) -> Response:
    """Requests without a city segment get the same 400 as an empty city."""
    return await handler.get_weather("")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "weather_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
