"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for response serialization.

Internal domain logic should use entities from the entities package.
"""

from .responses import HealthCheckResponse, WeatherResponse

__all__ = [
    "WeatherResponse",
    "HealthCheckResponse",
]
