"""Service layer for business logic.

This layer contains the read-through cache orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .weather_service import WeatherService

__all__ = [
    "WeatherService",
]
