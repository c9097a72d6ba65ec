"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from weather_cache.entities import WeatherResultEntity


class WeatherResponse(BaseModel):
    """Response DTO for current weather.

    Its compact JSON form is both the HTTP response body and the value
    stored in the cache.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location_name: str = Field(..., alias="locationName", description="The queried city, verbatim")
    temperature: str = Field(..., description="Current temperature, two fraction digits")
    condition: str = Field(..., description="Free-text sky/weather description")

    @classmethod
    def from_entity(cls, entity: WeatherResultEntity) -> "WeatherResponse":
        """Build the DTO from a domain entity."""
        return cls(
            location_name=entity.location_name,
            temperature=entity.temperature,
            condition=entity.condition,
        )

    def serialize(self) -> str:
        """Canonical JSON: camelCase keys, field order fixed, no whitespace."""
        return self.model_dump_json(by_alias=True)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    upstream_configured: bool = Field(
        ...,
        description="Whether the weather provider has a credential configured",
    )
