"""Weather result domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherResultEntity:
    """Domain entity for current conditions in a city.

    This is an internal representation used by services and repositories.
    For the JSON contract, use ``WeatherResponse`` from the dto package.

    Attributes:
        location_name: The queried city, verbatim
        temperature: Current temperature with exactly two fraction digits
        condition: Free-text sky/weather description
    """

    location_name: str
    temperature: str
    condition: str
