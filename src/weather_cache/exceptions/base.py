class WeatherCacheError(Exception):
    """Base exception for all weather cache errors."""

    pass


class InvalidInputError(WeatherCacheError):
    """Exception for an empty or otherwise unusable city query."""

    pass
