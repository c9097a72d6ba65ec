import json
import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path

import redis
from dotenv import load_dotenv

load_dotenv()

VISUAL_CROSSING_TIMELINE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream provider
    weather_api_key: str = os.getenv("WEATHER_API_KEY", "")
    weather_base_url: str = os.getenv("WEATHER_BASE_URL", VISUAL_CROSSING_TIMELINE_URL)
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_timeout: float = float(os.getenv("REDIS_TIMEOUT", "2.0"))

    # Cache
    cache_expiration: int = int(os.getenv("CACHE_EXPIRATION", "3600"))  # 1 hour default

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("LOG_FORMAT", "console").lower()
    log_file: str | None = os.getenv("LOG_FILE")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.weather_api_key:
            raise ValueError("WEATHER_API_KEY is required")

        if self.cache_expiration <= 0:
            raise ValueError(f"CACHE_EXPIRATION must be positive, got {self.cache_expiration}")

        if self.upstream_timeout <= 0 or self.redis_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT and REDIS_TIMEOUT must be positive")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {self.log_level}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {list(LOG_FORMATS)}, got {self.log_format}")

    @property
    def normalized_redis_url(self) -> str:
        """Redis URL with a scheme; a bare ``host:port`` address gets ``redis://``."""
        if "://" in self.redis_url:
            return self.redis_url
        return f"redis://{self.redis_url}"

    @classmethod
    def from_json_file(cls, path: str | Path, base: "Settings | None" = None) -> "Settings":
        """Load settings from a JSON config file.

        Recognises the keys ``weather_api_key``, ``redisUrl`` and
        ``cacheExpiration``. Keys present in the file override ``base``
        (or the environment when ``base`` is None); absent keys keep it.

        Args:
            path: Path to the JSON file
            base: Settings to start from

        Returns:
            Settings with file values applied

        Raises:
            ValueError: If the file is not a JSON object
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        overrides: dict = {}
        if "weather_api_key" in data:
            overrides["weather_api_key"] = str(data["weather_api_key"])
        if "redisUrl" in data:
            overrides["redis_url"] = str(data["redisUrl"])
        if "cacheExpiration" in data:
            overrides["cache_expiration"] = int(data["cacheExpiration"])

        if base is None:
            return cls(**overrides)
        return replace(base, **overrides)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    When ``CONFIG_FILE`` is set, values from that JSON file override the
    environment.
    """
    config_file = os.getenv("CONFIG_FILE")
    if config_file:
        return Settings.from_json_file(config_file)
    return Settings()


def get_redis_client(settings: Settings) -> redis.Redis:
    """Create a Redis client instance with bounded socket timeouts."""
    return redis.from_url(
        settings.normalized_redis_url,
        password=settings.redis_password,
        socket_timeout=settings.redis_timeout,
        socket_connect_timeout=settings.redis_timeout,
        decode_responses=False,
    )
