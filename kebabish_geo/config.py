"""Application configuration via Pydantic Settings.

NOTE: We explicitly map .env variable names (GEOCODER_USER_AGENT,
BRANCHES_PATH, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoder
    geocoder_base_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        validation_alias="GEOCODER_BASE_URL",
    )
    geocoder_user_agent: str = Field(
        default="Kebabish-Pizza-App/1.0",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_timeout: float = Field(default=5.0, validation_alias="GEOCODER_TIMEOUT")

    # Geocoder cache: 24h, 500 addresses
    geocoder_cache_ttl_seconds: float = Field(
        default=24 * 60 * 60,
        validation_alias="GEOCODER_CACHE_TTL_SECONDS",
    )
    geocoder_cache_max_size: int = Field(default=500, validation_alias="GEOCODER_CACHE_MAX_SIZE")

    # Geocoder rate limit: 10 lookups per address per minute
    geocoder_rate_limit_window_seconds: float = Field(
        default=60.0,
        validation_alias="GEOCODER_RATE_LIMIT_WINDOW_SECONDS",
    )
    geocoder_rate_limit_max_requests: int = Field(
        default=10,
        validation_alias="GEOCODER_RATE_LIMIT_MAX_REQUESTS",
    )

    # Branches
    branches_path: str = Field(default="data/branches.json", validation_alias="BRANCHES_PATH")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
