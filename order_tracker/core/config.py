"""
Centralized application configuration.

All settings are loaded from environment variables (or a local .env file)
using Pydantic Settings for automatic validation.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from order_tracker.utils.error_handler import ConfigurationException


class Settings(BaseSettings):
    """
    Application settings backed by Pydantic Settings.

    Every value can be overridden through an environment variable of the
    same name; defaults are suitable for running the tracker locally.
    """

    # === BASIC APP SETTINGS ===
    APP_NAME: str = "Order Status Tracker"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # === TRACKING ENDPOINT ===
    TRACKING_ENDPOINT_URL: str = Field(default="https://data.smartagent.io/v1/jdsports/track-my-order")

    # === FAN-OUT ===
    # None or 0 means one in-flight lookup per order number
    MAX_CONCURRENT_LOOKUPS: Optional[int] = Field(default=None)

    # === SESSION INPUT ===
    ORDER_NUMBERS_FILE: str = Field(default="ordernumbers.txt")

    # === REPORT ===
    REPORT_INCLUDE_UNCLASSIFIED: bool = Field(default=True)

    # === LOGGING ===
    LOG_LEVEL: str = Field(default="WARNING")
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE_MB: int = Field(default=10)
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate that the log level is a known logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate that the environment name is known."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT must be one of: {valid_envs}")
        return v.lower()

    @field_validator("MAX_CONCURRENT_LOOKUPS", mode="before")
    @classmethod
    def parse_max_concurrent(cls, v):
        """Treat empty strings and zero as 'no cap'; reject negatives."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        v = int(v)
        if v < 0:
            raise ValueError("MAX_CONCURRENT_LOOKUPS cannot be negative")
        return v or None

    @field_validator("TRACKING_ENDPOINT_URL")
    @classmethod
    def validate_endpoint_url(cls, v):
        """Validate that the endpoint is an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("TRACKING_ENDPOINT_URL must start with http:// or https://")
        return v

    @property
    def user_agent(self) -> str:
        """User-Agent header sent with every lookup."""
        return f"{self.APP_NAME.replace(' ', '-')}/{self.APP_VERSION}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get the singleton settings instance.

    Cached so the environment is parsed only once per process.

    Returns:
        Settings: Settings instance
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings from the environment (useful for testing).

    Returns:
        Settings: Fresh settings instance
    """
    get_settings.cache_clear()
    return get_settings()


def load_settings() -> Settings:
    """
    Get the settings, turning validation errors into a ConfigurationException.

    Returns:
        Settings: Settings instance

    Raises:
        ConfigurationException: When an environment value is invalid
    """
    try:
        return get_settings()
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationException(
            f"invalid setting {setting}: {first['msg']}",
            setting=setting,
            details={"error_count": e.error_count()},
        ) from e
