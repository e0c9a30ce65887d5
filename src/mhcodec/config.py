"""Library configuration from environment variables."""

import logging
from functools import lru_cache

from multiformats import multibase
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MHCODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Textual form
    default_base: str = Field(
        default="base16",
        description="Multibase used when no base encoding is requested",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level for the mhcodec logger")

    @field_validator("default_base")
    @classmethod
    def _known_base(cls, value: str) -> str:
        if not multibase.exists(value):
            raise ValueError(f"Unknown multibase: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the mhcodec logger hierarchy."""
    settings = settings or get_settings()
    logger = logging.getLogger("mhcodec")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
