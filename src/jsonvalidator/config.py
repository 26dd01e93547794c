"""
JSON Validator - Configuration Module.

Runtime settings for the validator, loader and command line entry point.
Uses pydantic-settings so every value can be overridden from the environment
(prefix ``JSONVALIDATOR_``) or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Main validator settings."""

    model_config = SettingsConfigDict(
        env_prefix="JSONVALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_name: str = Field(default="root", description="Entity path used for the validated root value")
    log_level: str = Field(default="WARNING", description="Log level used by the command line entry point")
    file_encoding: str = Field(default="utf-8", description="Encoding for schema and document files")
    max_file_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest schema or document file the loader will read",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
