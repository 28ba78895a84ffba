"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DICTIONARY_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "sabdakosh.json"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Sabdakosh")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    workers: int = Field(default=1)

    # Dictionary
    dictionary_path: str = Field(default=DEFAULT_DICTIONARY_PATH)

    # Search Configuration
    default_limit: int = Field(default=25, ge=0)
    max_limit: int = Field(default=100, ge=1)
    max_query_length: int = Field(default=100, ge=1)
    gap_weight: int = Field(default=10)  # per unmatched character inside the span
    prefix_weight: int = Field(default=1)  # per character before the first match

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @model_validator(mode="after")
    def check_weights(self) -> "Settings":
        """Validate matcher weights and result limits."""
        if not self.gap_weight > self.prefix_weight > 0:
            raise ValueError("gap_weight must be greater than prefix_weight, which must be positive")
        if self.default_limit > self.max_limit:
            raise ValueError("default_limit cannot exceed max_limit")
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
