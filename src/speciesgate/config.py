"""Environment-based configuration for SpeciesGate."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from SPECIESGATE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIESGATE_",
        case_sensitive=False,
        protected_namespaces=(),
    )

    # Server
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8083

    # Authentication (None = disabled)
    api_key: str | None = None

    # Model server
    model_server_url: str = Field(min_length=1)
    classify_path: str = Field(min_length=1)

    # Confidence gate
    confidence_threshold: float = Field(default=0.80, ge=0.0, le=1.0)

    # Timeouts (seconds)
    connect_timeout: float = Field(default=10.0, gt=0)
    response_timeout: float = Field(default=10.0, gt=0)
    read_idle_timeout: float = Field(default=10.0, gt=0)
    overall_timeout: float = Field(default=15.0, gt=0)

    # Connection pool
    max_connections: int = Field(default=100, ge=1)
    max_keepalive_connections: int = Field(default=20, ge=0)

    # Input limits
    max_file_size: int = Field(default=10_485_760, ge=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
