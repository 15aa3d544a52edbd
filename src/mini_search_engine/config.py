"""Centralized configuration for mini-search-engine using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP server port")

    # Storage
    articles_file: Path = Field(default=Path("articles.json"), description="JSON snapshot of all articles")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    access_log: bool = Field(default=False, description="Keep uvicorn access logs at the configured level")

    # Tracing
    service_name: str = Field(default="mini-search-engine", description="Service name reported on traces")
