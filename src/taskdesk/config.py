"""Configuration settings management for taskdesk.

This module provides centralized, hierarchical configuration using
pydantic-settings with validation and environment variable support.

Features:
- Nested BaseSettings sections for database, task listing and the HTTP API
- Environment variable support with TASKDESK_ prefix and ``__`` nesting
- Support for .env files
- Cached global settings accessor
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DatabaseSettings(BaseSettings):
    """Database connection configuration."""

    model_config = SettingsConfigDict(env_prefix="DATABASE_")

    url: str = Field("sqlite:///taskdesk.db", description="Database connection URL")
    echo_sql: bool = Field(False, description="Enable SQL query logging for debugging")
    pool_size: int = Field(
        5, ge=1, le=50, description="Connection pool size (ignored for SQLite)"
    )
    pool_timeout: int = Field(
        30, ge=1, le=300, description="Connection checkout timeout in seconds"
    )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL points at a SQLite database."""
        return self.url.startswith("sqlite")


class TaskSettings(BaseSettings):
    """Task listing behavior."""

    model_config = SettingsConfigDict(env_prefix="TASKS_")

    include_owner_by_default: bool = Field(
        True, description="Join the owning user when listing tasks by default"
    )


class ApiSettings(BaseSettings):
    """HTTP API configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    title: str = Field("taskdesk", description="Application title shown in OpenAPI")
    host: str = Field("127.0.0.1", description="Bind address for the API server")
    port: int = Field(8000, ge=1, le=65535, description="Bind port for the API server")
    prefix: str = Field("", description="Path prefix mounted before all task routes")

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Require a leading slash and drop any trailing slash."""
        if not v:
            return v
        if not v.startswith("/"):
            raise ValueError("API prefix must start with '/'")
        return v.rstrip("/")


class TaskdeskSettings(BaseSettings):
    """Root configuration combining all subsystem settings."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    tasks: TaskSettings = Field(default_factory=TaskSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    debug_mode: bool = Field(False, description="Enable debug behaviour")
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_prefix="TASKDESK_",
        extra="ignore",
        validate_default=True,
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name; aliases such as WARN or FATAL are rejected."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TaskdeskSettings:
    """Get cached global settings instance.

    Returns:
        Global TaskdeskSettings instance

    """
    return TaskdeskSettings()


__all__ = [
    "LOG_LEVELS",
    "ApiSettings",
    "DatabaseSettings",
    "TaskSettings",
    "TaskdeskSettings",
    "get_settings",
]
