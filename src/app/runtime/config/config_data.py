"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field

MEMORY_DATABASE = ":memory:"


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model.

    The catalogue lives in a single SQLite file. ``path`` is the only knob most
    deployments need; ``:memory:`` gives a throwaway database for tests.
    """

    path: str = Field(
        default="App_Data/products.db",
        description="Filesystem path of the SQLite database file",
    )
    echo: bool = Field(default=False, description="Echo SQL statements to the log")
    pool_timeout: int = Field(
        default=20, description="Seconds to wait for the SQLite write lock"
    )

    @property
    def is_memory(self) -> bool:
        return self.path == MEMORY_DATABASE

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the SQLAlchemy connection string for the configured path."""
        if self.is_memory:
            return "sqlite://"
        return f"sqlite:///{Path(self.path).expanduser().as_posix()}"

    def ensure_parent_dir(self) -> None:
        """Create the directory that will hold the database file."""
        if self.is_memory:
            return
        Path(self.path).expanduser().parent.mkdir(parents=True, exist_ok=True)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
