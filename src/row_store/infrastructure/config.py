"""Configuration management for the row store."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from row_store.domain.value_objects import PAGE_SIZE, ROW_SIZE, TABLE_MAX_PAGES, TableLayout


class StorageConfig(BaseModel):
    """Table geometry configuration."""

    page_size: int = Field(
        default=PAGE_SIZE, ge=ROW_SIZE, le=65536, description="Page size in bytes"
    )
    max_pages: int = Field(
        default=TABLE_MAX_PAGES, ge=1, le=100000, description="Maximum pages per table"
    )

    @property
    def layout(self) -> TableLayout:
        """Table geometry described by this config."""
        return TableLayout(page_size=self.page_size, max_pages=self.max_pages)


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")
    metrics_enabled: bool = Field(
        default=False, description="Serve Prometheus metrics on metrics_port"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="row_store", description="Service name for tracing")


class ReplConfig(BaseModel):
    """Interactive prompt configuration."""

    prompt: str = Field(default="db > ", description="Prompt printed before each input line")


class Config(BaseSettings):
    """Main configuration for the row store."""

    model_config = SettingsConfigDict(
        env_prefix="ROW_STORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
