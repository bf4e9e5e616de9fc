"""Configuration helpers shared across services."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings."""

    redis_url: str = Field("redis://localhost:6379/0", alias="REDIS_URL")
    mcp_host: str = Field("0.0.0.0", alias="MCP_HOST")
    mcp_port: int = Field(3000, alias="MCP_PORT")
    mcp_api_token: str | None = Field(default=None, alias="MCP_API_TOKEN")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")
    session_backend: Literal["memory", "redis"] = Field("memory", alias="SESSION_BACKEND")
    session_ttl_hours: int = Field(24, alias="SESSION_TTL_HOURS")
    recent_limit: int = Field(10, alias="RECENT_LIMIT")
    search_preview_limit: int = Field(5, alias="SEARCH_PREVIEW_LIMIT")
    default_document_id: str = Field("CPG", alias="DEFAULT_DOCUMENT_ID")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=(
            Path(__file__).resolve().parent.parent / ".env",
            Path.cwd() / ".env",
        ),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings"]
