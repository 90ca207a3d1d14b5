"""
Runtime configuration for the Loom transcript MCP server.

Settings are read from environment variables prefixed with
``LOOM_MCP_`` (for example ``LOOM_MCP_REQUEST_TIMEOUT=10``) and from an
optional ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LOOM_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream API
    graphql_url: str = "https://www.loom.com/graphql"
    user_agent: str = "loom-transcript-mcp/1.0.0"
    request_timeout: float = 30.0

    # Server
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
