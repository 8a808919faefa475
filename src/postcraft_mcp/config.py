"""PostCraft-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PostCraft MCP server settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Post body limit checked after Unicode conversion (LinkedIn: 3000)
    postcraft_max_post_length: int = 3000

    # Root logger level applied by the console entry point
    postcraft_log_level: str = "INFO"
