"""Configuration management for termlog."""

import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggerSettings(BaseSettings):
    """Configuration settings for termlog loggers."""

    model_config = SettingsConfigDict(
        env_prefix="TERMLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    use_color: bool = Field(default=True, description="Color prefixes and JSON output")
    json_indent: int = Field(default=4, ge=0, description="Indent width used by log_json")

    @classmethod
    def from_env(cls) -> "LoggerSettings":
        """Create settings from environment variables."""
        return cls()

    def effective_use_color(self) -> bool:
        """Resolve the color flag, honoring the NO_COLOR convention."""
        if os.environ.get("NO_COLOR"):
            return False
        return self.use_color


# Global settings instance
settings = LoggerSettings.from_env()
