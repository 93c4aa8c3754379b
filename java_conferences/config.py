"""
Configuration management for java_conferences.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from java_conferences.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MARKDOWN_URL,
    DEFAULT_USER_AGENT,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are validated on first access, so a malformed value
    (e.g. a non-numeric timeout) fails fast instead of surfacing mid-request.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Source document
    github_markdown_url: str = Field(
        default=DEFAULT_MARKDOWN_URL,
        description="Raw URL of the conferences markdown document",
    )

    # HTTP Configuration
    http_timeout: float = Field(
        default=DEFAULT_HTTP_TIMEOUT,
        gt=0,
        description="Timeout in seconds for fetching the markdown document",
    )
    http_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with the fetch request",
    )

    @field_validator("github_markdown_url", "http_user_agent", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string values."""
        if isinstance(v, str):
            return v.strip()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_github_markdown_url() -> str:
    """Get the conferences markdown URL from settings."""
    url = get_settings().github_markdown_url
    if not url:
        raise ValueError("GITHUB_MARKDOWN_URL is set but empty")
    return url


def get_http_timeout() -> float:
    """Get HTTP timeout (seconds) from settings."""
    return get_settings().http_timeout


def get_http_user_agent() -> str:
    """Get HTTP User-Agent from settings."""
    return get_settings().http_user_agent
