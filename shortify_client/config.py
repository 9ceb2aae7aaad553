"""Configuration management for the Shortify client."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, model_validator


class Config(BaseSettings):
    """Client configuration."""

    # Backend settings
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Origin of the Shortify API gateway"
    )

    redirect_base_url: Optional[str] = Field(
        default=None,
        description="Base URL the backend uses to build redirect links (defaults to api_base_url)"
    )

    request_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset means requests may wait indefinitely."
    )

    # Web front settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    session_cookie: str = Field(
        default="shortify_session",
        description="Cookie name identifying a browser session"
    )

    max_sessions: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of browser sessions held in memory"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @model_validator(mode="after")
    def _default_redirect_base_url(self) -> "Config":
        """Short links redirect through the API origin unless told otherwise."""
        self.api_base_url = self.api_base_url.rstrip("/")
        if not self.redirect_base_url:
            self.redirect_base_url = self.api_base_url
        return self


def load_config(**overrides) -> Config:
    """Load configuration from environment, with explicit overrides on top."""
    return Config(**{k: v for k, v in overrides.items() if v is not None})
