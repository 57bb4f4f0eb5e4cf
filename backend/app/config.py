"""
Greetings API — Application Configuration
===========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
       A malformed PORT fails fast instead of surfacing as a bind error.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the server entry point.
When:  Loaded once at module import time.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development, so the
    service starts with no environment at all.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # What: Interface the listener binds to
    # Why 0.0.0.0: Reachable from outside a container without extra config
    host: str = Field(default="0.0.0.0")

    # What: TCP port the listener binds to (PORT env var)
    # Unset or empty PORT falls back to 3000 (see env_ignore_empty below)
    port: int = Field(default=3000, ge=1, le=65535)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "env_ignore_empty": True,  # PORT="" behaves like an unset PORT
    }


# Singleton instance — imported throughout the application
settings = Settings()
