# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.STARTUP_CSV_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STARTUP_CSV_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "thailand_startups_detailed-JmeZ5GMMMoZ360uoVAepBc23IMzFqL.csv"
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Startup Data Source
    # -------------------------------------------------------------------------

    STARTUP_CSV_URL: str = Field(
        default=DEFAULT_STARTUP_CSV_URL,
        description="URL of the CSV file the directory is loaded from"
    )

    CSV_PARSER_MODE: Literal["legacy", "rfc4180"] = Field(
        default="legacy",
        description="legacy: backslash-aware line splitter; rfc4180: pandas.read_csv"
    )

    CSV_FETCH_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout for each CSV fetch attempt"
    )

    CSV_FETCH_MAX_RETRIES: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Extra fetch attempts after the first failure"
    )

    CSV_FETCH_BACKOFF_SECONDS: float = Field(
        default=0.5,
        ge=0,
        le=30,
        description="Delay before the first retry (doubles on each retry)"
    )

    PRELOAD_ON_STARTUP: bool = Field(
        default=True,
        description="Load the CSV when the app starts instead of on first request"
    )

    # -------------------------------------------------------------------------
    # Directory Behaviour
    # -------------------------------------------------------------------------

    DIRECTORY_PAGE_SIZE: int = Field(
        default=12,
        ge=1,
        le=100,
        description="Startups per directory page"
    )

    DUPLICATE_MIN_NAME_LENGTH: int = Field(
        default=3,
        ge=1,
        description="Shortest name the similar-name duplicate check applies to"
    )

    MOCK_ACTION_DELAY_SECONDS: float = Field(
        default=1.0,
        ge=0,
        le=10,
        description="Simulated latency for register/approve/delete/import actions"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum size of an admin CSV import in MB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
