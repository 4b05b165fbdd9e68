"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables, with an optional .env
file as a fallback. Nothing here is secret, so every field has a default and
the API starts with zero configuration for local development.

Pydantic Settings automatically:
  1. Reads from environment variables (highest priority)
  2. Falls back to .env file values
  3. Uses defaults defined here (lowest priority)

Usage:
    from app.config import settings
    print(settings.PORT)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Course Catalog API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Application ---
    APP_NAME: str = "Course Catalog API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # --- Database ---
    # A single SQLite file holds both the users and courses tables
    DATABASE_URL: str = "sqlite+aiosqlite:///./fsjstd-restapi.db"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    # When true, the terminal error handler logs full stack traces
    ENABLE_GLOBAL_ERROR_LOGGING: bool = False

    # --- CORS ---
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
