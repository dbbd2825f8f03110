# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.MONGODB_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, so a missing database
# URL stops the process before the server starts listening.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # MongoDB Configuration
    # -------------------------------------------------------------------------

    MONGODB_URL: str = Field(
        ...,  # required - the server never starts without a database
        description="MongoDB connection URL (e.g., mongodb://localhost:27017/messages)"
    )

    MONGODB_DATABASE: str = Field(
        default="messages",
        description="Database name used when MONGODB_URL does not name one"
    )

    MONGODB_TIMEOUT_MS: int = Field(
        default=5000,
        ge=100,
        description="Server selection timeout for the MongoDB client"
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

    PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing tokens"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Algorithm used to sign and verify access tokens"
    )

    JWT_EXPIRE_MINUTES: int = Field(
        default=60,
        ge=1,
        description="Lifetime of an access token in minutes"
    )

    CORS_ALLOW_ORIGIN: str = Field(
        default="*",
        description="Value of the Access-Control-Allow-Origin header"
    )

    # -------------------------------------------------------------------------
    # Image Upload Settings
    # -------------------------------------------------------------------------

    MEDIA_ROOT: str = Field(
        default=".",
        description="Directory that holds the images directory"
    )

    IMAGES_DIR: str = Field(
        default="images",
        description="Images directory name; also the URL prefix it is served under"
    )

    ALLOWED_IMAGE_TYPES: str = Field(
        default="image/png,image/jpg,image/jpeg",
        description="Accepted image MIME types (comma-separated)"
    )

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Maximum image upload size in MB"
    )

    # -------------------------------------------------------------------------
    # GraphQL Settings
    # -------------------------------------------------------------------------

    GRAPHIQL: bool = Field(
        default=True,
        description="Serve the GraphiQL explorer on GET /graphql"
    )

    POSTS_PER_PAGE: int = Field(
        default=2,
        ge=1,
        le=100,
        description="Page size of the posts query"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist (production sets env vars directly)
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def allowed_image_types_list(self) -> list[str]:
        """
        Parse ALLOWED_IMAGE_TYPES string into a list.

        Example: "image/png, image/jpeg" -> ["image/png", "image/jpeg"]
        """
        return [
            mime.strip().lower()
            for mime in self.ALLOWED_IMAGE_TYPES.split(",")
            if mime.strip()
        ]

    @property
    def max_upload_size_bytes(self) -> int:
        """Convert MB to bytes for file size validation."""
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def images_path(self) -> Path:
        """Absolute path of the directory uploaded images are written to."""
        return (Path(self.MEDIA_ROOT) / self.IMAGES_DIR).resolve()

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
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
