"""Configuration and settings for the Posts API.

Uses Pydantic Settings for fail-fast validation on startup.
All required environment variables are validated at import time.
"""

import logging
import sys
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("grpc").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Raises ValidationError on startup if required variables are missing.
    """

    model_config = SettingsConfigDict(
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Firebase Configuration (required)
    # Can be a JSON string, a file path to the credentials JSON, or base64 JSON
    firebase_credentials: str = Field(
        ..., description="Firebase service account JSON string or path to JSON file"
    )
    posts_collection: str = Field(
        default="posts", description="Firestore collection holding posts"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")
    check_store_on_startup: bool = Field(
        default=True, description="Run a Firestore health check during startup"
    )

    # Listing
    page_size: int = Field(default=10, ge=1, description="Posts returned per page")
    body_preview_length: int = Field(
        default=200, ge=1, description="Body length kept in list responses"
    )

    # Status used when a request body or query fails validation.
    # 404 reproduces the legacy API for older clients.
    validation_error_status: int = Field(
        default=400, description="HTTP status for request validation failures"
    )

    @field_validator("firebase_credentials")
    @classmethod
    def validate_credentials_not_empty(cls, v: str) -> str:
        """Ensure credentials are not an empty string."""
        if not v or not v.strip():
            raise ValueError("firebase_credentials cannot be empty")
        return v.strip()

    @field_validator("validation_error_status")
    @classmethod
    def validate_validation_status(cls, v: int) -> int:
        if v not in (400, 404):
            raise ValueError("validation_error_status must be 400 or 404")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# CORS Configuration
CORS_CONFIG: dict[str, Any] = {
    "allow_origins": [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    "allow_credentials": True,
    "allow_methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    "allow_headers": ["*"],
    "expose_headers": ["Last-Page", "X-Request-ID"],
    "max_age": 600,
}

# FastAPI App Configuration
APP_CONFIG: dict[str, Any] = {
    "title": "Posts API",
    "description": "Blog post storage with paginated listing, backed by Firestore.",
    "version": "0.1.0",
    "docs_url": "/api/docs",
    "redoc_url": "/api/redoc",
    "openapi_url": "/api/openapi.json",
    "openapi_tags": [
        {
            "name": "Health",
            "description": "Health check and service status",
        },
        {
            "name": "Posts",
            "description": "Create, list, read, update and delete posts",
        },
    ],
}


def get_app_config() -> dict[str, Any]:
    """Get FastAPI application configuration."""
    return APP_CONFIG.copy()


def get_cors_config() -> dict[str, Any]:
    """Get CORS middleware configuration."""
    return CORS_CONFIG.copy()
