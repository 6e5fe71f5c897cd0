"""
Core configuration module for Content Ingest.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CONTENT_INGEST_ prefix.

Example:
    export CONTENT_INGEST_MONGODB_URL="mongodb://db.internal:27017"
    export CONTENT_INGEST_OPENAI_API_KEY="sk-..."
"""

from enum import Enum
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Valid environment values."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the CONTENT_INGEST_ prefix for environment variables.
    Example: CONTENT_INGEST_PORT=8080
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="content-ingest",
        description="Name of the service for logging and identification",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the service listens on",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the structured logger",
    )
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed origins outside development",
    )

    # =========================================================================
    # MongoDB Configuration
    # =========================================================================
    mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL",
    )
    mongodb_database: str = Field(
        default="semantiai",
        description="Database holding the content collections",
    )
    mongodb_timeout_ms: int = Field(
        default=5000,
        ge=100,
        le=60000,
        description="Server selection timeout in milliseconds",
    )

    # =========================================================================
    # Redis Configuration (analysis cache)
    # =========================================================================
    redis_url: str = Field(
        default="redis://localhost:6379",
        description="Redis connection URL for the analysis cache",
    )
    analysis_cache_enabled: bool = Field(
        default=True,
        description="Cache LLM classification results keyed by text hash",
    )
    analysis_cache_ttl_seconds: int = Field(
        default=86400,
        ge=60,
        description="Analysis cache time-to-live in seconds",
    )

    # =========================================================================
    # OpenAI Configuration
    # SecretStr masks values in logs/repr, use .get_secret_value() to access
    # =========================================================================
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="OpenAI API key for GPT models",
    )
    openai_base_url: Optional[str] = Field(
        default=None,
        description="Optional custom endpoint (Azure OpenAI or a proxy)",
    )
    llm_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for every completion",
    )
    llm_top_p: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Nucleus sampling parameter for every completion",
    )
    llm_max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per completion before giving up",
    )
    llm_retry_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="Initial backoff delay, doubled after each attempt",
    )

    # =========================================================================
    # Model Selection
    # =========================================================================
    analysis_model: str = Field(
        default="gpt-4o",
        description="Model used for classification, summaries and job analysis",
    )
    summary_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for short HTML summaries",
    )
    overview_model: str = Field(
        default="gpt-4o-mini-2024-07-18",
        description="Model used for detailed HTML overviews",
    )
    extraction_model: str = Field(
        default="gpt-4o-mini-2024-07-18",
        description="Model used to turn HTML into readable text",
    )

    # =========================================================================
    # Page Reader Configuration
    # =========================================================================
    reader_base_url: str = Field(
        default="https://r.jina.ai",
        description="Reader proxy that renders a URL as readable text",
    )
    reader_timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Timeout in seconds for reader requests",
    )

    # =========================================================================
    # File Upload Configuration
    # =========================================================================
    upload_dir: str = Field(
        default="uploads",
        description="Directory for locally stored uploads",
    )
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="Largest accepted upload in bytes",
    )

    model_config = {
        "env_prefix": "CONTENT_INGEST_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("mongodb_url")
    @classmethod
    def validate_mongodb_url(cls, v: str) -> str:
        """Validate MongoDB URL format."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MongoDB URL must start with mongodb:// or mongodb+srv://")
        return v

    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, v: str) -> str:
        """Validate Redis URL format."""
        if not v.startswith(("redis://", "rediss://")):
            raise ValueError("Redis URL must start with redis:// or rediss://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_cors_origins(self) -> list[str]:
        """
        Get CORS allowed origins based on environment.

        - Development: Allow all origins (["*"])
        - Staging/Production: Use cors_origins (comma-separated)
        - If not configured outside development: Empty list

        Returns:
            List of allowed origin strings.
        """
        if self.environment == Environment.DEVELOPMENT.value:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
