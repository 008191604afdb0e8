"""
Configuration management using Pydantic settings.
Handles the document store connection, image hosting credentials and server options.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional, List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from the environment and an optional .env file."""

    # Application configuration
    app_name: str = "Real Estate Listing API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Document store configuration
    mongodb_uri: str
    mongodb_database: str = "MVDB"
    store_operation_timeout: float = 5.0  # seconds, per read/write
    store_connect_timeout: float = 10.0  # seconds, initial connection and ping

    # Image hosting configuration
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    cloudinary_folder: Optional[str] = None

    # Upload limits
    max_upload_size: int = 10 * 1024 * 1024  # 10MiB

    # CORS configuration
    cors_origins: List[str] = ["*"]
    cors_methods: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_headers: List[str] = ["Content-Type", "X-API-Key"]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("mongodb_uri")
    @classmethod
    def validate_mongodb_uri(cls, v):
        """Require a mongodb:// or mongodb+srv:// connection string."""
        if not v or not v.strip():
            raise ValueError("MONGODB_URI environment variable not set")
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGODB_URI must start with mongodb:// or mongodb+srv://")
        return v.strip()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("store_operation_timeout", "store_connect_timeout")
    @classmethod
    def validate_timeouts(cls, v):
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @property
    def image_hosting_configured(self) -> bool:
        """Check if all image hosting credentials are present."""
        return all([
            self.cloudinary_cloud_name,
            self.cloudinary_api_key,
            self.cloudinary_api_secret,
        ])

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()
