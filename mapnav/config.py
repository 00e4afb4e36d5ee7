"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== API Keys =====
    GOOGLE_MAPS_API_KEY: Optional[str] = os.getenv("GOOGLE_MAPS_API_KEY")

    # ===== Google Maps Endpoints =====
    GOOGLE_MAPS_BASE_URL: str = os.getenv("GOOGLE_MAPS_BASE_URL", "https://maps.googleapis.com/maps/api")
    DIRECTIONS_TRAVEL_MODE: str = os.getenv("DIRECTIONS_TRAVEL_MODE", "walking")

    # ===== HTTP Client =====
    API_TIMEOUT_SECONDS: float = float(os.getenv("API_TIMEOUT_SECONDS", "30"))
    HTTP_MAX_CONNECTIONS: int = int(os.getenv("HTTP_MAX_CONNECTIONS", "100"))
    HTTP_MAX_KEEPALIVE: int = int(os.getenv("HTTP_MAX_KEEPALIVE", "50"))

    # ===== Map Rendering =====
    CAMERA_PADDING: int = int(os.getenv("CAMERA_PADDING", "50"))
    ROUTE_STROKE_WIDTH: float = float(os.getenv("ROUTE_STROKE_WIDTH", "5.0"))
    STATIC_MAP_WIDTH: int = int(os.getenv("STATIC_MAP_WIDTH", "640"))
    STATIC_MAP_HEIGHT: int = int(os.getenv("STATIC_MAP_HEIGHT", "480"))

    # ===== Logging & Debug =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    RESPONSE_TEXT_PREVIEW_LENGTH: int = int(os.getenv("RESPONSE_TEXT_PREVIEW_LENGTH", "200"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
