"""
Site configuration and settings management.
"""
import logging
import os
from typing import List


def _split_origins(value: str) -> List[str]:
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


class Config:
    """Application configuration."""

    # Storage
    DB_PATH: str = os.getenv("GOBH_DB", "./data/gobh.db")

    # Property content (one markdown file per listing)
    CONTENT_DIR: str = os.getenv("CONTENT_DIR", os.path.join("content", "properties"))
    EXCERPT_LENGTH: int = 150

    # Site / API settings
    SITE_NAME: str = "GOBH Investments"
    SITE_TAGLINE: str = "Your Trusted Property Acquisition Partner"
    SITE_DESCRIPTION: str = "We purchase homes in any condition, anywhere. Get your cash offer today!"
    API_TITLE: str = "GOBH Investments API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Lead capture and status check API for the GOBH Investments site"
    API_MESSAGE: str = "GOBH Investments API"

    # CORS settings
    CORS_ORIGINS: list = _split_origins(os.getenv("CORS_ORIGINS", "*"))
    CORS_ORIGIN_HEADER: str = os.getenv("CORS_ORIGINS", "*") or "*"
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: list = ["Content-Type", "Authorization"]

    # Listing limits
    CONTACT_LIST_LIMIT: int = 100
    STATUS_LIST_LIMIT: int = 1000

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "gobh_site.log")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration on startup."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown log level: {cls.LOG_LEVEL}")
        if not cls.DB_PATH:
            raise ValueError("Database path not configured")
        db_dir = os.path.dirname(cls.DB_PATH)
        if db_dir and cls.DB_PATH != ":memory:":
            os.makedirs(db_dir, exist_ok=True)

# Global config instance
config = Config()
