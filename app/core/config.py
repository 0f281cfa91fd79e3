"""
Glovebox API - Configuration
Loads settings from environment variables
"""

from typing import Optional, List, Literal
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Info
    APP_NAME: str = "Glovebox API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Supabase. Read once per process; presence is checked on every invocation
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Reminder thresholds
    DOCUMENT_EXPIRY_WINDOW_DAYS: int = 30
    OIL_CHANGE_INTERVAL_DAYS: int = 90
    MAINTENANCE_MILEAGE_THRESHOLD: float = 5000
    NOTIFICATION_LOOKBACK_DAYS: int = 1

    # What to do with rows that fail validation: abort the run or skip the row
    INVALID_RECORD_POLICY: Literal["abort", "skip"] = "abort"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
