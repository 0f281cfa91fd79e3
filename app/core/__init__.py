"""
Glovebox API - Core Module
"""

from app.core.config import settings, get_settings, Settings
from app.core.supabase import ReminderStore
from app.core.exceptions import (
    GloveboxException,
    ConfigurationError,
    DataAccessError,
    ValidationError,
    ScanError
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",

    # Supabase
    "ReminderStore",

    # Exceptions
    "GloveboxException",
    "ConfigurationError",
    "DataAccessError",
    "ValidationError",
    "ScanError",
]
