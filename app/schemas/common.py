"""
Glovebox API - Common Schemas
Base models and enums shared across the application
"""

from pydantic import BaseModel
from enum import Enum


# ==================== Enums ====================

class NotificationType(str, Enum):
    DOCUMENT_EXPIRY = "document_expiry"
    MAINTENANCE = "maintenance"


class MaintenanceType(str, Enum):
    OIL_CHANGE = "oil_change"
    GENERAL = "general"


class RecordSource(str, Enum):
    """Tables the scanner reads reminder subjects from."""
    DOCUMENTS = "documents"
    CARS = "cars"


# ==================== Base Response Models ====================

class BaseResponse(BaseModel):
    """Base response model."""
    message: str


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
