"""
Glovebox API - Schemas Package
Centralized exports for all Pydantic schemas
"""

# Common (Enums and Base Models)
from .common import (
    # Enums
    NotificationType,
    MaintenanceType,
    RecordSource,
    # Base Responses
    BaseResponse,
    ErrorResponse,
)

# Records
from .records import (
    RecordId,
    UserRecord,
    DocumentRecord,
    CarRecord,
)

# Notifications
from .notifications import (
    NotificationCreate,
    ScanResult,
    CheckNotificationsResponse,
)

__all__ = [
    # Common
    "NotificationType",
    "MaintenanceType",
    "RecordSource",
    "BaseResponse",
    "ErrorResponse",

    # Records
    "RecordId",
    "UserRecord",
    "DocumentRecord",
    "CarRecord",

    # Notifications
    "NotificationCreate",
    "ScanResult",
    "CheckNotificationsResponse",
]
