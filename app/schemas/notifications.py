"""
Glovebox API - Notification Schemas
Pending notification rows and scan results
"""

from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from .common import BaseResponse, NotificationType


class NotificationCreate(BaseModel):
    """Row written to the notifications table."""
    user_id: Any
    title: str
    body: str
    type: NotificationType
    data: Dict[str, Any]
    is_read: bool = False
    created_at: Optional[datetime] = None

    def to_row(self) -> Dict[str, Any]:
        """Serialize with external string values; created_at defaults to now."""
        created_at = self.created_at or datetime.now(timezone.utc)
        return {
            "user_id": self.user_id,
            "title": self.title,
            "body": self.body,
            "type": self.type.value,
            "data": self.data,
            "is_read": self.is_read,
            "created_at": created_at.isoformat(),
        }


class ScanResult(BaseModel):
    """Outcome of one scan pass."""
    notified_count: int = 0
    errors: List[str] = Field(default_factory=list)
    users_scanned: int = 0
    documents_checked: int = 0
    cars_checked: int = 0
    duplicates_skipped: int = 0
    records_skipped: int = 0
    dry_run: bool = False


class CheckNotificationsResponse(BaseResponse):
    """Success envelope returned to the trigger."""
    notified_count: int = 0
