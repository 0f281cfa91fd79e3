from typing import Optional, Dict, Any, List
from datetime import datetime
from supabase import create_client, Client
import logging

from app.core.config import Settings, get_settings
from app.core.exceptions import ConfigurationError, DataAccessError

logger = logging.getLogger(__name__)


class ReminderStore:
    """
    Table access for the notification scan, backed by a service-role client.

    Built once per invocation and handed to the scanner. All methods are
    blocking; callers run them in a worker thread.
    """

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ReminderStore":
        settings = settings or get_settings()
        missing = [
            name for name in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY")
            if not getattr(settings, name)
        ]
        if missing:
            raise ConfigurationError(missing)
        return cls(create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY))

    def _execute(self, table: str, operation: str, query) -> List[Dict[str, Any]]:
        try:
            res = query.execute()
        except Exception as e:
            logger.error(f"Supabase {operation} error on {table}: {e}")
            raise DataAccessError(table, operation, str(e)) from e
        return getattr(res, "data", None) or []

    def list_users(self) -> List[Dict[str, Any]]:
        return self._execute(
            'users', 'select',
            self.client.table('users').select('id, name, email')
        )

    def list_documents(self, user_id: Any) -> List[Dict[str, Any]]:
        return self._execute(
            'documents', 'select',
            self.client.table('documents').select('*').eq('user_id', user_id)
        )

    def list_cars(self, user_id: Any) -> List[Dict[str, Any]]:
        return self._execute(
            'cars', 'select',
            self.client.table('cars').select('*').eq('user_id', user_id)
        )

    def find_recent_notifications(
        self,
        user_id: Any,
        notification_type: str,
        subject_key: str,
        subject_id: Any,
        since: datetime
    ) -> List[Dict[str, Any]]:
        """Notifications of one type for one subject created at or after ``since``."""
        query = (
            self.client.table('notifications')
            .select('id, created_at')
            .eq('user_id', user_id)
            .eq('type', notification_type)
            .gte('created_at', since.isoformat())
            .filter(f'data->>{subject_key}', 'eq', str(subject_id))
            .limit(1)
        )
        return self._execute('notifications', 'select', query)

    def insert_notification(self, row: Dict[str, Any]) -> List[Dict[str, Any]]:
        return self._execute(
            'notifications', 'insert',
            self.client.table('notifications').insert(row)
        )
