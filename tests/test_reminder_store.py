import unittest
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import patch

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, DataAccessError
from app.core.supabase import ReminderStore


class _RecordingQuery:
    def __init__(self, client, table: str) -> None:
        self.client = client
        self.ops = [("table", table)]
        client.queries.append(self)

    def __getattr__(self, name):
        def _op(*args):
            self.ops.append((name, *args))
            return self
        return _op

    def execute(self):
        if self.client.error:
            raise self.client.error
        return SimpleNamespace(data=self.client.data)


class _RecordingClient:
    def __init__(self, data=None, error=None) -> None:
        self.data = data
        self.error = error
        self.queries = []

    def table(self, name):
        return _RecordingQuery(self, name)


class TestReminderStore(unittest.TestCase):
    def test_find_recent_filters_on_subject_key(self) -> None:
        client = _RecordingClient(data=[{"id": "n1"}])
        store = ReminderStore(client)
        since = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

        rows = store.find_recent_notifications("u1", "document_expiry", "document_id", 15, since)

        self.assertEqual(rows, [{"id": "n1"}])
        ops = client.queries[0].ops
        self.assertIn(("eq", "user_id", "u1"), ops)
        self.assertIn(("eq", "type", "document_expiry"), ops)
        self.assertIn(("gte", "created_at", since.isoformat()), ops)
        self.assertIn(("filter", "data->>document_id", "eq", "15"), ops)
        self.assertNotIn(("filter", "data->>car_id", "eq", "15"), ops)

    def test_list_documents_scoped_to_user(self) -> None:
        client = _RecordingClient(data=None)
        store = ReminderStore(client)

        self.assertEqual(store.list_documents("u1"), [])
        self.assertEqual(client.queries[0].ops, [("table", "documents"), ("select", "*"), ("eq", "user_id", "u1")])

    def test_insert_notification(self) -> None:
        client = _RecordingClient(data=[{"id": "n1"}])
        store = ReminderStore(client)
        row = {"user_id": "u1", "type": "maintenance", "data": {"car_id": "c1"}}

        store.insert_notification(row)

        self.assertEqual(client.queries[0].ops, [("table", "notifications"), ("insert", row)])

    def test_errors_become_data_access_errors(self) -> None:
        store = ReminderStore(_RecordingClient(error=RuntimeError("JWT expired")))

        with self.assertRaises(DataAccessError) as ctx:
            store.list_users()

        self.assertEqual(ctx.exception.detail, "JWT expired")
        self.assertEqual(ctx.exception.extra, {"table": "users", "operation": "select"})

    def test_from_settings_requires_credentials(self) -> None:
        settings = Settings(_env_file=None, SUPABASE_URL="https://x.supabase.co", SUPABASE_SERVICE_ROLE_KEY="")

        with self.assertRaises(ConfigurationError) as ctx:
            ReminderStore.from_settings(settings)

        self.assertEqual(ctx.exception.extra, {"missing": ["SUPABASE_SERVICE_ROLE_KEY"]})

    def test_from_settings_builds_service_client(self) -> None:
        settings = Settings(_env_file=None, SUPABASE_URL="https://x.supabase.co", SUPABASE_SERVICE_ROLE_KEY="secret")

        with patch("app.core.supabase.create_client", return_value="client") as create_client:
            store = ReminderStore.from_settings(settings)

        create_client.assert_called_once_with("https://x.supabase.co", "secret")
        self.assertEqual(store.client, "client")


if __name__ == "__main__":
    unittest.main()
