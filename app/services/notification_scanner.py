"""
Glovebox API - Notification Scanner
Walks every user's documents and cars and records pending reminders
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Type

import anyio
import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings, get_settings
from app.core.exceptions import ValidationError
from app.core.supabase import ReminderStore
from app.schemas import (
    CarRecord,
    DocumentRecord,
    RecordSource,
    ScanResult,
    UserRecord,
)
from app.services.reminder_rules import (
    ReminderCandidate,
    ReminderKind,
    ReminderRule,
    build_rules,
    evaluate,
)

logger = structlog.get_logger()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NotificationScanner:
    """
    One sequential scan-and-notify pass over all users.

    The first store error aborts the pass: it propagates to the caller and
    no further users are processed. Rows inserted before the failure stay.

    Usage:
        store = ReminderStore.from_settings()
        result = await NotificationScanner(store).run()
    """

    def __init__(
        self,
        store: ReminderStore,
        rules: Optional[List[ReminderRule]] = None,
        lookback: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utcnow,
        invalid_record_policy: Optional[str] = None,
        dry_run: bool = False,
        settings: Optional[Settings] = None
    ):
        settings = settings or get_settings()
        self.store = store
        self.rules = rules if rules is not None else build_rules(settings)
        self.lookback = lookback or timedelta(days=settings.NOTIFICATION_LOOKBACK_DAYS)
        self.clock = clock
        self.invalid_record_policy = invalid_record_policy or settings.INVALID_RECORD_POLICY
        self.dry_run = dry_run

    async def run(self) -> ScanResult:
        result = ScanResult(dry_run=self.dry_run)
        now = self.clock()
        log = logger.bind(dry_run=self.dry_run)
        log.info("notification_scan_started", lookback=str(self.lookback))

        users = await anyio.to_thread.run_sync(self.store.list_users)
        for row in users:
            user = self._parse(UserRecord, row, "users", result)
            if user is None:
                continue
            await self._scan_user(user, now, result)
            result.users_scanned += 1

        log.info(
            "notification_scan_finished",
            notified=result.notified_count,
            users=result.users_scanned,
            duplicates=result.duplicates_skipped,
            skipped=result.records_skipped,
        )
        return result

    async def _scan_user(self, user: UserRecord, now: datetime, result: ScanResult) -> None:
        documents = await anyio.to_thread.run_sync(self.store.list_documents, user.id)
        for row in documents:
            doc = self._parse(DocumentRecord, row, "documents", result)
            if doc is None:
                continue
            result.documents_checked += 1
            for candidate in evaluate(self.rules, RecordSource.DOCUMENTS, doc, now):
                await self._notify(candidate, result)

        cars = await anyio.to_thread.run_sync(self.store.list_cars, user.id)
        for row in cars:
            car = self._parse(CarRecord, row, "cars", result)
            if car is None:
                continue
            result.cars_checked += 1
            for candidate in evaluate(self.rules, RecordSource.CARS, car, now):
                await self._notify(candidate, result)

    def _parse(
        self,
        model: Type[BaseModel],
        row: Dict[str, Any],
        table: str,
        result: ScanResult
    ) -> Optional[BaseModel]:
        try:
            return model.model_validate(row)
        except PydanticValidationError as e:
            record_id = row.get("id") if isinstance(row, dict) else None
            message = f"Invalid {table} record {record_id}: {e.errors()[0]['msg']}"
            if self.invalid_record_policy != "skip":
                raise ValidationError(message, table=table, record_id=record_id) from e
            logger.warning("invalid_record_skipped", table=table, record_id=record_id, error=str(e))
            result.errors.append(message)
            result.records_skipped += 1
            return None

    async def has_recent_notification(
        self,
        user_id: Any,
        kind: ReminderKind,
        subject_id: Any,
        window: Optional[timedelta] = None
    ) -> bool:
        """True if ``user_id`` already has a ``kind`` notification for the subject in the window."""
        since = self.clock() - (window or self.lookback)
        matches = await anyio.to_thread.run_sync(
            lambda: self.store.find_recent_notifications(
                user_id,
                kind.notification_type.value,
                kind.subject_key,
                subject_id,
                since,
            )
        )
        return len(matches) > 0

    async def _notify(self, candidate: ReminderCandidate, result: ScanResult) -> None:
        log = logger.bind(
            user_id=candidate.user_id,
            kind=candidate.kind.value,
            subject_id=candidate.subject_id,
            reason=candidate.reason,
        )
        if await self.has_recent_notification(candidate.user_id, candidate.kind, candidate.subject_id):
            log.debug("notification_duplicate_skipped")
            result.duplicates_skipped += 1
            return

        if not self.dry_run:
            notification = candidate.to_notification()
            notification.created_at = self.clock()
            row = notification.to_row()
            await anyio.to_thread.run_sync(self.store.insert_notification, row)
        log.info("notification_created")
        result.notified_count += 1
