"""
Glovebox API - Reminder Rules
Threshold rules that decide whether a document or car needs a reminder
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.core.config import Settings
from app.schemas import (
    CarRecord,
    DocumentRecord,
    MaintenanceType,
    NotificationCreate,
    NotificationType,
    RecordSource,
)


class ReminderKind(str, Enum):
    """Closed set of reminders the scanner can emit."""
    DOCUMENT_EXPIRY = "document_expiry"
    MAINTENANCE_OIL_CHANGE = "maintenance_oil_change"
    MAINTENANCE_GENERAL = "maintenance_general"

    @property
    def notification_type(self) -> NotificationType:
        if self is ReminderKind.DOCUMENT_EXPIRY:
            return NotificationType.DOCUMENT_EXPIRY
        return NotificationType.MAINTENANCE

    @property
    def maintenance_type(self) -> Optional[MaintenanceType]:
        return {
            ReminderKind.MAINTENANCE_OIL_CHANGE: MaintenanceType.OIL_CHANGE,
            ReminderKind.MAINTENANCE_GENERAL: MaintenanceType.GENERAL,
        }.get(self)

    @property
    def subject_key(self) -> str:
        """Key in the notification payload that identifies the subject."""
        return subject_key_for(self.notification_type)


def subject_key_for(notification_type: NotificationType) -> str:
    if notification_type is NotificationType.DOCUMENT_EXPIRY:
        return "document_id"
    return "car_id"


@dataclass(frozen=True)
class ReminderCandidate:
    """A rule that fired for one record; becomes a notification unless deduplicated."""
    kind: ReminderKind
    user_id: Any
    subject_id: Any
    title: str
    body: str
    reason: str = ""

    @property
    def payload(self) -> Dict[str, Any]:
        data = {self.kind.subject_key: self.subject_id}
        if self.kind.maintenance_type is not None:
            data["maintenance_type"] = self.kind.maintenance_type.value
        return data

    def to_notification(self) -> NotificationCreate:
        return NotificationCreate(
            user_id=self.user_id,
            title=self.title,
            body=self.body,
            type=self.kind.notification_type,
            data=self.payload,
        )


@dataclass(frozen=True)
class ReminderRule:
    kind: ReminderKind
    source: RecordSource
    is_due: Callable[[Any, datetime], bool]
    render: Callable[[Any], Tuple[str, str]]
    description: str = ""


def format_date(value: datetime) -> str:
    """M/D/YYYY, e.g. 3/7/2027."""
    return f"{value.month}/{value.day}/{value.year}"


def format_mileage(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _render_document_expiry(doc: DocumentRecord) -> Tuple[str, str]:
    return (
        "Document Expiry Reminder",
        f"Your {doc.category} document will expire on {format_date(doc.expiry_date)}",
    )


def _render_oil_change(car: CarRecord) -> Tuple[str, str]:
    return (
        "Maintenance Reminder",
        f"It's time for an oil change for your {car.brand} {car.model}",
    )


def _render_general_maintenance(car: CarRecord) -> Tuple[str, str]:
    return (
        "Maintenance Reminder",
        f"Your {car.brand} {car.model} has reached {format_mileage(car.mileage)}km. "
        "Consider scheduling a maintenance check.",
    )


def build_rules(settings: Settings) -> List[ReminderRule]:
    """Rule table, in evaluation order, using the configured thresholds."""
    expiry_window = timedelta(days=settings.DOCUMENT_EXPIRY_WINDOW_DAYS)
    oil_interval = timedelta(days=settings.OIL_CHANGE_INTERVAL_DAYS)
    mileage_threshold = settings.MAINTENANCE_MILEAGE_THRESHOLD

    return [
        ReminderRule(
            kind=ReminderKind.DOCUMENT_EXPIRY,
            source=RecordSource.DOCUMENTS,
            is_due=lambda doc, now: (
                doc.expiry_date is not None and doc.expiry_date <= now + expiry_window
            ),
            render=_render_document_expiry,
            description=f"expires within {settings.DOCUMENT_EXPIRY_WINDOW_DAYS} days",
        ),
        ReminderRule(
            kind=ReminderKind.MAINTENANCE_OIL_CHANGE,
            source=RecordSource.CARS,
            is_due=lambda car, now: (
                car.last_oil_change_date is not None
                and now >= car.last_oil_change_date + oil_interval
            ),
            render=_render_oil_change,
            description=f"oil changed more than {settings.OIL_CHANGE_INTERVAL_DAYS} days ago",
        ),
        ReminderRule(
            kind=ReminderKind.MAINTENANCE_GENERAL,
            source=RecordSource.CARS,
            is_due=lambda car, now: (
                car.mileage is not None and car.mileage >= mileage_threshold
            ),
            render=_render_general_maintenance,
            description=f"mileage at or above {format_mileage(mileage_threshold)}",
        ),
    ]


def evaluate(
    rules: List[ReminderRule],
    source: RecordSource,
    record: Any,
    now: datetime
) -> List[ReminderCandidate]:
    """Candidates for every rule of ``source`` that fires on ``record``."""
    candidates = []
    for rule in rules:
        if rule.source is not source or not rule.is_due(record, now):
            continue
        title, body = rule.render(record)
        candidates.append(ReminderCandidate(
            kind=rule.kind,
            user_id=record.user_id,
            subject_id=record.id,
            title=title,
            body=body,
            reason=rule.description,
        ))
    return candidates
