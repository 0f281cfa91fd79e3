"""
Glovebox API - Services Module
Reminder rules and the notification scan
"""

from app.services.reminder_rules import (
    ReminderKind,
    ReminderCandidate,
    ReminderRule,
    build_rules,
    evaluate,
)
from app.services.notification_scanner import NotificationScanner

__all__ = [
    "ReminderKind",
    "ReminderCandidate",
    "ReminderRule",
    "build_rules",
    "evaluate",
    "NotificationScanner",
]
