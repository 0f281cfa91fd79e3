"""
Glovebox API - Check Notifications Route
Trigger for the scheduled reminder scan
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
import structlog

from app.core.config import get_settings
from app.core.cors import cors_headers
from app.core.supabase import ReminderStore
from app.core.exceptions import GloveboxException, ScanError
from app.schemas import CheckNotificationsResponse
from app.services.notification_scanner import NotificationScanner

router = APIRouter(prefix="/check-notifications", tags=["Notifications"])

logger = structlog.get_logger()

SUCCESS_MESSAGE = "Notifications checked and sent successfully"


def get_reminder_store() -> ReminderStore:
    """Fresh store handle per invocation; fails before any data access if unconfigured."""
    return ReminderStore.from_settings(get_settings())


@router.options("")
async def preflight(request: Request):
    """CORS preflight."""
    return PlainTextResponse("ok", headers=cors_headers(request.headers.get("origin")))


@router.api_route(
    "",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    response_model=CheckNotificationsResponse
)
async def check_notifications(
    request: Request,
    response: Response,
    store: ReminderStore = Depends(get_reminder_store)
):
    """
    Scan all users and record document expiry and maintenance reminders.

    Any method other than OPTIONS triggers the scan; the request body is
    ignored. The first failure aborts the scan and is returned as
    ``{"error": ...}`` with status 400.
    """
    try:
        result = await NotificationScanner(store).run()
    except GloveboxException:
        raise
    except Exception as e:
        logger.exception("notification_scan_failed")
        raise ScanError(str(e))

    response.headers.update(cors_headers(request.headers.get("origin")))
    return CheckNotificationsResponse(
        message=SUCCESS_MESSAGE,
        notified_count=result.notified_count
    )
