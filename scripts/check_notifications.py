"""
Run the reminder scan once, without going through HTTP.

Meant for cron. Reads SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY from the
environment or a .env file.

Usage:
    python scripts/check_notifications.py [--dry-run] [--lookback-days N] [--skip-invalid]
"""

import sys
import json
import asyncio
import argparse
from pathlib import Path
from datetime import timedelta

# Agregar el directorio raíz al path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Cargar variables de entorno desde .env
from dotenv import load_dotenv
load_dotenv()

from app.core.config import get_settings
from app.core.exceptions import GloveboxException
from app.core.logging import configure_logging
from app.core.supabase import ReminderStore
from app.services.notification_scanner import NotificationScanner


async def run_scan(dry_run: bool = False, lookback_days: int = None, skip_invalid: bool = False):
    settings = get_settings()
    store = ReminderStore.from_settings(settings)
    scanner = NotificationScanner(
        store,
        lookback=timedelta(days=lookback_days) if lookback_days else None,
        invalid_record_policy="skip" if skip_invalid else None,
        dry_run=dry_run,
        settings=settings,
    )
    return await scanner.run()


async def main():
    parser = argparse.ArgumentParser(
        description="Scan documents and cars and record pending reminders"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Evaluate and deduplicate without inserting notifications"
    )
    parser.add_argument(
        "--lookback-days",
        type=int,
        default=None,
        help="Dedup window in days (default: NOTIFICATION_LOOKBACK_DAYS)"
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip malformed records instead of aborting"
    )

    args = parser.parse_args()
    configure_logging()

    try:
        result = await run_scan(args.dry_run, args.lookback_days, args.skip_invalid)
    except GloveboxException as e:
        print(json.dumps({"error": e.detail}))
        sys.exit(1)

    print(json.dumps(result.model_dump()))


if __name__ == "__main__":
    asyncio.run(main())
