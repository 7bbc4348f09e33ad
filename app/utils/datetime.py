"""Timestamps in the configured application timezone."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

FALLBACK_TIMEZONE: Final[str] = "Asia/Kolkata"

# ``UTC+05:30``, ``GMT-3`` or ``IST+0530``; the prefix is only a label.
_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT|IST)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def _offset_timezone(name: str) -> tzinfo | None:
    match = _UTC_OFFSET.match(name)
    if match is None:
        return None
    offset = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"] or 0))
    return timezone(-offset if match["sign"] == "-" else offset)


def _resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return _offset_timezone(name) or ZoneInfo(FALLBACK_TIMEZONE)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone named by ``APP_TIMEZONE``, or ``Asia/Kolkata``."""

    return _resolve_timezone(get_settings().app_timezone.strip() or FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Current time, used for every stored ``created_at`` and ``updated_at``."""

    return datetime.now(tz=get_app_timezone())
