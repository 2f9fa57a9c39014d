"""Timestamps expressed in the configured application timezone."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from linkup.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone named by ``APP_TIMEZONE``; unknown names mean UTC."""

    name = (get_settings().app_timezone or "").strip()
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown APP_TIMEZONE %r, using UTC", name)
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current wall-clock time in the app timezone, as stored in ``DATETIME`` columns."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the app timezone.

    Naive values come from the store and are already app-local.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None
