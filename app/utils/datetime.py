"""Timestamp helpers.

Timestamps live in the domain as aware datetimes in the configured
``APP_TIMEZONE``. SQLite ``DATETIME`` columns drop ``tzinfo``, so values are
written as naive local time and the zone is re-attached when read back.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_FIXED_OFFSET = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def resolve_timezone(name: str | None) -> tzinfo:
    """Turn an IANA name or a ``UTC+hh:mm`` style offset into a ``tzinfo``.

    Anything unrecognised resolves to UTC.
    """

    name = (name or "").strip()
    if not name:
        return timezone.utc

    match = _FIXED_OFFSET.match(name)
    if match:
        offset = timedelta(
            hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
        )
        return timezone(-offset if match.group("sign") == "-" else offset)

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def app_timezone() -> tzinfo:
    return resolve_timezone(get_settings().app_timezone)


def now_local() -> datetime:
    """Current time as an aware datetime in the application timezone."""

    return datetime.now(tz=app_timezone())


def now_for_storage() -> datetime:
    return now_local().replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Attach the application timezone to a stored (naive) value."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    """Convert ``value`` to naive application-local time for a column."""

    localized = from_storage(value)
    return localized.replace(tzinfo=None) if localized else None
