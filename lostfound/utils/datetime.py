"""Helpers for working with UTC datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def now_utc_naive() -> datetime:
    """Return the current UTC time without attaching ``tzinfo``."""

    return now_utc().replace(tzinfo=None)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed as an aware UTC datetime.

    Naive values are assumed to already be in UTC, which is how every
    ``DateTime`` column of the schema stores them.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_utc_naive(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC but without ``tzinfo`` for storage."""

    localized = ensure_utc(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def isoformat_or_none(value: datetime | None) -> str | None:
    """Serialize ``value`` as an ISO-8601 UTC string."""

    normalized = ensure_utc(value)
    return normalized.isoformat() if normalized else None
