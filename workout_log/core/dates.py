"""Timestamp helpers: storage always holds UTC, the API speaks ISO-8601."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize to tz-aware UTC. Naive values (sqlite, client input) are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")
