# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone


# =============================================================================
# Timestamp Utilities
# =============================================================================

def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """
    Format a datetime as ISO 8601 in UTC with millisecond precision.

    Naive datetimes are assumed to already be in UTC. The output matches
    what JSON clients expect from a JavaScript Date.

    Example:
        isoformat_utc(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        # "2024-01-15T10:30:00.000Z"
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_timestamp(value: datetime | None = None) -> str:
    """Format a datetime as `YYYY-MM-DD HH:MM:SS` in local time."""
    value = value or datetime.now()
    return value.strftime("%Y-%m-%d %H:%M:%S")
