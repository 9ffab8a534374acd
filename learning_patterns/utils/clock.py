"""Clock utility for testability."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time. Override in tests."""
    return datetime.now(UTC)


def to_iso(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix for UTC."""
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(utc_now())
