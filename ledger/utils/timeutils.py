"""Timestamp helpers. Everything the ledger stores or compares is UTC."""

from datetime import date, datetime, time, timezone


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value) -> datetime | None:
    """Best-effort conversion to an aware UTC datetime.

    Accepts datetimes, dates (midnight UTC) and ISO 8601 strings, including a
    trailing ``Z``. Returns None for anything else instead of raising, so
    malformed historical data never breaks browsing.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        return None
