from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_clock_time(value: str) -> time:
    """Parse a 24-hour ``HH:MM`` clock-in string.

    Raises ValidationError for anything else (``"8am"``, ``"25:00"``, ``""``).
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid time of day: {value!r} (expected HH:MM)")
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time of day: {value!r} (expected HH:MM)")


def normalize_clock_time(value: Any) -> str | None:
    """Canonical ``HH:MM`` string for an optional entry, or None when empty."""
    if value is None:
        return None
    if isinstance(value, time):
        return value.strftime("%H:%M")
    text = str(value).strip()
    if not text:
        return None
    return parse_clock_time(text).strftime("%H:%M")


def to_date(value: Any) -> date:
    """Normalize any accepted attendance date representation to a date.

    Accepted: ``date``, ``datetime``, ISO strings (``2025-01-31`` or
    ``2025-01-31T09:00:00Z``), timestamp objects exposing ``to_datetime()`` /
    ``ToDatetime()``, and ``{"seconds": ..., "nanoseconds": ...}`` mappings.

    ISO strings keep the date as written. Instants (timezone-aware datetimes,
    timestamps) are read in local time, like the period boundaries.
    """
    if isinstance(value, datetime):
        return value.astimezone().date() if value.tzinfo is not None else value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValidationError("Attendance date is required")
        try:
            return parse_iso_date(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValidationError(f"Invalid attendance date: {value!r}")

    for attr in ("to_datetime", "ToDatetime"):
        converter = getattr(value, attr, None)
        if callable(converter):
            return to_date(converter())

    if isinstance(value, dict) and "seconds" in value:
        seconds = float(value["seconds"]) + float(value.get("nanoseconds", 0)) / 1e9
        return datetime.fromtimestamp(seconds).date()

    raise ValidationError(f"Unsupported attendance date value: {type(value).__name__}")
