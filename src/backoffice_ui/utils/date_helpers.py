"""
Date conversions between backend instants and form wall-clock values.

The backend stores absolute ISO-8601 instants. Forms edit a zone-less
``YYYY-MM-DDTHH:mm`` value that the user reads as local time, so both
directions correct for the UTC offset of the display zone. Passing
``tz=None`` means the system's local zone.
"""

from datetime import datetime, timezone, tzinfo

DISPLAY_FORMAT = "%Y-%m-%dT%H:%M"


def parse_instant(value: str | None, tz: tzinfo | None = None) -> datetime | None:
    """
    Parse an ISO-8601 string into an aware datetime.

    Date-only values are midnight UTC and values with a time but no offset are
    wall-clock time in ``tz``, which is how the browser reads them.

    Args:
        value: ISO string such as ``2024-03-15T10:00:00.000Z``.
        tz: Zone for offset-less date-times; None for the local zone.

    Returns:
        Aware datetime, or None when the value is empty or unparsable.
    """
    if value:
        value = value.strip()
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is not None:
        return parsed
    if len(value) == 10:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.replace(tzinfo=tz) if tz else parsed.astimezone()


def format_display_date(value: str, tz: tzinfo | None = None) -> str:
    """
    Convert an ISO instant to the ``YYYY-MM-DDTHH:mm`` form value.

    Raises:
        ValueError: If the value is not an ISO-8601 date.
    """
    instant = parse_instant(value, tz)
    if instant is None:
        raise ValueError(f"Invalid ISO date: {value!r}")
    return instant.astimezone(tz).strftime(DISPLAY_FORMAT)


def map_date_to_iso(value: str, tz: tzinfo | None = None) -> str:
    """
    Convert a ``YYYY-MM-DDTHH:mm`` wall-clock value to a UTC ISO instant.

    The output uses millisecond precision and a ``Z`` suffix so that
    ``map_date_to_iso(format_display_date(x)) == x`` for minute-aligned x.

    Raises:
        ValueError: If the value is not a date-time.
    """
    local = datetime.fromisoformat(value.strip())
    if local.tzinfo is None:
        local = local.replace(tzinfo=tz) if tz else local.astimezone()
    instant = local.astimezone(timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


def format_display_day(value: str | None) -> str:
    """Return the ``YYYY-MM-DD`` prefix used by date-only form inputs."""
    return (value or "")[:10]
