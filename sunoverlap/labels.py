"""
Clock labels for segment boundaries.

Converts UTC minutes to "HH:MM" strings, and UTC instants to local wall
clock time using the IANA timezone database. Offsets come straight from the
database in signed minutes, so half- and quarter-hour zones (UTC+5:30,
UTC+5:45, UTC+9:30) and DST are handled without parsing offset strings.
"""

from datetime import date, datetime, time, timedelta

import pytz

from .types import MINUTES_PER_DAY, OverlapSegment


def minutes_to_clock(minutes: int) -> str:
    """Format minutes as "HH:MM", wrapping any integer into [0, 1440)."""
    minutes = ((minutes % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def clock_to_minutes(clock: str) -> int:
    """Parse "HH:MM" to minutes since midnight."""
    parts = clock.split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid clock format: {clock!r}")
    hour, minute = int(parts[0]), int(parts[1])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid clock time: {clock!r}")
    return hour * 60 + minute


def minute_to_utc_datetime(day: date, minute: int) -> datetime:
    """UTC instant for a minute on the continuous timeline anchored at `day`."""
    midnight = datetime.combine(day, time(0, 0), tzinfo=pytz.UTC)
    return midnight + timedelta(minutes=minute)


def _get_timezone(timezone_id: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(timezone_id)
    except pytz.UnknownTimeZoneError as e:
        raise ValueError(f"Unknown timezone: {timezone_id}") from e


def _as_utc(utc_instant: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if utc_instant.tzinfo is None:
        return pytz.UTC.localize(utc_instant)
    return utc_instant.astimezone(pytz.UTC)


def utc_offset_minutes(timezone_id: str, utc_instant: datetime) -> int:
    """
    Signed UTC offset of a timezone at a given instant.

    Args:
        timezone_id: IANA timezone name (e.g., "Asia/Kolkata")
        utc_instant: Instant to evaluate (for DST); naive means UTC

    Returns:
        Offset in minutes (e.g., 330 for IST, -420 for PDT)
    """
    local = _as_utc(utc_instant).astimezone(_get_timezone(timezone_id))
    return int(local.utcoffset().total_seconds() // 60)


def to_local_clock(utc_instant: datetime, timezone_id: str) -> str:
    """Local wall-clock "HH:MM" for a UTC instant."""
    local = _as_utc(utc_instant).astimezone(_get_timezone(timezone_id))
    return f"{local.hour:02d}:{local.minute:02d}"


def local_segment_labels(day: date, segment: OverlapSegment, timezone_id: str) -> tuple[str, str]:
    """Local "HH:MM" labels for a segment's start and end."""
    start = minute_to_utc_datetime(day, segment.start_utc_minute)
    end = minute_to_utc_datetime(day, segment.end_utc_minute)
    return to_local_clock(start, timezone_id), to_local_clock(end, timezone_id)
