"""
Daylight/night overlap for a pair of locations on one UTC date.

Pipeline per request:
1. Solar events for the day before, the day, and the day after (per location)
2. Continuous daylight/night timelines (per location)
3. Overlap/merge for daylight, then for night
4. Requested-date events and local labels for display
"""

import logging
from datetime import date, datetime, timedelta, timezone
from functools import lru_cache

from .intervals import build_continuous_intervals
from .labels import minute_to_utc_datetime, to_local_clock
from .overlap import find_overlap
from .solar_math import solar_event
from .types import (
    GeoPoint,
    Location,
    LocationDaylight,
    OverlapReport,
    SolarEvent,
)

logger = logging.getLogger(__name__)

WINDOW_UTC_LABEL = "00:00–24:00"

# Results are a pure function of (lat, lon, date), so they never go stale
SOLAR_EVENT_CACHE_SIZE = 4096


@lru_cache(maxsize=SOLAR_EVENT_CACHE_SIZE)
def _cached_solar_event(latitude: float, longitude: float, day: date) -> SolarEvent:
    return solar_event(latitude, longitude, day)


def resolve_date(value: date | datetime | str | None = None) -> date:
    """
    Normalize the requested date.

    Args:
        value: date, datetime (its UTC date is used), "YYYY-MM-DD" string,
            or None for today in UTC

    Returns:
        Calendar date

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if value is None:
        return datetime.now(timezone.utc).date()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"Invalid date '{value}': expected YYYY-MM-DD") from e


class DaylightOverlapCalculator:
    """
    Compare daylight and night between two locations.

    Stateless apart from the solar event cache; safe to share across threads.
    """

    def events_around(self, point: GeoPoint, day: date) -> tuple[SolarEvent, SolarEvent, SolarEvent]:
        """Solar events for day - 1, day, day + 1."""
        return tuple(
            _cached_solar_event(point.latitude, point.longitude, day + timedelta(days=offset))
            for offset in (-1, 0, 1)
        )

    def describe(self, location: Location, day: date, event: SolarEvent) -> LocationDaylight:
        """Requested-date event with local sunrise/sunset labels when possible."""
        if location.timezone is None or event.is_polar:
            return LocationDaylight(location=location, solar_event=event)

        return LocationDaylight(
            location=location,
            solar_event=event,
            sunrise_local=to_local_clock(
                minute_to_utc_datetime(day, event.sunrise_utc_minutes), location.timezone
            ),
            sunset_local=to_local_clock(
                minute_to_utc_datetime(day, event.sunset_utc_minutes), location.timezone
            ),
        )

    def compare(
        self,
        origin: Location,
        destination: Location,
        day: date | datetime | str | None = None,
    ) -> OverlapReport:
        """
        Find shared daylight and shared night for two locations.

        Args:
            origin: First location
            destination: Second location
            day: Requested UTC date (see resolve_date)

        Returns:
            OverlapReport for the requested day's UTC window
        """
        requested = resolve_date(day)

        origin_events = self.events_around(origin.point, requested)
        destination_events = self.events_around(destination.point, requested)

        origin_timeline = build_continuous_intervals(*origin_events)
        destination_timeline = build_continuous_intervals(*destination_events)

        daylight = find_overlap(origin_timeline.daylight, destination_timeline.daylight)
        night = find_overlap(origin_timeline.night, destination_timeline.night)

        logger.debug(
            "Overlap on %s: daylight %d min in %d segment(s), night %d min in %d segment(s)",
            requested,
            daylight.total_minutes,
            len(daylight.segments),
            night.total_minutes,
            len(night.segments),
        )

        notes = []
        for role, location, events in (
            ("origin", origin, origin_events),
            ("destination", destination, destination_events),
        ):
            event = events[1]
            if event.is_polar:
                label = location.name or role
                notes.append(f"{event.sunrise_utc} at {label} on {requested.isoformat()}")

        return OverlapReport(
            date_utc=requested,
            window_utc=WINDOW_UTC_LABEL,
            origin=self.describe(origin, requested, origin_events[1]),
            destination=self.describe(destination, requested, destination_events[1]),
            daylight=daylight,
            night=night,
            notes=notes,
        )


def compare_locations(
    origin: Location,
    destination: Location,
    day: date | datetime | str | None = None,
) -> OverlapReport:
    """Convenience wrapper around DaylightOverlapCalculator.compare."""
    return DaylightOverlapCalculator().compare(origin, destination, day)
