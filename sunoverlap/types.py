"""
Data structures for daylight/night overlap computation.

All values are immutable and created fresh per computation. Minutes are
UTC minutes measured from midnight of the requested date; the continuous
timeline extends one day either side, so values from -1440 to 2880 occur.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

MINUTES_PER_DAY = 24 * 60


class InvalidCoordinateError(ValueError):
    """Latitude or longitude outside the valid range."""


# =============================================================================
# Locations
# =============================================================================


@dataclass(frozen=True)
class GeoPoint:
    """A point on Earth in decimal degrees."""

    latitude: float  # [-90, 90], positive north
    longitude: float  # [-180, 180], positive east

    def __post_init__(self) -> None:
        validate_coordinates(self.latitude, self.longitude)


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise InvalidCoordinateError unless both values are finite and in range."""
    if not math.isfinite(latitude) or not -90 <= latitude <= 90:
        raise InvalidCoordinateError(f"Latitude must be -90 to 90, got {latitude}")
    if not math.isfinite(longitude) or not -180 <= longitude <= 180:
        raise InvalidCoordinateError(f"Longitude must be -180 to 180, got {longitude}")


@dataclass(frozen=True)
class Location:
    """Caller-supplied location. Only `point` is used for the solar math."""

    point: GeoPoint
    timezone: str | None = None  # IANA timezone (e.g., "Asia/Dubai")
    name: str | None = None


# =============================================================================
# Solar events
# =============================================================================


class PolarSentinel(Enum):
    """Marker for a day on which the sun never crosses the horizon."""

    NO_SUNRISE = "No sunrise"  # Polar night
    NO_SUNSET = "No sunset"  # Polar day


# Finite minute-of-day in [0, 1440), or a polar sentinel
SolarTime = int | PolarSentinel


@dataclass(frozen=True)
class SolarEvent:
    """Sunrise and sunset for one location on one UTC calendar date."""

    sunrise_utc_minutes: SolarTime
    sunset_utc_minutes: SolarTime
    daylight_minutes: int

    @property
    def is_polar(self) -> bool:
        return isinstance(self.sunrise_utc_minutes, PolarSentinel)

    @property
    def sunrise_utc(self) -> str:
        """Sunrise as "HH:MM" UTC, or the sentinel label."""
        return _solar_time_label(self.sunrise_utc_minutes)

    @property
    def sunset_utc(self) -> str:
        """Sunset as "HH:MM" UTC, or the sentinel label."""
        return _solar_time_label(self.sunset_utc_minutes)

    @property
    def daylight_hours(self) -> float:
        return self.daylight_minutes / 60


def _solar_time_label(value: SolarTime) -> str:
    if isinstance(value, PolarSentinel):
        return value.value
    return f"{value // 60:02d}:{value % 60:02d}"


# =============================================================================
# Intervals
# =============================================================================


@dataclass(frozen=True, order=True)
class Interval:
    """Half-open minute range [start, end) on the continuous timeline."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Interval end must be after start, got [{self.start}, {self.end})")

    @property
    def minutes(self) -> int:
        return self.end - self.start

    def shifted(self, offset: int) -> "Interval":
        """Return this interval moved by `offset` minutes."""
        return Interval(self.start + offset, self.end + offset)


@dataclass(frozen=True)
class DayIntervals:
    """Daylight and night intervals for one location."""

    daylight: tuple[Interval, ...] = ()
    night: tuple[Interval, ...] = ()


# =============================================================================
# Overlap results
# =============================================================================


@dataclass(frozen=True)
class OverlapSegment:
    """One merged span shared by both locations, inside [0, 1440)."""

    start_utc_minute: int
    end_utc_minute: int
    minutes: int

    @property
    def start_utc(self) -> str:
        return _solar_time_label(self.start_utc_minute % MINUTES_PER_DAY)

    @property
    def end_utc(self) -> str:
        # 1440 is the end of the day window and reads as "00:00"
        return _solar_time_label(self.end_utc_minute % MINUTES_PER_DAY)


@dataclass(frozen=True)
class OverlapResult:
    """Shared daylight (or night) for a location pair on the requested date."""

    overlap: bool
    total_minutes: int
    segments: tuple[OverlapSegment, ...] = ()

    @classmethod
    def empty(cls) -> "OverlapResult":
        return cls(overlap=False, total_minutes=0, segments=())


@dataclass(frozen=True)
class LocationDaylight:
    """Requested-date solar event for one location, for display and diagnostics."""

    location: Location
    solar_event: SolarEvent
    sunrise_local: str | None = None  # "HH:MM" in location.timezone, if known
    sunset_local: str | None = None


@dataclass(frozen=True)
class OverlapReport:
    """Full comparison of two locations for one UTC date."""

    date_utc: date
    window_utc: str
    origin: LocationDaylight
    destination: LocationDaylight
    daylight: OverlapResult
    night: OverlapResult
    notes: list[str] = field(default_factory=list)
