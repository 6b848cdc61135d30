"""
Sunoverlap Daylight Comparison

Finds the UTC clock intervals that are daylight (or night) at two
locations at once, using the NOAA low-precision sunrise/sunset model.

Main entry point: DaylightOverlapCalculator
"""

from .calculator import DaylightOverlapCalculator, compare_locations, resolve_date
from .intervals import build_continuous_intervals, build_day_intervals
from .labels import minutes_to_clock, to_local_clock, utc_offset_minutes
from .overlap import find_overlap
from .solar_math import solar_event
from .types import (
    DayIntervals,
    GeoPoint,
    Interval,
    InvalidCoordinateError,
    Location,
    LocationDaylight,
    OverlapReport,
    OverlapResult,
    OverlapSegment,
    PolarSentinel,
    SolarEvent,
)

__all__ = [
    # Types
    "GeoPoint",
    "Location",
    "PolarSentinel",
    "SolarEvent",
    "Interval",
    "DayIntervals",
    "OverlapSegment",
    "OverlapResult",
    "LocationDaylight",
    "OverlapReport",
    "InvalidCoordinateError",
    # Core
    "solar_event",
    "build_day_intervals",
    "build_continuous_intervals",
    "find_overlap",
    # Labels
    "minutes_to_clock",
    "to_local_clock",
    "utc_offset_minutes",
    # Calculator
    "DaylightOverlapCalculator",
    "compare_locations",
    "resolve_date",
]
