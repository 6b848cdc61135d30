"""
Daylight and night interval construction.

A single day's sunrise/sunset pair becomes minute ranges inside [0, 1440).
Three consecutive days (yesterday, today, tomorrow) are then stitched onto
one continuous timeline so that spans crossing UTC midnight are kept whole.
"""

from .types import (
    MINUTES_PER_DAY,
    DayIntervals,
    Interval,
    PolarSentinel,
    SolarEvent,
    SolarTime,
)

# Minute offset of yesterday, today and tomorrow on the continuous timeline
DAY_OFFSETS = (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY)


def _span(start: int, end: int) -> list[Interval]:
    """Single-interval list, or empty if the range has no length."""
    if end > start:
        return [Interval(start, end)]
    return []


def build_day_intervals(sunrise: SolarTime, sunset: SolarTime) -> DayIntervals:
    """
    Split one UTC day into daylight and night intervals.

    Handles the case where daylight spans UTC midnight: sunrise is then
    numerically after sunset (e.g., sunrise 21:00, sunset 06:54 for Sydney
    in June), daylight is split into two pieces and night is the middle.

    Args:
        sunrise: Minutes since UTC midnight, or a polar sentinel
        sunset: Minutes since UTC midnight, or a polar sentinel

    Returns:
        DayIntervals covering [0, 1440) exactly
    """
    if sunrise is PolarSentinel.NO_SUNRISE or sunset is PolarSentinel.NO_SUNRISE:
        return DayIntervals(daylight=(), night=(Interval(0, MINUTES_PER_DAY),))
    if sunrise is PolarSentinel.NO_SUNSET or sunset is PolarSentinel.NO_SUNSET:
        return DayIntervals(daylight=(Interval(0, MINUTES_PER_DAY),), night=())

    if sunset > sunrise:
        return DayIntervals(
            daylight=tuple(_span(sunrise, sunset)),
            night=tuple(_span(0, sunrise) + _span(sunset, MINUTES_PER_DAY)),
        )

    # Daylight wraps past midnight
    return DayIntervals(
        daylight=tuple(_span(sunrise, MINUTES_PER_DAY) + _span(0, sunset)),
        night=tuple(_span(sunset, sunrise)),
    )


def build_event_intervals(event: SolarEvent) -> DayIntervals:
    """Day intervals for a SolarEvent."""
    return build_day_intervals(event.sunrise_utc_minutes, event.sunset_utc_minutes)


def build_continuous_intervals(
    day_before: SolarEvent, day: SolarEvent, day_after: SolarEvent
) -> DayIntervals:
    """
    Stitch three consecutive days onto one continuous timeline.

    Each day's intervals are shifted by its offset (-1440, 0, +1440) and
    concatenated in order. No merging happens here; adjacent pieces are
    combined after intersection by the overlap engine.

    Args:
        day_before: SolarEvent for the requested date minus one day
        day: SolarEvent for the requested date
        day_after: SolarEvent for the requested date plus one day

    Returns:
        DayIntervals spanning roughly [-1440, 2880)
    """
    daylight: list[Interval] = []
    night: list[Interval] = []

    for event, offset in zip((day_before, day, day_after), DAY_OFFSETS):
        base = build_event_intervals(event)
        daylight.extend(interval.shifted(offset) for interval in base.daylight)
        night.extend(interval.shifted(offset) for interval in base.night)

    return DayIntervals(daylight=tuple(daylight), night=tuple(night))

