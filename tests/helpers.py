"""
Test helper functions for interval and overlap validation.

These functions can be imported by test modules for result analysis.
"""

import sys
from datetime import date
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sunoverlap.types import MINUTES_PER_DAY, DayIntervals, Interval, OverlapResult

# Reference dates
MARCH_EQUINOX_2025 = date(2025, 3, 20)
JUNE_SOLSTICE_2025 = date(2025, 6, 21)
DECEMBER_SOLSTICE_2025 = date(2025, 12, 21)


def total_minutes(intervals: tuple[Interval, ...] | list[Interval]) -> int:
    """Sum of interval lengths."""
    return sum(interval.minutes for interval in intervals)


def assert_partitions_day(day: DayIntervals) -> None:
    """
    Assert daylight and night cover [0, 1440) exactly once.

    Checks total length and that the sorted pieces tile the day with no
    gaps or overlaps.
    """
    pieces = sorted(list(day.daylight) + list(day.night))

    assert total_minutes(pieces) == MINUTES_PER_DAY, (
        f"Daylight + night should be {MINUTES_PER_DAY} min, got {total_minutes(pieces)}"
    )
    assert pieces[0].start == 0, f"First piece should start at 0, got {pieces[0]}"
    assert pieces[-1].end == MINUTES_PER_DAY, f"Last piece should end at 1440, got {pieces[-1]}"

    for previous, current in zip(pieces, pieces[1:]):
        assert previous.end == current.start, f"Gap or overlap between {previous} and {current}"


def assert_well_formed(result: OverlapResult) -> None:
    """
    Assert the merge invariants of an OverlapResult.

    - Segments inside [0, 1440), each with positive length
    - Strictly separated: segments[i].end < segments[i + 1].start
    - total_minutes equals the sum of segment lengths
    - overlap flag matches whether any segment exists
    """
    for segment in result.segments:
        assert 0 <= segment.start_utc_minute < segment.end_utc_minute <= MINUTES_PER_DAY
        assert segment.minutes == segment.end_utc_minute - segment.start_utc_minute

    for previous, current in zip(result.segments, result.segments[1:]):
        assert previous.end_utc_minute < current.start_utc_minute, (
            f"Segments should not touch or overlap: {previous} / {current}"
        )

    assert result.total_minutes == sum(s.minutes for s in result.segments)
    assert result.overlap == (len(result.segments) > 0)
