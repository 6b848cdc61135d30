"""
Tests for clock labels and timezone offsets.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest
import pytz

sys.path.insert(0, str(Path(__file__).parent.parent))

from sunoverlap.labels import (
    clock_to_minutes,
    local_segment_labels,
    minute_to_utc_datetime,
    minutes_to_clock,
    to_local_clock,
    utc_offset_minutes,
)
from sunoverlap.types import OverlapSegment


class TestMinutesToClock:
    """UTC minute -> "HH:MM"."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, "00:00"),
            (89, "01:29"),
            (1439, "23:59"),
            (1440, "00:00"),
            (1500, "01:00"),
            (-1, "23:59"),
            (-180, "21:00"),
            (-1441, "23:59"),
            (2879, "23:59"),
        ],
    )
    def test_wraps_into_day(self, minutes, expected):
        assert minutes_to_clock(minutes) == expected

    def test_clock_round_trip_for_every_hour(self):
        for hour in range(24):
            label = f"{hour:02d}:30"
            assert minutes_to_clock(clock_to_minutes(label)) == label


class TestClockToMinutes:
    """"HH:MM" -> minutes since midnight."""

    def test_parses(self):
        assert clock_to_minutes("06:54") == 414

    @pytest.mark.parametrize("clock", ["24:00", "12:60", "6:5:0", "ab:cd", "", "No sunrise"])
    def test_rejects_invalid(self, clock):
        with pytest.raises(ValueError):
            clock_to_minutes(clock)


class TestMinuteToUtcDatetime:
    """Continuous-timeline minute -> UTC instant."""

    def test_negative_minute_is_previous_day(self):
        instant = minute_to_utc_datetime(date(2025, 6, 21), -60)
        assert instant == datetime(2025, 6, 20, 23, 0, tzinfo=pytz.UTC)

    def test_minute_past_window_is_next_day(self):
        instant = minute_to_utc_datetime(date(2025, 12, 31), 1440 + 90)
        assert instant == datetime(2026, 1, 1, 1, 30, tzinfo=pytz.UTC)


class TestUtcOffsetMinutes:
    """Structured offsets from the timezone database."""

    @pytest.mark.parametrize(
        "tz_name,instant,expected",
        [
            ("UTC", datetime(2025, 6, 21, 12, 0), 0),
            ("Asia/Dubai", datetime(2025, 6, 21, 12, 0), 240),
            ("Asia/Kolkata", datetime(2025, 6, 21, 12, 0), 330),
            ("Asia/Kathmandu", datetime(2025, 6, 21, 12, 0), 345),
            ("Australia/Darwin", datetime(2025, 6, 21, 12, 0), 570),
            ("Australia/Adelaide", datetime(2025, 1, 15, 12, 0), 630),
            ("Australia/Adelaide", datetime(2025, 7, 15, 12, 0), 570),
            ("America/Los_Angeles", datetime(2025, 1, 15, 12, 0), -480),
            ("America/Los_Angeles", datetime(2025, 7, 15, 12, 0), -420),
            ("America/St_Johns", datetime(2025, 1, 15, 12, 0), -210),
        ],
    )
    def test_offsets(self, tz_name, instant, expected):
        assert utc_offset_minutes(tz_name, instant) == expected

    def test_offset_changes_at_dst_transition(self):
        """Europe/London springs forward at 01:00 UTC on 2025-03-30."""
        before = datetime(2025, 3, 30, 0, 59, tzinfo=pytz.UTC)
        after = datetime(2025, 3, 30, 1, 0, tzinfo=pytz.UTC)

        assert utc_offset_minutes("Europe/London", before) == 0
        assert utc_offset_minutes("Europe/London", after) == 60

    def test_aware_non_utc_instant_is_converted(self):
        dubai_noon = pytz.timezone("Asia/Dubai").localize(datetime(2025, 6, 21, 12, 0))
        assert utc_offset_minutes("Asia/Kolkata", dubai_noon) == 330

    def test_unknown_timezone_raises_value_error(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            utc_offset_minutes("Mars/Olympus_Mons", datetime(2025, 1, 1))


class TestToLocalClock:
    """UTC instant -> local wall clock."""

    def test_naive_instant_is_utc(self):
        assert to_local_clock(datetime(2025, 6, 21, 1, 29), "Asia/Dubai") == "05:29"

    def test_half_hour_zone(self):
        assert to_local_clock(datetime(2025, 6, 21, 0, 0, tzinfo=pytz.UTC), "Asia/Kolkata") == "05:30"

    def test_crosses_local_midnight(self):
        assert to_local_clock(datetime(2025, 6, 21, 21, 0, tzinfo=pytz.UTC), "Australia/Sydney") == "07:00"

    def test_unknown_timezone(self):
        with pytest.raises(ValueError):
            to_local_clock(datetime(2025, 6, 21), "Not/AZone")


class TestLocalSegmentLabels:
    """Segment boundaries in a location's local time."""

    def test_dubai_labels(self):
        segment = OverlapSegment(89, 414, 325)
        assert local_segment_labels(date(2025, 6, 21), segment, "Asia/Dubai") == ("05:29", "10:54")

    def test_end_of_window(self):
        segment = OverlapSegment(1260, 1440, 180)
        assert local_segment_labels(date(2025, 6, 21), segment, "Australia/Sydney") == ("07:00", "10:00")
