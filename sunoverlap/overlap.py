"""
Overlap and merge engine.

Intersects two locations' continuous interval sets (same phase), keeps the
parts inside the requested day's window [0, 1440), and merges the result
into a minimal ordered list of disjoint segments.
"""

from collections.abc import Iterable, Sequence

from .types import MINUTES_PER_DAY, Interval, OverlapResult, OverlapSegment

# Requested day on the continuous timeline
DAY_WINDOW = (0, MINUTES_PER_DAY)


def intersect(intervals_a: Iterable[Interval], intervals_b: Iterable[Interval]) -> list[tuple[int, int]]:
    """
    Pairwise intersection of two interval sets.

    Returns:
        (start, end) pairs with end > start, in input order
    """
    intervals_b = list(intervals_b)
    pairs = []
    for a in intervals_a:
        for b in intervals_b:
            start = max(a.start, b.start)
            end = min(a.end, b.end)
            if end > start:
                pairs.append((start, end))
    return pairs


def clip_to_day_window(start: int, end: int) -> tuple[int, int] | None:
    """Intersect [start, end) with [0, 1440); None if nothing is left."""
    window_start, window_end = DAY_WINDOW
    clipped_start = max(start, window_start)
    clipped_end = min(end, window_end)
    if clipped_end <= clipped_start:
        return None
    return (clipped_start, clipped_end)


def merge_segments(pairs: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """
    Merge overlapping or touching (start, end) pairs.

    Touching segments ([a, b) and [b, c)) are merged. The input is not
    modified; the result is sorted and strictly separated.
    """
    if not pairs:
        return []

    ordered = sorted(pairs)
    merged = []
    current_start, current_end = ordered[0]
    for start, end in ordered[1:]:
        if start <= current_end:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def find_overlap(intervals_a: Iterable[Interval], intervals_b: Iterable[Interval]) -> OverlapResult:
    """
    Find every span of the requested day covered by both interval sets.

    Intervals that spill in from the previous or next day on the continuous
    timeline contribute the part that falls inside [0, 1440).

    Args:
        intervals_a: Continuous daylight (or night) intervals for location A
        intervals_b: Same phase for location B

    Returns:
        OverlapResult with merged segments sorted by start
    """
    clipped = []
    for start, end in intersect(intervals_a, intervals_b):
        segment = clip_to_day_window(start, end)
        if segment is not None:
            clipped.append(segment)

    merged = merge_segments(clipped)
    if not merged:
        return OverlapResult.empty()

    segments = tuple(OverlapSegment(start, end, end - start) for start, end in merged)
    return OverlapResult(
        overlap=True,
        total_minutes=sum(segment.minutes for segment in segments),
        segments=segments,
    )
