"""Locates the last change at or before a given time.

This is done in two phases -
1. binary_search() to find a candidate index.
2. advance_past_ties() to move to the last of all changes sharing the exact time.
"""

from . import hotspot_types

from typing import Sequence


def binary_search(
    changes: Sequence[hotspot_types.HotspotChange], time: float
) -> int | None:
    """Returns an index of a change with the largest time <= `time`.

    Returns None if there are no changes, and -1 if `time` is before all changes.
    When several changes share the time, any one of them may be returned.
    """
    if not changes:
        return None

    if time < changes[0].time:
        return -1
    if time > changes[-1].time:
        return len(changes) - 1

    lo = 0
    hi = len(changes) - 1
    while lo <= hi:
        mid = (hi + lo + 1) // 2
        if time < changes[mid].time:
            hi = mid - 1
        elif time > changes[mid].time:
            lo = mid + 1
        else:
            return mid

    # Loop ends with hi == lo - 1, i.e. the last change before `time`.
    return min(lo, hi)


def advance_past_ties(
    changes: Sequence[hotspot_types.HotspotChange], index: int, time: float
) -> int:
    """Moves the index forward while the next change happens exactly at `time`."""
    while index < len(changes) - 1 and changes[index + 1].time == time:
        index += 1
    return index


def find_closest_last_index(
    changes: Sequence[hotspot_types.HotspotChange], time: float
) -> int:
    """Index of the last change with time <= `time`, or -1 if there is none."""
    index = binary_search(changes, time)
    if index is None:
        return -1
    return advance_past_ties(changes, index, time)
