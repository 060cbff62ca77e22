"""Converts hotspots into a chronologically sorted list of show / hide changes."""

import logging

from . import hotspot_types

from typing import Sequence


def _defined_bound(hotspot: hotspot_types.Marker, attr: str) -> float | None:
    value = getattr(hotspot, attr, None)
    # Negative bounds (and NaN) mean the bound is unresolved.
    if value is None or not value >= 0:
        return None
    return value


def build_changes(
    hotspots: Sequence[hotspot_types.MarkerT] | None,
) -> list[hotspot_types.HotspotChange[hotspot_types.MarkerT]]:
    """Returns one change per defined bound, sorted by time.

    Ties keep their construction order (start before end for the same hotspot,
    and input order across hotspots). Hotspots without any defined bound do not
    contribute changes, and are never shown.
    """
    changes: list[hotspot_types.HotspotChange[hotspot_types.MarkerT]] = []
    for hotspot in hotspots or []:
        start = _defined_bound(hotspot, "start_time")
        if start is not None:
            changes.append(
                hotspot_types.HotspotChange(
                    time=start, type=hotspot_types.ChangeType.SHOW, hotspot=hotspot
                )
            )
        end = _defined_bound(hotspot, "end_time")
        if end is not None:
            changes.append(
                hotspot_types.HotspotChange(
                    time=end, type=hotspot_types.ChangeType.HIDE, hotspot=hotspot
                )
            )

    # Python's sort is stable.
    changes = sorted(changes, key=lambda x: x.time)
    logging.debug(f"Tracking {len(changes)} changes")
    return changes
