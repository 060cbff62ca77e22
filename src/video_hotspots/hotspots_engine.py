"""Tracks which hotspots are visible as playback time advances.

Callers push the current time on every playback tick with update_time(), and get
back either a full snapshot of the visible hotspots, or a delta of what was
shown and hidden since the last call.

A snapshot is returned on the first call, after a seek, or when forced.
Otherwise a delta is returned, which is empty while the time stays between two
consecutive changes. Between changes, no search is done; only the time of the
next change is compared against.

Nothing here raises. Invalid states degrade to an empty snapshot or delta, since
this runs on every tick and must not interrupt playback.
"""

import dataclasses
import logging

from . import change_search
from . import hotspot_types
from . import hotspots_config
from . import timeline_builder

from typing import Generic, Sequence

_ChangesT = Sequence[hotspot_types.HotspotChange[hotspot_types.MarkerT]]


@dataclasses.dataclass(frozen=True)
class Cursor:
    """Where the engine is on the timeline. Replaced, never mutated."""

    initialized: bool = False
    # Time of the change last handled (0 if handled before the first change).
    last_handled_time: float | None = None
    # Index of the last handled change, inclusive. May be -1.
    last_handled_index: int | None = None
    # Time of the change following last_handled_index.
    # Reaching this time means there is work to do.
    next_time_to_handle: float | None = None


def create_snapshot(
    changes: _ChangesT[hotspot_types.MarkerT], target_index: int
) -> list[hotspot_types.MarkerT]:
    """Replays all changes up to target_index (inclusive) from scratch."""
    if target_index < 0 or not changes:
        logging.debug("Resulted with empty snapshot")
        return []

    # Keyed by id() since hotspots are compared by identity, and need not be
    # hashable. Insertion order is preserved.
    visible: dict[int, hotspot_types.MarkerT] = {}
    for change in changes[: target_index + 1]:
        key = id(change.hotspot)
        if change.type == hotspot_types.ChangeType.SHOW:
            if key not in visible:
                visible[key] = change.hotspot
        else:
            visible.pop(key, None)

    snapshot = list(visible.values())
    logging.debug(f"Resulted snapshot of {len(snapshot)} hotspots")
    return snapshot


def create_delta(
    changes: _ChangesT[hotspot_types.MarkerT],
    last_handled_index: int | None,
    target_index: int,
) -> hotspot_types.HotspotsDelta[hotspot_types.MarkerT]:
    """Replays changes in (last_handled_index, target_index]."""
    if not changes:
        logging.debug("Resulted with empty delta")
        return hotspot_types.HotspotsDelta()
    if last_handled_index is None:
        logging.warning("Invalid internal state, resulted with empty delta")
        return hotspot_types.HotspotsDelta()

    shown: dict[int, hotspot_types.MarkerT] = {}
    hidden: dict[int, hotspot_types.MarkerT] = {}
    for change in changes[last_handled_index + 1 : target_index + 1]:
        key = id(change.hotspot)
        if change.type == hotspot_types.ChangeType.SHOW:
            if key not in shown:
                shown[key] = change.hotspot
        elif key in shown:
            # Shown and hidden within the same window, the caller never saw it.
            logging.debug(
                f"Hotspot hidden at {change.time} before it was visible, dropped from show"
            )
            del shown[key]
        elif key not in hidden:
            hidden[key] = change.hotspot

    delta = hotspot_types.HotspotsDelta(
        show=list(shown.values()), hide=list(hidden.values())
    )
    logging.debug(f"Resulted delta: {len(delta.show)} show, {len(delta.hide)} hide")
    return delta


def advance_cursor(
    cursor: Cursor,
    changes: _ChangesT[hotspot_types.MarkerT],
    time: float,
    index: int,
) -> Cursor:
    """Returns the cursor after handling everything up to `index`."""
    if not changes:
        return cursor

    if index < 0:
        next_time = changes[0].time
    elif index >= len(changes) - 1:
        next_time = changes[-1].time
    else:
        next_time = changes[index + 1].time

    new_cursor = Cursor(
        initialized=True,
        last_handled_time=time,
        last_handled_index=index,
        next_time_to_handle=next_time,
    )
    logging.debug(f"Updated cursor: {new_cursor}")
    return new_cursor


class HotspotsEngine(Generic[hotspot_types.MarkerT]):
    def __init__(
        self,
        hotspots: Sequence[hotspot_types.MarkerT] | None,
        seek_threshold: float | None = None,
    ):
        if seek_threshold is None:
            seek_threshold = hotspots_config.seek_threshold()
        self._seek_threshold = seek_threshold
        # Never modified after this.
        self._changes = tuple(timeline_builder.build_changes(hotspots))
        self._cursor = Cursor()

    @property
    def changes(self) -> tuple[hotspot_types.HotspotChange[hotspot_types.MarkerT], ...]:
        return self._changes

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def reset(self) -> None:
        """Forget the playback position. The next update_time() returns a snapshot."""
        self._cursor = Cursor()

    def get_snapshot(self, time: float) -> list[hotspot_types.MarkerT]:
        """All hotspots visible at `time`. Does not affect update_time()."""
        index = change_search.find_closest_last_index(self._changes, time)
        logging.debug(f"Create snapshot based on time {time}, index {index}")
        return create_snapshot(self._changes, index)

    def _is_seek(self, current_time: float) -> bool:
        cursor = self._cursor
        if (
            not cursor.initialized
            or cursor.last_handled_time is None
            or cursor.next_time_to_handle is None
        ):
            return False
        return (
            cursor.last_handled_time > current_time
            or current_time - cursor.next_time_to_handle > self._seek_threshold
        )

    def _has_work(self, current_time: float) -> bool:
        cursor = self._cursor
        if not cursor.initialized:
            return True
        if (
            cursor.last_handled_time is not None
            and cursor.last_handled_time > current_time
        ):
            return True
        return (
            cursor.next_time_to_handle is not None
            and current_time >= cursor.next_time_to_handle
        )

    def update_time(
        self, current_time: float, force_snapshot: bool = False
    ) -> hotspot_types.UpdateResult[hotspot_types.MarkerT]:
        changes = self._changes

        if not changes:
            if not self._cursor.initialized:
                logging.info("Hotspots list empty, will always return empty snapshot")
                self._cursor = dataclasses.replace(self._cursor, initialized=True)
            return hotspot_types.UpdateResult.of_snapshot([])

        first_time = not self._cursor.initialized
        user_seeked = self._is_seek(current_time)
        has_work = self._has_work(current_time)
        closest_index = change_search.find_closest_last_index(changes, current_time)
        closest_time = 0 if closest_index < 0 else changes[closest_index].time

        if not has_work:
            if force_snapshot:
                return hotspot_types.UpdateResult.of_snapshot(
                    create_snapshot(changes, closest_index)
                )
            return hotspot_types.UpdateResult.of_delta(hotspot_types.HotspotsDelta())

        logging.debug(
            f"Has changes to handle at {current_time}: {closest_index=}, {closest_time=}, cursor={self._cursor}"
        )

        if first_time or force_snapshot or user_seeked:
            logging.debug(
                f"Returning snapshot: {first_time=}, {user_seeked=}, {force_snapshot=}"
            )
            snapshot = create_snapshot(changes, closest_index)
            self._cursor = advance_cursor(
                self._cursor, changes, closest_time, closest_index
            )
            return hotspot_types.UpdateResult.of_snapshot(snapshot)

        delta = create_delta(changes, self._cursor.last_handled_index, closest_index)
        self._cursor = advance_cursor(self._cursor, changes, closest_time, closest_index)
        return hotspot_types.UpdateResult.of_delta(delta)
