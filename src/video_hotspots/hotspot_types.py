import dataclasses
import enum

from typing import Generic, Protocol, TypeVar


class ChangeType(enum.Enum):
    SHOW = "show"
    HIDE = "hide"


# Anything with optional start_time / end_time can be tracked.
# Missing attributes are treated the same as None.
class Marker(Protocol):
    start_time: float | None
    end_time: float | None


MarkerT = TypeVar("MarkerT", bound=Marker)


@dataclasses.dataclass(frozen=True)
class HotspotChange(Generic[MarkerT]):
    """A single show or hide transition, derived from one bound of a hotspot."""

    time: float
    type: ChangeType
    hotspot: MarkerT


@dataclasses.dataclass
class HotspotsDelta(Generic[MarkerT]):
    # Hotspots that became visible.
    show: list[MarkerT] = dataclasses.field(default_factory=list)
    # Hotspots that were visible before and are not anymore.
    hide: list[MarkerT] = dataclasses.field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.show and not self.hide


@dataclasses.dataclass
class UpdateResult(Generic[MarkerT]):
    """Returned by HotspotsEngine.update_time(). Exactly one field is set."""

    snapshot: list[MarkerT] | None = None
    delta: HotspotsDelta[MarkerT] | None = None

    @classmethod
    def of_snapshot(cls, snapshot: list[MarkerT]) -> "UpdateResult[MarkerT]":
        return cls(snapshot=snapshot)

    @classmethod
    def of_delta(cls, delta: HotspotsDelta[MarkerT]) -> "UpdateResult[MarkerT]":
        return cls(delta=delta)

    @property
    def is_snapshot(self) -> bool:
        return self.snapshot is not None
