import dataclasses
import unittest

from . import hotspot_types
from . import timeline_builder


@dataclasses.dataclass(eq=False)
class _Marker:
    name: str
    start_time: float | None = None
    end_time: float | None = None


class _NoBounds:
    """Marker without the time attributes at all."""


_SHOW = hotspot_types.ChangeType.SHOW
_HIDE = hotspot_types.ChangeType.HIDE


def _summary(changes) -> list[tuple[float, hotspot_types.ChangeType, str]]:
    return [(c.time, c.type, c.hotspot.name) for c in changes]


class TestTimelineBuilder(unittest.TestCase):
    def test_sorted_by_time(self):
        a = _Marker("a", 10, 20)
        b = _Marker("b", 0, 15)
        changes = timeline_builder.build_changes([a, b])
        self.assertEqual(
            _summary(changes),
            [(0, _SHOW, "b"), (10, _SHOW, "a"), (15, _HIDE, "b"), (20, _HIDE, "a")],
        )
        self.assertIs(changes[0].hotspot, b)

    def test_unresolved_bounds_skipped(self):
        changes = timeline_builder.build_changes(
            [
                _Marker("no_end", 5, None),
                _Marker("no_start", None, 7),
                _Marker("negative", -1, -1),
                _Marker("none"),
                _Marker("nan", float("nan"), 3),
            ]
        )
        self.assertEqual(
            _summary(changes),
            [(3, _HIDE, "nan"), (5, _SHOW, "no_end"), (7, _HIDE, "no_start")],
        )

    def test_missing_attributes(self):
        self.assertEqual(timeline_builder.build_changes([_NoBounds()]), [])  # type: ignore

    def test_zero_is_defined(self):
        changes = timeline_builder.build_changes([_Marker("a", 0, 0)])
        self.assertEqual(_summary(changes), [(0, _SHOW, "a"), (0, _HIDE, "a")])

    def test_ties_are_stable(self):
        a = _Marker("a", 10, 30)
        b = _Marker("b", 0, 10)
        c = _Marker("c", 10, 20)
        changes = timeline_builder.build_changes([a, b, c])
        self.assertEqual(
            _summary(changes),
            [
                (0, _SHOW, "b"),
                (10, _SHOW, "a"),
                (10, _HIDE, "b"),
                (10, _SHOW, "c"),
                (20, _HIDE, "c"),
                (30, _HIDE, "a"),
            ],
        )

    def test_empty(self):
        self.assertEqual(timeline_builder.build_changes([]), [])
        self.assertEqual(timeline_builder.build_changes(None), [])
