"""Tests for the jump state machine against a recording host."""

from __future__ import annotations

import unittest
from pathlib import Path

from recording_host import DOC, RecordingHost

from lazyjump.errors import CapacityExceeded, UnknownPointName
from lazyjump.jump import JUMP_PROMPT, PointJumper
from lazyjump.points import Location, Point


class _FailingShowHost(RecordingHost):
    def __init__(self, fail_on_call: int, keys: list[str] | None = None) -> None:
        super().__init__(keys=keys)
        self.fail_on_call = fail_on_call
        self.show_calls = 0

    def show_document_at(self, location: Location) -> None:
        self.show_calls += 1
        if self.show_calls == self.fail_on_call:
            raise OSError("display went away")
        super().show_document_at(location)


def _jumper_with_points(count: int, keys: list[str] | None = None) -> tuple[PointJumper, RecordingHost]:
    host = RecordingHost(keys=keys)
    jumper = PointJumper(host, marker_style="\033[7m")
    jumper.clear()
    for offset in range(1, count):
        host.location = Location(DOC, offset * 10)
        jumper.save_current_point()
    host.calls.clear()
    return jumper, host


class SaveAndClearTests(unittest.TestCase):
    def test_clear_saves_point_at_cursor(self) -> None:
        host = RecordingHost()
        host.location = Location(DOC, 12)
        jumper = PointJumper(host)

        point = jumper.clear()

        self.assertEqual(point, Point("a", Location(DOC, 12)))
        self.assertEqual(jumper.registry.count(), 1)

    def test_save_raises_when_registry_full(self) -> None:
        jumper, _host = _jumper_with_points(36)
        with self.assertRaises(CapacityExceeded):
            jumper.save_current_point()
        self.assertEqual(jumper.registry.count(), 36)

    def test_status_text_shows_current_name_and_count(self) -> None:
        jumper, _host = _jumper_with_points(3)
        self.assertEqual(jumper.status_text(), " Pt[c/3]")
        self.assertEqual(PointJumper(RecordingHost()).status_text(), " Pt[-/0]")


class JumpTests(unittest.TestCase):
    def test_single_point_jump_is_a_no_op(self) -> None:
        jumper, host = _jumper_with_points(1)
        before = jumper.registry.current

        self.assertIsNone(jumper.jump())

        self.assertEqual(host.calls, [])
        self.assertEqual(jumper.registry.current, before)

    def test_jump_tiles_marks_and_resolves(self) -> None:
        jumper, host = _jumper_with_points(3, keys=["b"])
        host.location = Location(DOC, 25)

        target = jumper.jump()

        self.assertEqual(target, Point("b", Location(DOC, 10)))
        self.assertEqual(jumper.registry.current, target)
        # the old current point was updated to the cursor before tiling
        self.assertEqual(jumper.registry.get("c"), Point("c", Location(DOC, 25)))
        self.assertEqual(host.calls[0], ("save",))
        self.assertEqual(host.calls[1], ("split", 2, (2, 1)))
        self.assertEqual(
            [call for call in host.calls if call[0] == "marker"],
            [
                ("marker", "a", Location(DOC, 0)),
                ("marker", "b", Location(DOC, 10)),
                ("marker", "c", Location(DOC, 25)),
            ],
        )
        self.assertEqual([call[1] for call in host.calls if call[0] == "focus"], [0, 1, 2])
        self.assertIn(("read", JUMP_PROMPT), host.calls)
        self.assertEqual(host.markers, {})
        self.assertEqual(host.calls[-2], ("restore", ("original", Location(DOC, 25))))
        self.assertEqual(host.calls[-1], ("show", Location(DOC, 10)))
        self.assertEqual(host.layout, "original")
        self.assertEqual(host.location, Location(DOC, 10))

    def test_sub_views_follow_alphabet_order_skipping_gaps(self) -> None:
        host = RecordingHost(keys=["CTRL_G"])
        jumper = PointJumper(host)
        jumper.clear()
        host.location = Location(Path("/tmp/other.txt"), 4)
        jumper.save_current_point()
        jumper.registry._points.pop("a")
        jumper.registry.save(Location(DOC, 7))
        jumper.registry.save(Location(DOC, 8))
        host.location = Location(DOC, 8)
        host.calls.clear()

        jumper.jump()

        shown = [call[1].offset for call in host.calls if call[0] == "show"]
        self.assertEqual(shown, [7, 4, 8])

    def test_abort_restores_without_error(self) -> None:
        jumper, host = _jumper_with_points(4, keys=["CTRL_G"])
        current = jumper.registry.current

        self.assertIsNone(jumper.jump())

        self.assertEqual(jumper.registry.current, current)
        self.assertIn("restore", host.call_names())
        self.assertEqual(host.call_names()[-1], "restore")
        self.assertEqual(host.errors, [])
        self.assertEqual(host.layout, "original")

    def test_unknown_key_restores_then_raises(self) -> None:
        jumper, host = _jumper_with_points(3, keys=["x"])
        current = jumper.registry.current

        with self.assertRaises(UnknownPointName) as ctx:
            jumper.jump()

        self.assertEqual(ctx.exception.key, "x")
        self.assertEqual(jumper.registry.current, current)
        self.assertEqual(host.call_names()[-1], "restore")
        self.assertEqual(host.markers, {})

    def test_selecting_current_point_is_valid(self) -> None:
        jumper, host = _jumper_with_points(2, keys=["b"])
        host.location = Location(DOC, 3)

        target = jumper.jump()

        self.assertEqual(target, Point("b", Location(DOC, 3)))
        self.assertEqual(host.location, Location(DOC, 3))

    def test_restore_runs_when_read_fails(self) -> None:
        jumper, host = _jumper_with_points(2, keys=[])

        with self.assertRaises(IndexError):
            jumper.jump()

        self.assertEqual(host.call_names()[-1], "restore")
        self.assertEqual(host.markers, {})

    def test_markers_removed_when_tiling_fails_midway(self) -> None:
        host = _FailingShowHost(fail_on_call=2, keys=["a"])
        jumper = PointJumper(host)
        jumper.clear()
        host.location = Location(DOC, 10)
        jumper.save_current_point()
        host.calls.clear()

        with self.assertRaises(OSError):
            jumper.jump()

        self.assertEqual(host.markers, {})
        self.assertEqual(host.call_names()[-1], "restore")
        self.assertEqual(host.layout, "original")


if __name__ == "__main__":
    unittest.main()
