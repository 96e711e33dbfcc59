"""Tests for the command layer and its key bindings."""

from __future__ import annotations

import unittest

from recording_host import DOC, RecordingHost

from lazyjump.commands import CLEAR, DEFAULT_COMMAND_KEYS, JUMP, SAVE_CURRENT_POINT, PointCommands
from lazyjump.errors import NoCurrentPoint
from lazyjump.jump import PointJumper
from lazyjump.key_registry import KeyBinding, KeyRegistry
from lazyjump.points import Location


def _commands(keys: list[str] | None = None) -> tuple[PointCommands, RecordingHost]:
    host = RecordingHost(keys=keys)
    commands = PointCommands(PointJumper(host))
    commands.run(CLEAR)
    return commands, host


class PointCommandTests(unittest.TestCase):
    def test_command_names(self) -> None:
        commands, _host = _commands()
        self.assertEqual(commands.names, (SAVE_CURRENT_POINT, JUMP, CLEAR))

    def test_full_registry_reports_error_instead_of_raising(self) -> None:
        commands, host = _commands()
        for _ in range(35):
            self.assertTrue(commands.run(SAVE_CURRENT_POINT))

        self.assertFalse(commands.run(SAVE_CURRENT_POINT))

        self.assertEqual(len(host.errors), 1)
        self.assertIn("36", host.errors[0])
        self.assertEqual(commands.jumper.registry.count(), 36)

    def test_unknown_jump_key_is_reported(self) -> None:
        commands, host = _commands(keys=["z"])
        commands.run(SAVE_CURRENT_POINT)

        self.assertFalse(commands.run(JUMP))

        self.assertEqual(host.errors, ["No point named 'z'"])
        self.assertEqual(host.layout, "original")

    def test_aborted_jump_reports_nothing(self) -> None:
        commands, host = _commands(keys=["CTRL_G"])
        commands.run(SAVE_CURRENT_POINT)

        self.assertTrue(commands.run(JUMP))
        self.assertEqual(host.errors, [])

    def test_invariant_failures_propagate(self) -> None:
        host = RecordingHost()
        commands = PointCommands(PointJumper(host))
        commands.jumper.registry.save(Location(DOC, 0))
        commands.jumper.registry.save(Location(DOC, 1))
        commands.jumper.registry._current_name = None

        with self.assertRaises(NoCurrentPoint):
            commands.run(JUMP)


class KeyBindingTests(unittest.TestCase):
    def test_default_bindings_dispatch_commands(self) -> None:
        commands, host = _commands()
        registry = commands.register(KeyRegistry())

        self.assertEqual(set(registry.bound_keys()), {"m", "'", "C"})
        host.location = Location(DOC, 5)
        self.assertTrue(registry.dispatch("m"))
        self.assertEqual(commands.jumper.registry.current.name, "b")
        self.assertTrue(registry.dispatch("C"))
        self.assertEqual(commands.jumper.registry.count(), 1)

    def test_custom_keys_replace_defaults(self) -> None:
        commands, _host = _commands()
        keys = dict(DEFAULT_COMMAND_KEYS)
        keys[JUMP] = ("J", "ENTER")
        keys[CLEAR] = ()

        registry = commands.register(KeyRegistry(), keys)

        self.assertEqual(set(registry.bound_keys()), {"m", "J", "ENTER"})

    def test_unbound_key_returns_none(self) -> None:
        registry = KeyRegistry().register_binding(KeyBinding(("x",), lambda: True))
        self.assertIsNone(registry.dispatch("y"))
        self.assertTrue(registry.dispatch("x"))


if __name__ == "__main__":
    unittest.main()
