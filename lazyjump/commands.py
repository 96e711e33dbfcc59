"""User-facing point commands and their default key bindings.

Each command wraps a ``PointJumper`` operation and turns ``PointJumpError``
into a status message through the host, so a full registry or a mistyped
jump key never escapes the event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import PointJumpError
from .jump import PointJumper
from .key_registry import KeyBinding, KeyRegistry

logger = logging.getLogger(__name__)

SAVE_CURRENT_POINT = "save-current-point"
JUMP = "jump"
CLEAR = "clear"

DEFAULT_COMMAND_KEYS: dict[str, tuple[str, ...]] = {
    SAVE_CURRENT_POINT: ("m",),
    JUMP: ("'",),
    CLEAR: ("C",),
}


class PointCommands:
    """Named command surface over a ``PointJumper``."""

    def __init__(self, jumper: PointJumper) -> None:
        self.jumper = jumper
        self._commands: dict[str, Callable[[], object]] = {
            SAVE_CURRENT_POINT: jumper.save_current_point,
            JUMP: jumper.jump,
            CLEAR: jumper.clear,
        }

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def run(self, name: str) -> bool:
        """Run command ``name``; return ``False`` if it reported an error."""
        command = self._commands[name]
        try:
            command()
        except PointJumpError as exc:
            logger.info("%s failed: %s", name, exc)
            self.jumper.host.report_user_error(str(exc))
            return False
        return True

    def bindings(self, keys: dict[str, tuple[str, ...]] | None = None) -> tuple[KeyBinding, ...]:
        """Build key bindings, defaulting to ``DEFAULT_COMMAND_KEYS``."""
        keys = DEFAULT_COMMAND_KEYS if keys is None else keys
        out: list[KeyBinding] = []
        for name in self._commands:
            combos = keys.get(name, ())
            if combos:
                out.append(KeyBinding(tuple(combos), self._runner(name)))
        return tuple(out)

    def register(self, registry: KeyRegistry, keys: dict[str, tuple[str, ...]] | None = None) -> KeyRegistry:
        return registry.register_bindings(*self.bindings(keys))

    def _runner(self, name: str) -> Callable[[], bool]:
        def run_bound() -> bool:
            self.run(name)
            return True

        return run_bound
