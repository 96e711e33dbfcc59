"""Key-token to handler dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens bound to a single handler."""

    keys: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyRegistry:
    """Exact-match key dispatch; later bindings replace earlier ones."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register multiple bindings and return ``self`` for chaining."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, key: str) -> bool | None:
        """Run the handler for ``key``; ``None`` means the key is unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
