"""Error types raised by the point registry and jump controller.

User-facing failures derive from ``PointJumpError`` and are turned into
status-row messages by the command layer. ``NoCurrentPoint`` is an invariant
failure and is left to propagate.
"""

from __future__ import annotations


class PointJumpError(Exception):
    """Non-fatal failure whose message is shown to the user."""


class CapacityExceeded(PointJumpError):
    """Raised by ``save`` when every point name is already taken."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"No free point names (all {capacity} in use)")
        self.capacity = capacity


class UnknownPointName(PointJumpError):
    """Raised when the jump selection key names no live point."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No point named {key!r}")
        self.key = key


class NoCurrentPoint(RuntimeError):
    """Raised when the current point is needed before any point exists."""

    def __init__(self) -> None:
        super().__init__("no current point; clear() must run before use")
