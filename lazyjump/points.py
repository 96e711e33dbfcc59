"""Point registry: named cursor bookmarks with char-keyed identity.

Names come from a fixed 36-symbol alphabet and the lowest free symbol is
always handed out first. The registry tracks which point shadows the live
cursor by name, so replacing a point's location never loses that link.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from .errors import CapacityExceeded, NoCurrentPoint

logger = logging.getLogger(__name__)

POINT_NAMES: tuple[str, ...] = tuple(string.ascii_lowercase + string.digits)
MAX_POINTS = len(POINT_NAMES)


@dataclass(frozen=True)
class Location:
    """Document identity plus character offset inside it."""

    document: Path
    offset: int = 0

    def clamped(self, length: int) -> Location:
        """Return a copy whose offset lies in ``[0, length]``."""
        return Location(self.document, max(0, min(self.offset, max(0, length))))


@dataclass(frozen=True)
class Point:
    name: str
    location: Location


def is_point_name(key: str) -> bool:
    """Return whether ``key`` is one of the 36 assignable point names."""
    return len(key) == 1 and key in POINT_NAMES


def next_free_name(taken: dict[str, Point] | set[str]) -> str | None:
    """Return the first alphabet symbol not present in ``taken``."""
    for name in POINT_NAMES:
        if name not in taken:
            return name
    return None


class PointRegistry:
    """Session-scoped mapping from point name to ``Point``.

    ``current`` is undefined until the first ``save``/``clear``; callers are
    expected to ``clear()`` once when the session starts.
    """

    def __init__(self) -> None:
        self._points: dict[str, Point] = {}
        self._current_name: str | None = None

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, name: object) -> bool:
        return name in self._points

    def __iter__(self) -> Iterator[Point]:
        """Yield live points in alphabet order."""
        for name in POINT_NAMES:
            point = self._points.get(name)
            if point is not None:
                yield point

    def count(self) -> int:
        return len(self._points)

    @property
    def current(self) -> Point | None:
        if self._current_name is None:
            return None
        return self._points.get(self._current_name)

    def clear(self, location: Location) -> Point:
        """Drop every point, then save a single fresh one at ``location``."""
        self._points.clear()
        self._current_name = None
        logger.debug("point registry cleared")
        return self.save(location)

    def save(self, location: Location) -> Point:
        """Create a point at ``location`` under the next free name.

        Raises ``CapacityExceeded`` without mutating anything when all names
        are in use. The new point becomes current.
        """
        name = next_free_name(self._points)
        if name is None:
            raise CapacityExceeded(MAX_POINTS)
        point = Point(name=name, location=location)
        self._points[name] = point
        self._current_name = name
        logger.info("saved point %s at %s:%d", name, location.document, location.offset)
        return point

    @staticmethod
    def name_for(point: Point) -> str:
        return point.name

    def get(self, name: str) -> Point | None:
        return self._points.get(name)

    def update_current_location(self, location: Location) -> Point:
        """Overwrite the stored location of the current point."""
        current = self.current
        if current is None:
            raise NoCurrentPoint()
        updated = replace(current, location=location)
        self._points[updated.name] = updated
        return updated

    def set_current(self, point: Point) -> None:
        """Make an already-registered point current."""
        if self._points.get(point.name) is None:
            raise KeyError(point.name)
        self._current_name = point.name
