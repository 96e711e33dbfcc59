"""Public package surface for lazyjump.

Exports the point registry, grid planner, and jump controller for embedding,
plus ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import CapacityExceeded, NoCurrentPoint, PointJumpError, UnknownPointName
from .jump import PointJumper
from .layout import LayoutPlan, plan_grid
from .points import POINT_NAMES, Location, Point, PointRegistry


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "POINT_NAMES",
    "CapacityExceeded",
    "LayoutPlan",
    "Location",
    "NoCurrentPoint",
    "Point",
    "PointJumpError",
    "PointJumper",
    "PointRegistry",
    "UnknownPointName",
    "main",
    "plan_grid",
]
