"""Save, clear, and jump operations over a ``PointRegistry``.

``PointJumper`` is the only place the registry, the grid planner, and the
editor host meet. A jump tiles the display into one sub-view per point,
overlays each point's name, reads one key, and always restores the prior
layout before returning.
"""

from __future__ import annotations

import logging

from .errors import UnknownPointName
from .host import EditorHost, MarkerHandle, SelectionAborted
from .layout import LayoutPlan, plan_grid
from .points import POINT_NAMES, Point, PointRegistry, is_point_name

logger = logging.getLogger(__name__)

DEFAULT_MARKER_STYLE = "\033[1;7;33m"
JUMP_PROMPT = "Jump to point: "


class PointJumper:
    """Point commands bound to one registry and one editor host."""

    def __init__(
        self,
        host: EditorHost,
        registry: PointRegistry | None = None,
        *,
        marker_style: str = DEFAULT_MARKER_STYLE,
    ) -> None:
        self.host = host
        self.registry = registry if registry is not None else PointRegistry()
        self.marker_style = marker_style

    def clear(self) -> Point:
        """Forget every point and start over with one at the cursor."""
        return self.registry.clear(self.host.current_location())

    def save_current_point(self) -> Point:
        """Bookmark the cursor under the next free name.

        Raises ``CapacityExceeded`` when all names are taken.
        """
        return self.registry.save(self.host.current_location())

    def status_text(self) -> str:
        """Return the mode-line lighter, e.g. `` Pt[b/3]``."""
        current = self.registry.current
        name = self.registry.name_for(current) if current is not None else "-"
        return f" Pt[{name}/{self.registry.count()}]"

    def _tile_points(self, plan: LayoutPlan, handles: list[MarkerHandle]) -> None:
        """Show each point in its own sub-view and mark it with its name.

        Marker handles are appended to ``handles`` as they are placed.
        """
        self.host.split_display_grid(plan.rows, plan.columns_per_row)
        names = iter(POINT_NAMES)
        index = 0
        for quota in plan.columns_per_row:
            filled = 0
            while filled < quota:
                name = next(names, None)
                if name is None:
                    return
                point = self.registry.get(name)
                if point is None:
                    continue
                self.host.focus_sub_view(index)
                self.host.show_document_at(point.location)
                marker_name = self.registry.name_for(point)
                handles.append(self.host.place_marker(point.location, marker_name, self.marker_style))
                index += 1
                filled += 1

    def jump(self) -> Point | None:
        """Let the user pick a point by name and move the cursor there.

        Returns the chosen point, or ``None`` when there is nothing to jump
        to or the user aborted. Raises ``UnknownPointName`` for a key that
        names no point; the display is restored first in every case.
        """
        if self.registry.count() <= 1:
            return None

        self.registry.update_current_location(self.host.current_location())
        plan = plan_grid(self.registry.count())
        saved = self.host.save_display_configuration()
        handles: list[MarkerHandle] = []
        try:
            self._tile_points(plan, handles)
            key = self.host.read_single_character(JUMP_PROMPT)
        finally:
            for handle in handles:
                self.host.remove_marker(handle)
            self.host.restore_display_configuration(saved)

        if isinstance(key, SelectionAborted):
            logger.debug("jump aborted")
            return None
        target = self.registry.get(key) if is_point_name(key) else None
        if target is None:
            raise UnknownPointName(key)

        self.registry.set_current(target)
        self.host.show_document_at(target.location)
        logger.info("jumped to point %s", target.name)
        return target
