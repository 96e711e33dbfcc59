"""Grid planning for the jump view.

``plan_grid`` decides how many sub-views go on each row so the grid stays
close to square; ``grid_rects`` maps a plan onto terminal cells. Neither
function touches terminal state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DIVIDER_COLUMNS = 1


@dataclass(frozen=True)
class LayoutPlan:
    """Row count plus the number of sub-views on each row."""

    rows: int
    columns_per_row: tuple[int, ...]

    @property
    def cells(self) -> int:
        return sum(self.columns_per_row)


@dataclass(frozen=True)
class SubViewRect:
    """Screen rectangle for one sub-view, in 0-based cell coordinates."""

    index: int
    top: int
    left: int
    width: int
    height: int


def plan_grid(n: int) -> LayoutPlan:
    """Return a near-square row plan holding exactly ``n`` sub-views.

    ``rows`` is ``round(sqrt(n))`` (Python's half-to-even rounding; ``sqrt`` of
    an integer never lands on a tie) and every row is ``ceil(n / rows)`` wide
    until the running total would pass ``n``; the overflow is trimmed from
    the later rows. A row whose quota is fully absorbed gets 0.
    """
    if n < 1:
        raise ValueError(f"plan_grid needs at least one sub-view, got {n}")
    rows = round(math.sqrt(n))
    cols = math.ceil(n / rows)
    columns_per_row: list[int] = []
    for row in range(rows):
        total = cols * (row + 1)
        columns_per_row.append(max(0, cols - max(0, total - n)))
    return LayoutPlan(rows=rows, columns_per_row=tuple(columns_per_row))


def _split_evenly(total: int, parts: int) -> list[int]:
    """Split ``total`` into ``parts`` sizes, giving remainders to the front."""
    base, extra = divmod(max(0, total), parts)
    return [base + (1 if idx < extra else 0) for idx in range(parts)]


def grid_rects(plan: LayoutPlan, width: int, height: int) -> list[SubViewRect]:
    """Tile a ``width`` x ``height`` area according to ``plan``.

    Rows with zero columns receive no space. Adjacent sub-views on a row are
    separated by a one-column divider that is not part of either rect.
    Sub-view indices run in row-major order.
    """
    filled_rows = [count for count in plan.columns_per_row if count > 0]
    if not filled_rows:
        return []
    heights = _split_evenly(height, len(filled_rows))

    rects: list[SubViewRect] = []
    top = 0
    for row_height, count in zip(heights, filled_rows):
        usable = max(0, width - DIVIDER_COLUMNS * (count - 1))
        left = 0
        for cell_width in _split_evenly(usable, count):
            rects.append(
                SubViewRect(
                    index=len(rects),
                    top=top,
                    left=left,
                    width=cell_width,
                    height=row_height,
                )
            )
            left += cell_width + DIVIDER_COLUMNS
        top += row_height
    return rects
