"""Directional match detection over the pit heap.

A seed matches along an axis when the same-kind cells found by scanning both
ways from it number at least two, i.e. the run through the seed is three or
more long. Axes are independent, so one seed may complete several runs.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from columns.components.pit import Heap
from columns.components.position import Vec2

Step = Tuple[int, int]

# Cells found besides the seed itself for a run of three.
MIN_RUN_NEIGHBOURS = 2


class Axis(Enum):
    """Compass axes as the pair of steps scanned outward from a seed."""
    NORTH_SOUTH = ((0, -1), (0, 1))
    EAST_WEST = ((-1, 0), (1, 0))
    NORTHEAST_SOUTHWEST = ((1, -1), (-1, 1))
    NORTHWEST_SOUTHEAST = ((-1, -1), (1, 1))


AXES: Tuple[Axis, ...] = (
    Axis.NORTH_SOUTH,
    Axis.EAST_WEST,
    Axis.NORTHEAST_SOUTHWEST,
    Axis.NORTHWEST_SOUTHEAST,
)


def _scan(heap: Heap, origin: Vec2, step: Step) -> List[Vec2]:
    columns = len(heap)
    rows = len(heap[0]) if columns else 0
    seed = heap[origin.x][origin.y]
    dx, dy = step
    x, y = origin.x + dx, origin.y + dy
    found: List[Vec2] = []
    while 0 <= x < columns and 0 <= y < rows:
        if heap[x][y] != seed:
            break
        found.append(Vec2.xy(x, y))
        x += dx
        y += dy
    return found


def matching_along(heap: Heap, origin: Vec2, axis: Axis) -> List[Vec2]:
    """Return the same-kind neighbours of ``origin`` on ``axis`` (seed excluded)."""
    towards, away = axis.value
    return _scan(heap, origin, towards) + _scan(heap, origin, away)


def matching_at(heap: Heap, origin: Vec2) -> List[Vec2]:
    """Return every cell of a qualifying run through ``origin``, seed last."""
    items: List[Vec2] = []
    if heap[origin.x][origin.y].empty:
        return items
    for axis in AXES:
        matches = matching_along(heap, origin, axis)
        if len(matches) >= MIN_RUN_NEIGHBOURS:
            items.extend(matches)
    if items:
        items.append(origin)
    return items


def collect_matching_at(heap: Heap, origins: Iterable[Vec2]) -> List[Vec2]:
    """Union of ``matching_at`` over all seeds, each cell reported once."""
    columns = len(heap)
    rows = len(heap[0]) if columns else 0
    seen = [[False] * rows for _ in range(columns)]
    items: List[Vec2] = []
    for origin in origins:
        for item in matching_at(heap, origin):
            if not seen[item.x][item.y]:
                seen[item.x][item.y] = True
                items.append(item)
    return items
