from __future__ import annotations

from typing import Iterable, List, Tuple

from esper import World

from columns.components.cascade_state import CascadeState
from columns.components.pit import Heap, Pit
from columns.components.position import Vec2


def get_pit(world: World) -> Tuple[int, Pit]:
    for entity, pit in world.get_component(Pit):
        return entity, pit
    raise RuntimeError("Pit component not found")


def get_cascade_state(world: World) -> CascadeState:
    for _, state in world.get_component(CascadeState):
        return state
    raise RuntimeError("CascadeState component not found")


def set_highlight(heap: Heap, positions: Iterable[Vec2], highlighted: bool) -> None:
    for pos in positions:
        heap[pos.x][pos.y].highlighted = highlighted


def clear_blocks(heap: Heap, positions: Iterable[Vec2]) -> None:
    for pos in positions:
        heap[pos.x][pos.y].clear()


def collect_dropping_at(heap: Heap, origins: Iterable[Vec2]) -> List[Vec2]:
    """Collect the blocks stacked directly above each (now empty) origin.

    Each column is scanned upward until the first gap. The result is ordered
    bottom-most first so a drop pass can move lower blocks out of the way
    before the ones resting on them.
    """
    items: List[Vec2] = []
    for origin in origins:
        for y in range(origin.y - 1, -1, -1):
            if heap[origin.x][y].empty:
                break
            items.append(Vec2.xy(origin.x, y))
    items.sort(key=lambda pos: pos.y, reverse=True)
    return items


def update_dropping_at(heap: Heap, origins: List[Vec2]) -> bool:
    """Drop every tracked block one row where the cell below is free.

    ``origins`` is updated in place to follow the moved blocks. Returns True
    when at least one block moved.
    """
    something_dropped = False
    for index, origin in enumerate(origins):
        rows = len(heap[origin.x])
        if origin.y < rows - 1 and heap[origin.x][origin.y + 1].empty:
            source = heap[origin.x][origin.y]
            target = heap[origin.x][origin.y + 1]
            target.update(source.kind)
            target.highlighted = source.highlighted
            source.clear()
            origins[index] = Vec2.xy(origin.x, origin.y + 1)
            something_dropped = True
    return something_dropped


def topped_up(heap: Heap) -> bool:
    """True when any column has a block in its top row."""
    return any(not column[0].empty for column in heap)
