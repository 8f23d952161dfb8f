from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from columns.components.block import Block, BlockKind
from columns.components.pit import Heap, new_heap
from columns.events.bus import EVENT_TICK, EventBus


def heap_with(columns: int, rows: int, cells: Dict[Tuple[int, int], BlockKind]) -> Heap:
    """Build an empty heap and fill the given ``(x, y) -> kind`` cells."""
    heap = new_heap(columns, rows)
    for (x, y), kind in cells.items():
        heap[x][y].update(kind)
    return heap


def fill(heap: Heap, positions: Iterable[Tuple[int, int]], kind: BlockKind) -> None:
    for x, y in positions:
        heap[x][y].update(kind)


def shaft(*kinds: BlockKind) -> List[Block]:
    """Shaft blocks listed top first."""
    return [Block(kind) for kind in kinds]


def kinds_of(heap: Heap) -> List[List[BlockKind | None]]:
    return [[block.kind for block in cells] for cells in heap]


def drive(bus: EventBus, ticks: int, dt: float = 1.0) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def record(bus: EventBus, name: str) -> list:
    received: list = []
    bus.subscribe(name, lambda sender, **kwargs: received.append(kwargs))
    return received
