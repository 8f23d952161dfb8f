from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from columns.components.block import Block, BlockKind

# Column-major: heap[x][y], x = column, y = row growing downward.
Heap = List[List[Block]]


def new_heap(columns: int, rows: int, kind: BlockKind | None = None) -> Heap:
    return [[Block(kind) for _ in range(rows)] for _ in range(columns)]


@dataclass(slots=True)
class Pit:
    """The settled playfield of landed blocks."""

    columns: int
    rows: int
    heap: Heap = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.heap:
            self.heap = new_heap(self.columns, self.rows)
