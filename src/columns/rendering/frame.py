"""Read-only display-code view of the pit and the falling column.

A frame is column-major like the heap: ``frame[x][y]`` holds one code per
block kind, ``HIGHLIGHT_CODE`` for a blinking block and ``EMPTY_CODE`` for an
empty cell.
"""
from __future__ import annotations

from typing import Iterator, List, Tuple

from columns.components.column import Column
from columns.components.pit import Heap
from columns.constants import EMPTY_CODE

Frame = List[List[int]]


def new_frame(columns: int, rows: int) -> Frame:
    return [[EMPTY_CODE] * rows for _ in range(columns)]


def draw_heap(frame: Frame, heap: Heap) -> None:
    for x, cells in enumerate(heap):
        for y, block in enumerate(cells):
            frame[x][y] = block.code()


def draw_column(frame: Frame, column: Column) -> None:
    # A landed column already lives in the heap.
    for pos, block in column.cells():
        frame[pos.x][pos.y] = block.code()


def build_frame(heap: Heap, column: Column | None = None) -> Frame:
    frame = new_frame(len(heap), len(heap[0]) if heap else 0)
    draw_heap(frame, heap)
    if column is not None:
        draw_column(frame, column)
    return frame


def changed_cells(last: Frame, frame: Frame) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(x, y, code)`` for every cell whose code differs from ``last``."""
    for x, cells in enumerate(frame):
        for y, code in enumerate(cells):
            if last[x][y] != code:
                yield x, y, code


def preview_frame(column: Column) -> Frame:
    """Single-column frame showing the whole shaft of ``column``, top first."""
    frame = new_frame(1, len(column.shaft))
    for y, block in enumerate(column.shaft):
        frame[0][y] = block.code()
    return frame
