from __future__ import annotations

from typing import Dict, Tuple

import arcade

from columns.constants import EMPTY_CODE, HIGHLIGHT_CODE, TILE_SIZE
from columns.rendering.frame import Frame, changed_cells, new_frame

PADDING = 2

BLOCK_COLORS: Dict[int, Tuple[int, ...]] = {
    0: arcade.color.BLUE,
    1: arcade.color.YELLOW,
    2: arcade.color.GREEN,
    3: arcade.color.RED,
    4: arcade.color.CYAN,
    5: arcade.color.MAGENTA,
    HIGHLIGHT_CODE: arcade.color.GRAY,
    EMPTY_CODE: arcade.color.BLACK,
}


def color_for(code: int) -> Tuple[int, ...]:
    return BLOCK_COLORS.get(code, arcade.color.BLACK)


class FrameRenderer:
    """Draws frames as a grid of solid squares, recolouring only changed cells."""

    def __init__(self, columns: int, rows: int, *, left: float, bottom: float, tile_size: int = TILE_SIZE):
        self.columns = columns
        self.rows = rows
        self._last = new_frame(columns, rows)
        self._sprites = arcade.SpriteList()
        self._cells: Dict[Tuple[int, int], arcade.SpriteSolidColor] = {}
        side = tile_size - PADDING
        for x in range(columns):
            for y in range(rows):
                # Row 0 is the top of the pit; arcade's origin is bottom-left.
                sprite = arcade.SpriteSolidColor(
                    side,
                    side,
                    center_x=left + x * tile_size + tile_size / 2,
                    center_y=bottom + (rows - 1 - y) * tile_size + tile_size / 2,
                    color=color_for(EMPTY_CODE),
                )
                self._cells[(x, y)] = sprite
                self._sprites.append(sprite)

    def update(self, frame: Frame) -> None:
        for x, y, code in changed_cells(self._last, frame):
            self._cells[(x, y)].color = color_for(code)
        self._last = [list(cells) for cells in frame]

    def draw(self) -> None:
        self._sprites.draw()
