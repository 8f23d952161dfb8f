from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from columns.components.block import Block, BlockKind
from columns.components.pit import Heap
from columns.components.position import Vec2
from columns.components.timer import Timer
from columns.config import GameConfig


@dataclass(slots=True)
class Column:
    """The falling piece: a vertical shaft of blocks under player control.

    ``shaft[0]`` is the top block and ``shaft[-1]`` the base; ``y`` tracks the
    row of the base block, so blocks above it may sit outside the pit while the
    column enters from the top.
    """

    shaft: List[Block]
    x: int
    y: int
    move_timer: Timer
    dropping: bool = True

    @classmethod
    def from_shaft(cls, shaft: Iterable[Block], config: GameConfig) -> Column:
        return cls(
            shaft=[block.copy() for block in shaft],
            x=config.starting_x,
            y=config.starting_y,
            move_timer=Timer(config.fall_seconds),
        )

    @classmethod
    def spawn(cls, rng: random.Random, config: GameConfig) -> Column:
        kinds = list(BlockKind)[: config.block_kinds]
        shaft = [Block(rng.choice(kinds)) for _ in range(config.shaft_size)]
        return cls.from_shaft(shaft, config)

    def cycle(self) -> None:
        """Rotate the shaft one step downward; the base block wraps to the top."""
        if self.dropping:
            self.shaft.insert(0, self.shaft.pop())

    def move_down(self, heap: Heap) -> None:
        if self.dropping and not self._hit_downwards(heap):
            self.y += 1

    def move_left(self, heap: Heap) -> None:
        if self.dropping and not self._hit_leftwards(heap):
            self.x -= 1

    def move_right(self, heap: Heap) -> None:
        if self.dropping and not self._hit_rightwards(heap):
            self.x += 1

    def update(self, heap: Heap, delta: float) -> bool:
        """Advance the fall timer, dropping one row when it fires.

        Returns whether the column is still airborne.
        """
        self.move_timer.update(delta)
        if self.move_timer.ready:
            self.move_timer.reset()
            self.move_down(heap)
        return self.dropping

    def detect_landing(self, heap: Heap, delta: float) -> Optional[List[Vec2]]:
        """Transfer the shaft into ``heap`` once the column can no longer fall.

        A blocked column only lands when one more (simulated) timer tick would
        complete, leaving the player a last chance to cycle. Returns the written
        positions base first, or None while still airborne.
        """
        if not self._hit_downwards(heap):
            return None
        probe = self.move_timer.copy()
        probe.update(delta)
        if not probe.ready:
            return None
        self.dropping = False
        origins: List[Vec2] = []
        for origin, block in self._placed_blocks():
            cell = heap[origin.x][origin.y]
            cell.update(block.kind)
            cell.highlighted = False
            origins.append(origin)
        return origins

    def cells(self) -> Iterator[Tuple[Vec2, Block]]:
        """Yield the in-bounds blocks of an airborne column for drawing."""
        if self.dropping:
            yield from self._placed_blocks()

    def _placed_blocks(self) -> Iterator[Tuple[Vec2, Block]]:
        for i, block in enumerate(reversed(self.shaft)):
            if i > self.y:
                # Remaining blocks are still above row 0.
                break
            yield Vec2.xy(self.x, self.y - i), block

    def _hit_downwards(self, heap: Heap) -> bool:
        rows = len(heap[self.x])
        return self.dropping and (self.y == rows - 1 or not heap[self.x][self.y + 1].empty)

    def _hit_leftwards(self, heap: Heap) -> bool:
        return self.dropping and (self.x == 0 or not heap[self.x - 1][self.y].empty)

    def _hit_rightwards(self, heap: Heap) -> bool:
        return self.dropping and (self.x == len(heap) - 1 or not heap[self.x + 1][self.y].empty)
