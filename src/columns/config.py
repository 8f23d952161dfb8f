"""Engine configuration passed explicitly into the world and its systems."""
from __future__ import annotations

from dataclasses import dataclass

from columns.constants import (
    BLINK_TICKS,
    FALL_SECONDS,
    GRID_COLUMNS,
    GRID_ROWS,
    SHAFT_SIZE,
    STARTING_X,
    STARTING_Y,
)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Pit dimensions, spawn cell and pacing shared by every engine instance.

    Validation happens once at construction; the engine assumes a well-formed
    configuration afterwards.
    """

    columns: int = GRID_COLUMNS
    rows: int = GRID_ROWS
    shaft_size: int = SHAFT_SIZE
    starting_x: int = STARTING_X
    starting_y: int = STARTING_Y
    fall_seconds: float = FALL_SECONDS
    blink_ticks: int = BLINK_TICKS
    block_kinds: int = 6

    def __post_init__(self) -> None:
        if self.shaft_size < 1:
            raise ValueError(f"shaft_size must be positive, got {self.shaft_size}")
        if self.columns < 1:
            raise ValueError(f"columns must be positive, got {self.columns}")
        if self.rows < self.shaft_size:
            raise ValueError(
                f"rows ({self.rows}) must fit a column of {self.shaft_size} blocks"
            )
        if not 0 <= self.starting_x < self.columns:
            raise ValueError(f"starting_x {self.starting_x} outside 0..{self.columns - 1}")
        if not 0 <= self.starting_y < self.rows:
            raise ValueError(f"starting_y {self.starting_y} outside 0..{self.rows - 1}")
        if self.fall_seconds <= 0:
            raise ValueError(f"fall_seconds must be positive, got {self.fall_seconds}")
        if self.blink_ticks < 1:
            raise ValueError(f"blink_ticks must be positive, got {self.blink_ticks}")
        if not 1 <= self.block_kinds <= 6:
            raise ValueError(f"block_kinds must be within 1..6, got {self.block_kinds}")
