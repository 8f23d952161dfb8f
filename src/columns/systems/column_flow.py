from __future__ import annotations

import logging
import random

from esper import World

from columns.components.column import Column
from columns.components.game_state import GameMode
from columns.config import GameConfig
from columns.events.bus import (
    EventBus,
    EVENT_COLUMN_MOVE_REQUEST,
    EVENT_COLUMN_SPAWNED,
    EVENT_TICK,
)
from columns.systems.cascade import CascadeSystem
from columns.utils.game_state import get_game_mode

logger = logging.getLogger(__name__)

MOVE_DIRECTIONS = ("left", "right", "down", "cycle")


class ColumnFlowSystem:
    """Drives the falling column and hands landings over to the cascade.

    Keeps the current column plus the upcoming one shown as a preview. Each
    tick the cascade advances first; the column only falls while the pit is
    stable, and a landed column is replaced by the upcoming one.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        cascade: CascadeSystem,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.cascade = cascade
        self.config = config or cascade.config
        candidate_rng = rng or getattr(world, "random", None)
        self.rng = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
        self.current = Column.spawn(self.rng, self.config)
        self.upcoming = Column.spawn(self.rng, self.config)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_COLUMN_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction not in MOVE_DIRECTIONS:
            logger.debug("Ignoring unknown move direction %r", direction)
            return
        if get_game_mode(self.world) is GameMode.TOPPED_OUT:
            return
        self.apply_move(direction)

    def apply_move(self, direction: str) -> None:
        heap = self.cascade.pit.heap
        if direction == "left":
            self.current.move_left(heap)
        elif direction == "right":
            self.current.move_right(heap)
        elif direction == "down":
            self.current.move_down(heap)
        elif direction == "cycle":
            self.current.cycle()

    def on_tick(self, sender, **kwargs):
        if get_game_mode(self.world) is GameMode.TOPPED_OUT:
            return
        dt = kwargs.get('dt', 1/60)
        self.step(float(dt))

    def step(self, delta: float) -> None:
        self.cascade.update(self.current, delta)
        if self.cascade.stable() and not self.current.update(self.cascade.pit.heap, delta):
            self._promote_upcoming()

    def replace_current(self, column: Column) -> None:
        """Swap in a specific column, e.g. a scripted piece."""
        self.current = column

    def _promote_upcoming(self) -> None:
        self.current = self.upcoming
        self.upcoming = Column.spawn(self.rng, self.config)
        logger.debug("Spawned column %s", [block.kind for block in self.current.shaft])
        self.event_bus.emit(EVENT_COLUMN_SPAWNED, column=self.current, upcoming=self.upcoming)
