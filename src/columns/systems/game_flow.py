from __future__ import annotations

import logging

from esper import World

from columns.components.game_state import GameMode
from columns.events.bus import EventBus, EVENT_GAME_OVER, EVENT_TICK
from columns.systems.cascade import CascadeSystem
from columns.utils.game_state import get_game_mode, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Ends the session once a stable pit has a block in its top row."""

    def __init__(self, world: World, event_bus: EventBus, cascade: CascadeSystem):
        self.world = world
        self.event_bus = event_bus
        self.cascade = cascade
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        self.check_topped_up()

    def check_topped_up(self) -> bool:
        if get_game_mode(self.world) is GameMode.TOPPED_OUT:
            return False
        if not self.cascade.topped_up():
            return False
        logger.info("Pit topped up; game over")
        set_game_mode(self.world, self.event_bus, GameMode.TOPPED_OUT)
        self.event_bus.emit(EVENT_GAME_OVER, reason="topped_up")
        return True
