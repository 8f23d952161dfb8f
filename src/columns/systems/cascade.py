"""Cascade state machine: landing -> matching -> blinking -> clearing -> gravity.

Each stage advances on the cascade timer, which runs at the column's fall
interval, so one visible step happens per fall tick throughout a cascade.
"""
from __future__ import annotations

import logging
from typing import List

from esper import World

from columns.components.cascade_state import (
    CascadeStage,
    CascadeState,
    LandingOrigins,
    MatchedSet,
    UnsupportedSet,
)
from columns.components.column import Column
from columns.components.position import Vec2
from columns.config import GameConfig
from columns.events.bus import (
    EventBus,
    EVENT_CASCADE_COMPLETE,
    EVENT_CASCADE_STEP,
    EVENT_COLUMN_LANDED,
    EVENT_GRAVITY_APPLIED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_FOUND,
)
from columns.rendering.frame import Frame, draw_heap
from columns.systems.matching import collect_matching_at
from columns.systems.pit_ops import (
    clear_blocks,
    collect_dropping_at,
    get_cascade_state,
    get_pit,
    set_highlight,
    topped_up,
    update_dropping_at,
)

logger = logging.getLogger(__name__)


class CascadeSystem:
    """Drives the world's pit and resolves everything that follows a landing."""

    def __init__(self, world: World, event_bus: EventBus, config: GameConfig | None = None):
        self.world = world
        self.event_bus = event_bus
        self.config = config or GameConfig()
        self.pit_entity, self.pit = get_pit(world)
        self.state = get_cascade_state(world)

    def stable(self) -> bool:
        return self.state.stage is CascadeStage.STABLE

    def topped_up(self) -> bool:
        """Loss condition; only meaningful between cascades."""
        return self.stable() and topped_up(self.pit.heap)

    def draw(self, frame: Frame) -> None:
        """Write the heap's display codes into ``frame``."""
        draw_heap(frame, self.pit.heap)

    def update(self, column: Column, delta: float) -> None:
        stage = self.state.stage
        if stage is CascadeStage.STABLE:
            self._update_stable(column, delta)
        elif stage is CascadeStage.MATCHING:
            self._update_matching()
        elif stage is CascadeStage.COLLECTING:
            self._update_collecting(delta)
        elif stage is CascadeStage.DROPPING:
            self._update_dropping(delta)

    def _update_stable(self, column: Column, delta: float) -> None:
        state = self.state
        state.move_timer.update(delta)
        if not state.move_timer.ready:
            return
        origins = column.detect_landing(self.pit.heap, delta)
        if origins is None:
            state.move_timer.reset()
            return
        logger.debug("Column landed at %s", origins)
        # Timer stays ready: the first blink follows on the next tick after a match.
        state.enter(CascadeStage.MATCHING, LandingOrigins(positions=origins))
        self.event_bus.emit(EVENT_COLUMN_LANDED, positions=list(origins))

    def _update_matching(self) -> None:
        state = self.state
        matched = collect_matching_at(self.pit.heap, state.positions())
        if not matched:
            self._settle()
            return
        state.depth += 1
        logger.debug("Cascade depth %d matched %d blocks", state.depth, len(matched))
        state.enter(CascadeStage.COLLECTING, MatchedSet(positions=matched))
        self.event_bus.emit(EVENT_MATCH_FOUND, positions=list(matched), size=len(matched))
        self.event_bus.emit(EVENT_CASCADE_STEP, depth=state.depth, positions=list(matched))

    def _update_collecting(self, delta: float) -> None:
        state = self.state
        matched = state.positions()
        if state.blink_count >= self.config.blink_ticks:
            state.blink_count = 0
            clear_blocks(self.pit.heap, matched)
            self.event_bus.emit(EVENT_MATCH_CLEARED, positions=list(matched))
            unsupported = collect_dropping_at(self.pit.heap, matched)
            if not unsupported:
                self._settle()
                return
            state.enter(CascadeStage.DROPPING, UnsupportedSet(positions=unsupported))
            return
        state.move_timer.update(delta)
        if state.move_timer.ready:
            state.move_timer.reset()
            state.blink_count += 1
            set_highlight(self.pit.heap, matched, state.blink_count % 2 == 1)

    def _update_dropping(self, delta: float) -> None:
        state = self.state
        state.move_timer.update(delta)
        if not state.move_timer.ready:
            return
        state.move_timer.reset()
        falling: List[Vec2] = state.positions()
        if update_dropping_at(self.pit.heap, falling):
            self.event_bus.emit(EVENT_GRAVITY_APPLIED, positions=list(falling))
            return
        # Settled blocks become seeds for the next round of matching.
        state.enter(CascadeStage.MATCHING, UnsupportedSet(positions=falling))

    def _settle(self) -> None:
        state = self.state
        depth = state.depth
        state.enter(CascadeStage.STABLE)
        state.depth = 0
        # Reset here rather than on the next stable tick so the landing check
        # starts in phase with the next column's fall timer.
        state.move_timer.reset()
        if depth:
            logger.debug("Cascade complete at depth %d", depth)
            self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=depth)
