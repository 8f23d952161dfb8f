from __future__ import annotations

from esper import World

from columns.components.game_state import GameMode, GameState
from columns.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_mode(world: World) -> GameMode | None:
    for _, state in world.get_component(GameState):
        return state.mode
    return None


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""

    for _, state in world.get_component(GameState):
        previous_mode = state.mode
        if previous_mode != mode:
            state.mode = mode
            event_bus.emit(
                EVENT_GAME_MODE_CHANGED,
                previous_mode=previous_mode,
                new_mode=mode,
            )
        return
    raise RuntimeError("GameState component not found")
