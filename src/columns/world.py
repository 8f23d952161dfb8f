import random

from esper import World

from columns.components.cascade_state import CascadeState
from columns.components.game_state import GameMode, GameState
from columns.components.pit import Pit
from columns.components.timer import Timer
from columns.config import GameConfig


def create_world(
    config: GameConfig | None = None,
    *,
    initial_mode: GameMode = GameMode.PLAYING,
    rng: random.Random | None = None,
) -> World:
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    world.create_entity(GameState(mode=initial_mode))

    # Single pit entity carrying the heap and the cascade stage machine.
    world.create_entity(
        Pit(columns=config.columns, rows=config.rows),
        CascadeState(move_timer=Timer(config.fall_seconds)),
    )
    return world
