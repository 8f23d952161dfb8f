"""Entry point for the Columns falling-blocks puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import random

from arcade import Window, run, set_background_color, color

from columns.cli import parse_config
from columns.config import GameConfig
from columns.constants import BOARD_MARGIN, GAME_OVER_LINGER, TILE_SIZE
from columns.events.bus import (
    EVENT_GAME_OVER,
    EVENT_KEY_PRESS,
    EVENT_QUIT_REQUEST,
    EVENT_TICK,
    EventBus,
)
from columns.rendering.frame import draw_column, new_frame, preview_frame
from columns.rendering.frame_renderer import FrameRenderer
from columns.systems.cascade import CascadeSystem
from columns.systems.column_flow import ColumnFlowSystem
from columns.systems.game_flow import GameFlowSystem
from columns.systems.input import InputSystem
from columns.utils.logging import setup_logger
from columns.world import create_world


class ColumnsWindow(Window):
    def __init__(self, config: GameConfig, rng: random.Random | None = None):
        # Pit on the left, one-column preview of the upcoming piece on the right.
        width = (config.columns + 2) * TILE_SIZE + 2 * BOARD_MARGIN
        height = config.rows * TILE_SIZE + 2 * BOARD_MARGIN
        super().__init__(width, height, "Columns")
        self.set_update_rate(1/60)
        self.config = config
        self.event_bus = EventBus()
        self.world = create_world(config, rng=rng)

        # Engine systems
        self.cascade_system = CascadeSystem(self.world, self.event_bus, config)
        self.column_flow_system = ColumnFlowSystem(self.world, self.event_bus, self.cascade_system)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus, self.cascade_system)

        # Interface systems
        self.input_system = InputSystem(self.event_bus)
        self.pit_renderer = FrameRenderer(
            config.columns, config.rows, left=BOARD_MARGIN, bottom=BOARD_MARGIN
        )
        self.preview_renderer = FrameRenderer(
            1,
            config.shaft_size,
            left=BOARD_MARGIN + (config.columns + 1) * TILE_SIZE,
            bottom=BOARD_MARGIN + (config.rows - config.shaft_size) * TILE_SIZE,
        )
        self._linger: float | None = None
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)
        set_background_color(color.GRAY_BLUE)

    def on_game_over(self, sender, **kwargs):
        # Leave the final pit visible for a moment before closing.
        self._linger = GAME_OVER_LINGER

    def on_quit_request(self, sender, **kwargs):
        self.close()

    def on_draw(self):
        self.clear()
        frame = new_frame(self.config.columns, self.config.rows)
        self.cascade_system.draw(frame)
        draw_column(frame, self.column_flow_system.current)
        self.pit_renderer.update(frame)
        self.preview_renderer.update(preview_frame(self.column_flow_system.upcoming))
        self.pit_renderer.draw()
        self.preview_renderer.draw()

    def on_update(self, delta_time: float):
        if self._linger is not None:
            self._linger -= delta_time
            if self._linger <= 0:
                self.close()
            return
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main(argv=None):
    args, config = parse_config(argv)
    setup_logger(name="columns", use_rich=not args.plain_log, level=args.log_level)
    rng = random.Random(args.seed) if args.seed is not None else None
    ColumnsWindow(config, rng=rng)
    run()


if __name__ == "__main__":
    main()
