from columns.events.bus import (
    EventBus,
    EVENT_COLUMN_MOVE_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_QUIT_REQUEST,
)

# Pyglet key symbols as exposed through arcade.key; kept as plain ints so the
# input mapping stays importable without a window.
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_SPACE = 32
KEY_ENTER = 65293
KEY_ESCAPE = 65307

KEY_DIRECTIONS = {
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
    KEY_DOWN: "down",
    KEY_SPACE: "cycle",
    KEY_ENTER: "cycle",
}


class InputSystem:
    """Translates raw key presses into column commands."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        if symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_QUIT_REQUEST)
            return
        direction = KEY_DIRECTIONS.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_COLUMN_MOVE_REQUEST, direction=direction)
