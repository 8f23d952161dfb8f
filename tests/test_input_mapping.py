import pytest

from columns.events.bus import (
    EventBus,
    EVENT_COLUMN_MOVE_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_QUIT_REQUEST,
)
from columns.systems.input import (
    InputSystem,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
)
from tests.helpers import record


@pytest.mark.parametrize(
    "symbol, direction",
    [
        (KEY_LEFT, "left"),
        (KEY_RIGHT, "right"),
        (KEY_DOWN, "down"),
        (KEY_SPACE, "cycle"),
        (KEY_ENTER, "cycle"),
    ],
)
def test_keys_map_to_move_requests(symbol, direction):
    bus = EventBus()
    InputSystem(bus)
    moves = record(bus, EVENT_COLUMN_MOVE_REQUEST)
    bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=0)
    assert moves == [{"direction": direction}]


def test_escape_requests_quit():
    bus = EventBus()
    InputSystem(bus)
    quits = record(bus, EVENT_QUIT_REQUEST)
    moves = record(bus, EVENT_COLUMN_MOVE_REQUEST)
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ESCAPE, modifiers=0)
    assert quits == [{}]
    assert moves == []


def test_unmapped_keys_are_ignored():
    bus = EventBus()
    InputSystem(bus)
    moves = record(bus, EVENT_COLUMN_MOVE_REQUEST)
    bus.emit(EVENT_KEY_PRESS, symbol=ord("q"), modifiers=0)
    bus.emit(EVENT_KEY_PRESS)
    assert moves == []
