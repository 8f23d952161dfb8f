from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of systems alive without an extra owner.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_COLUMN_MOVE_REQUEST = "column_move_request"  # payload: direction=str ('left'|'right'|'down'|'cycle')
EVENT_QUIT_REQUEST = "quit_request"                # payload: None


# ============================================================================
# FALLING COLUMN
# ============================================================================
EVENT_COLUMN_SPAWNED = "column_spawned"            # payload: column=Column, upcoming=Column
EVENT_COLUMN_LANDED = "column_landed"              # payload: positions=[Vec2,...]


# ============================================================================
# CASCADE
# ============================================================================
EVENT_MATCH_FOUND = "match_found"                  # payload: positions=[Vec2,...], size=int
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[Vec2,...]
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: positions=[Vec2,...]
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, positions=[Vec2,...]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: reason=str
