from __future__ import annotations

from dataclasses import dataclass, field

# Float deltas rarely sum to the interval exactly.
_EPSILON = 1e-9


@dataclass(slots=True)
class Timer:
    """Countdown clock advanced by elapsed wall-time deltas in seconds."""

    seconds: float
    remaining: float = field(init=False)
    ready: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.remaining = self.seconds

    def update(self, delta: float) -> None:
        self.remaining = max(0.0, self.remaining - delta)
        self.ready = self.remaining <= _EPSILON

    def finish(self) -> None:
        self.remaining = 0.0
        self.ready = True

    def reset(self) -> None:
        self.remaining = self.seconds
        self.ready = False

    def copy(self) -> Timer:
        clone = Timer(self.seconds)
        clone.remaining = self.remaining
        clone.ready = self.ready
        return clone
