from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Tuple, Type, Union

from columns.components.position import Vec2
from columns.components.timer import Timer


class CascadeStage(Enum):
    STABLE = auto()
    MATCHING = auto()
    COLLECTING = auto()
    DROPPING = auto()


@dataclass(slots=True)
class LandingOrigins:
    """Cells just written by a landing column, base first."""
    positions: List[Vec2]


@dataclass(slots=True)
class MatchedSet:
    """Cells of qualifying runs, blinking until they are cleared."""
    positions: List[Vec2]


@dataclass(slots=True)
class UnsupportedSet:
    """Blocks left hanging above cleared cells, bottom-most first.

    Positions follow their blocks down while the stage is dropping.
    """
    positions: List[Vec2] = field(default_factory=list)


ActiveSet = Union[LandingOrigins, MatchedSet, UnsupportedSet]

_STAGE_PAYLOADS: Dict[CascadeStage, Tuple[Type, ...]] = {
    CascadeStage.STABLE: (),
    CascadeStage.MATCHING: (LandingOrigins, UnsupportedSet),
    CascadeStage.COLLECTING: (MatchedSet,),
    CascadeStage.DROPPING: (UnsupportedSet,),
}


@dataclass(slots=True)
class CascadeState:
    """Stage machine data of the pit; ``active`` is None exactly while stable."""

    move_timer: Timer
    stage: CascadeStage = CascadeStage.STABLE
    blink_count: int = 0
    depth: int = 0
    active: ActiveSet | None = None

    def enter(self, stage: CascadeStage, active: ActiveSet | None = None) -> None:
        allowed = _STAGE_PAYLOADS[stage]
        if stage is CascadeStage.STABLE:
            if active is not None:
                raise RuntimeError("Stable pit cannot track active positions")
        elif not isinstance(active, allowed):
            raise RuntimeError(f"{stage.name} cannot carry {type(active).__name__}")
        elif not active.positions:
            raise RuntimeError(f"{stage.name} requires at least one active position")
        self.stage = stage
        self.active = active

    def positions(self) -> List[Vec2]:
        if self.active is None:
            return []
        return self.active.positions
