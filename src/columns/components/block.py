from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from columns.constants import EMPTY_CODE, HIGHLIGHT_CODE


class BlockKind(Enum):
    """Block colours; the value doubles as the display code."""
    BLUE = 0
    YELLOW = 1
    GREEN = 2
    RED = 3
    CYAN = 4
    MAGENTA = 5


@dataclass(slots=True, eq=False)
class Block:
    """A single pit cell.

    ``highlighted`` is transient blink state and takes no part in equality, so a
    blinking block still matches its neighbours of the same kind.
    """

    kind: BlockKind | None = None
    highlighted: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self.kind == other.kind

    @property
    def empty(self) -> bool:
        return self.kind is None

    def update(self, kind: BlockKind | None) -> None:
        self.kind = kind

    def clear(self) -> None:
        self.kind = None
        self.highlighted = False

    def copy(self) -> Block:
        return Block(kind=self.kind, highlighted=self.highlighted)

    def code(self) -> int:
        if self.highlighted:
            return HIGHLIGHT_CODE
        if self.kind is None:
            return EMPTY_CODE
        return self.kind.value
