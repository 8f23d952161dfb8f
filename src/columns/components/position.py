from typing import NamedTuple


class Vec2(NamedTuple):
    """Grid coordinate: ``x`` is the column, ``y`` the row (0 = top)."""

    x: int
    y: int

    @classmethod
    def xy(cls, x: int, y: int) -> "Vec2":
        return cls(x, y)
