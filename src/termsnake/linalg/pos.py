from __future__ import annotations


class Pos:
    """Integer grid coordinate, also used as a direction vector."""

    def __init__(self, x: int = 0, y: int = 0):
        self.x, self.y = x, y

    @classmethod
    def splat(cls, v: int) -> Pos:
        return cls(v, v)

    def __add__(self, other: Pos) -> Pos:
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos) -> Pos:
        return Pos(self.x - other.x, self.y - other.y)

    def __mul__(self, other: int) -> Pos:
        return Pos(self.x * other, self.y * other)

    def __rmul__(self, other: int) -> Pos:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Pos{(self.x, self.y)}"

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


# A board is a Pos read as (width, height).
Board = Pos
