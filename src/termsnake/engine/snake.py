from __future__ import annotations

from collections.abc import Iterator

from ..linalg import Pos
from .state import Direction


class Snake:
    """Snake body kept in a ring with a moving head index.

    The cells are stored in a list that is never shifted on a plain step:
    the tail slot is overwritten with the new head and the head index moves
    onto it. Only growth inserts into the list.

    Logical order, head to tail, is body[head_index], body[head_index + 1],
    ... wrapping around the end of the list.
    """

    def __init__(self, capacity: int, head: Pos, direction: Direction = Direction.RIGHT):
        if capacity < 1:
            raise ValueError(f"snake capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.body: list[Pos] = [head]
        self.head_index = 0
        self.direction = direction

    @classmethod
    def with_capacity(cls, max_len: int, head: Pos) -> Snake:
        return cls(max_len, head)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Pos]:
        size = len(self.body)
        for i in range(size):
            yield self.body[(self.head_index + i) % size]

    def __contains__(self, pos: object) -> bool:
        return pos in self.body

    def __repr__(self):
        return f"Snake({list(self)!r}, direction={self.direction.name})"

    def head(self) -> Pos:
        return self.body[self.head_index]

    def tail(self) -> Pos:
        return self.body[self._tail_index()]

    def can_step(self, pos: Pos) -> bool:
        # The tail cell is vacated by the same step, so moving onto it is fine.
        try:
            idx = self.body.index(pos)
        except ValueError:
            return True
        return idx == self._tail_index()

    def step(self, pos: Pos) -> None:
        tidx = self._tail_index()
        self.body[tidx] = pos
        self.head_index = tidx

    def grow(self, pos: Pos) -> None:
        if len(self.body) >= self.capacity:
            raise OverflowError(f"snake is at capacity ({self.capacity} cells)")
        self.body.insert(self.head_index, pos)

    def contains(self, pos: Pos) -> bool:
        return pos in self.body

    def _tail_index(self) -> int:
        return (len(self.body) + self.head_index - 1) % len(self.body)
