from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class Direction(Enum):
    """
    A compass direction on a grid whose y axis points down (north is ``y - 1``).
    """

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def as_char(self) -> str:
        return _DIRECTION_CHARS[self]

    @classmethod
    def from_char(cls, c: str) -> "Direction":
        for direction, char in _DIRECTION_CHARS.items():
            if char == c:
                return direction
        raise ValueError(f"Invalid direction {c!r}")


_DIRECTION_CHARS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


@dataclass(frozen=True, order=True)
class Position:
    x: int
    y: int

    def manhattan_distance_to(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def adjacent(self) -> Iterator["Position"]:
        """
        The four orthogonal neighbours, in the order east, south, west, north.
        """
        for direction in (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH):
            yield self.step(direction)

    def direction_to(self, other: "Position") -> Optional[Direction]:
        """
        The direction of ``other`` if it is an orthogonal neighbour, otherwise None.
        """
        delta = (other.x - self.x, other.y - self.y)
        for direction in Direction:
            if direction.delta == delta:
                return direction
        return None
