"""
Crossing a valley full of blizzards. Each blizzard moves one square per minute in
its direction, wrapping around to the other side of the valley when it reaches a
wall. Each minute the expedition may move to a neighbouring square or wait, but
may never share a square with a blizzard.

Because the search runs over (position, time) pairs, this is a time-expanded map.
Blizzard positions repeat with a period of ``lcm(width, height)`` minutes, so two
states at the same position and the same phase of that cycle are the same vertex.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from frozendict import frozendict

from bestfirst.search.astar_search import solve
from bestfirst.search_node.search_node import SearchNode

from .grid import Direction, Position


@dataclass(frozen=True)
class Valley:
    """
    :param width: Width of the interior, excluding walls.
    :param height: Height of the interior, excluding walls.
    :param blizzards: For each direction, a map from row (for east/west) or column
        (for north/south) to the initial offsets of the blizzards along it.
    :param entrance: The opening in the top wall.
    :param exit: The opening in the bottom wall.
    """

    width: int
    height: int
    blizzards: Dict[Direction, Dict[int, Tuple[int, ...]]]  # actually frozendicts
    entrance: Position
    exit: Position

    @classmethod
    def parse(cls, text: str) -> "Valley":
        grid = [line.strip() for line in text.splitlines() if line.strip()]
        if len(grid) < 3:
            raise ValueError("Valley has no interior")
        height = len(grid) - 2
        width = len(grid[0]) - 2
        if width <= 0:
            raise ValueError("Valley has no interior")
        for y, line in enumerate(grid):
            if len(line) != width + 2:
                raise ValueError(
                    f"Row {y} has length {len(line)}, expected {width + 2}"
                )
        if grid[0][1] != ".":
            raise ValueError("Entrance not found in the top wall")
        if grid[-1][width] != ".":
            raise ValueError("Exit not found in the bottom wall")

        lanes = {direction: {} for direction in Direction}
        for y in range(height):
            for x in range(width):
                c = grid[y + 1][x + 1]
                if c == ".":
                    continue
                direction = Direction.from_char(c)
                if direction in (Direction.EAST, Direction.WEST):
                    lanes[direction].setdefault(y, []).append(x)
                else:
                    lanes[direction].setdefault(x, []).append(y)

        return cls(
            width,
            height,
            frozendict(
                {
                    direction: frozendict(
                        {lane: tuple(offsets) for lane, offsets in by_lane.items()}
                    )
                    for direction, by_lane in lanes.items()
                }
            ),
            entrance=Position(0, -1),
            exit=Position(width - 1, height),
        )

    @property
    def period(self) -> int:
        return math.lcm(self.width, self.height)

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def is_free_at(self, position: Position, time: int) -> bool:
        """
        Whether the expedition may stand at the given position at the given minute.
        """
        if position in (self.entrance, self.exit):
            return True
        if not self.in_bounds(position):
            return False
        for direction in Direction:
            dx, dy = direction.delta
            if dx:
                lane, here, step, modulo = position.y, position.x, dx, self.width
            else:
                lane, here, step, modulo = position.x, position.y, dy, self.height
            for offset in self.blizzards[direction].get(lane, ()):
                if (offset + step * time) % modulo == here:
                    return False
        return True

    def node(self, position: Position, time: int, goal: Position) -> "ExpeditionNode":
        return ExpeditionNode(self, goal, position, time)


@dataclass(frozen=True)
class ExpeditionNode(SearchNode):
    valley: Valley = field(compare=False, repr=False)
    goal: Position = field(compare=False)
    position: Position
    time: int = field(compare=False)
    phase: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "phase", self.time % self.valley.period)

    def heuristic(self):
        return self.position.manhattan_distance_to(self.goal)

    def successors(self):
        time = self.time + 1
        for position in (self.position, *self.position.adjacent()):
            if self.valley.is_free_at(position, time):
                yield 1, ExpeditionNode(self.valley, self.goal, position, time)

    def is_end(self):
        return self.position == self.goal


def crossing_time(
    valley: Valley, start: Position, goal: Position, time: int = 0
) -> Optional[int]:
    """
    The number of minutes needed to get from ``start`` to ``goal``, setting off at
    minute ``time``. None if the goal can never be reached.
    """
    result = solve(valley.node(start, time, goal))
    if not result:
        return None
    return result.cost


def quickest_route(valley: Valley) -> Optional[int]:
    """
    The fewest minutes needed to get from the entrance to the exit.
    """
    return crossing_time(valley, valley.entrance, valley.exit)


def quickest_round_trip(valley: Valley) -> Optional[int]:
    """
    The fewest minutes needed to reach the exit, go back to the entrance, and then
    reach the exit again.
    """
    legs = [
        (valley.entrance, valley.exit),
        (valley.exit, valley.entrance),
        (valley.entrance, valley.exit),
    ]
    time = 0
    for start, goal in legs:
        minutes = crossing_time(valley, start, goal, time)
        if minutes is None:
            return None
        time += minutes
    return time
