"""
Climbing a height map: walk from the start square to the end square, one step at
a time, never climbing more than one level per step (descending is unrestricted).

The input is a grid of letters, ``a`` lowest through ``z`` highest. ``S`` marks the
start, at height ``a``, and ``E`` marks the end, at height ``z``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from frozendict import frozendict

from bestfirst.search.astar_search import Found
from bestfirst.search.multi_source import solve_from_any
from bestfirst.search_node.search_node import SearchNode

from .grid import Position


@dataclass(frozen=True)
class HeightMap:
    heights: Dict[Position, int]  # actually a frozendict
    start: Position
    end: Position
    width: int
    height: int

    @classmethod
    def parse(cls, text: str) -> "HeightMap":
        heights = {}
        start = end = None
        rows = [row for row in text.splitlines() if row.strip()]
        for y, row in enumerate(rows):
            for x, c in enumerate(row):
                position = Position(x, y)
                if c == "S":
                    start = position
                elif c == "E":
                    end = position
                heights[position] = _height_of(c)
        if start is None:
            raise ValueError("Start position not specified")
        if end is None:
            raise ValueError("End position not specified")
        return cls(
            frozendict(heights),
            start,
            end,
            width=max(p.x for p in heights) + 1,
            height=len(rows),
        )

    def height_at(self, position: Position) -> Optional[int]:
        return self.heights.get(position)

    def node(self, position: Position) -> "ClimbNode":
        return ClimbNode(self, position)


def _height_of(c: str) -> int:
    if c == "S":
        c = "a"
    elif c == "E":
        c = "z"
    if not "a" <= c <= "z":
        raise ValueError(f"Invalid height {c!r}")
    return ord(c) - ord("a")


@dataclass(frozen=True)
class ClimbNode(SearchNode):
    height_map: HeightMap = field(compare=False, repr=False)
    position: Position

    def heuristic(self):
        hm = self.height_map
        climb = hm.heights[hm.end] - hm.heights[self.position]
        return max(self.position.manhattan_distance_to(hm.end), climb)

    def successors(self):
        limit = self.height_map.heights[self.position] + 1
        for position in self.position.adjacent():
            h = self.height_map.height_at(position)
            if h is not None and h <= limit:
                yield 1, ClimbNode(self.height_map, position)

    def is_end(self):
        return self.position == self.height_map.end


def lowest_points(height_map: HeightMap) -> List[Position]:
    return sorted(p for p, h in height_map.heights.items() if h == 0)


def find_route(
    height_map: HeightMap, starts: Sequence[Position]
) -> Optional[Found]:
    """
    The shortest route to the end from any of the given start positions, with
    each position in the path given as a ``Position``.
    """
    result = solve_from_any(starts, height_map.node, key=lambda node: node.position)
    if result is None:
        return None
    return result.map_path(lambda node: node.position)


def shortest_route(
    height_map: HeightMap, starts: Optional[Sequence[Position]] = None
) -> Optional[int]:
    """
    The number of steps on the shortest route to the end, starting from any of the
    given positions (by default, just the start square). None if unreachable.
    """
    if starts is None:
        starts = [height_map.start]
    result = find_route(height_map, starts)
    return None if result is None else result.cost


def render_route(height_map: HeightMap, path: Iterable[Position]) -> str:
    """
    Draw the map with the route marked by arrows pointing along it. Squares not on
    the route show their height.
    """
    path = list(path)
    arrows = {}
    for here, there in zip(path, path[1:]):
        direction = here.direction_to(there)
        assert direction is not None, (here, there)
        arrows[here] = direction.as_char()
    lines = []
    for y in range(height_map.height):
        row = []
        for x in range(height_map.width):
            position = Position(x, y)
            if position in arrows:
                row.append(arrows[position])
            elif position == height_map.end:
                row.append("E")
            elif position in height_map.heights:
                row.append(chr(ord("a") + height_map.heights[position]))
            else:
                row.append(" ")
        lines.append("".join(row))
    return "\n".join(lines)
