"""
Board geometry: compass directions and grid coordinates.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


class Direction(str, Enum):
    """The eight compass directions. Also used as the side of the board a player sits at."""
    NORTH_WEST = "north_west"
    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def read_top_to_bottom(self) -> bool:
        """Whether vertical words are read downward by a player seated on this side."""
        return self in (Direction.SOUTH, Direction.WEST)

    def read_left_to_right(self) -> bool:
        """Whether horizontal words are read rightward by a player seated on this side."""
        return self in (Direction.SOUTH, Direction.EAST)


_OPPOSITES = {
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
    Direction.NORTH: Direction.SOUTH,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.WEST: Direction.EAST,
}

_STEPS = {
    Direction.NORTH_WEST: (-1, -1),
    Direction.NORTH: (0, -1),
    Direction.NORTH_EAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTH_WEST: (-1, 1),
    Direction.WEST: (-1, 0),
}


@total_ordering
@dataclass(frozen=True)
class Coordinate:
    """
    A square on the board.

    x grows rightward and y grows downward. Coordinates sort row by row
    (y first) so iteration over sets of them is deterministic.
    """
    x: int
    y: int

    def __lt__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def add(self, direction: Direction) -> "Coordinate":
        """
        Step once in a direction.

        Steps off the north or west edge clamp to zero, so the result is
        the edge square itself rather than an invalid coordinate.
        """
        dx, dy = _STEPS[direction]
        return Coordinate(max(self.x + dx, 0), max(self.y + dy, 0))

    def neighbors_4(self) -> List["Coordinate"]:
        """Horizontal and vertical neighbours, from north clockwise."""
        return [
            self.add(Direction.NORTH),
            self.add(Direction.EAST),
            self.add(Direction.SOUTH),
            self.add(Direction.WEST),
        ]

    def neighbors_8(self) -> List["Coordinate"]:
        """All neighbours including diagonals, from north-west clockwise."""
        return [
            self.add(Direction.NORTH_WEST),
            self.add(Direction.NORTH),
            self.add(Direction.NORTH_EAST),
            self.add(Direction.EAST),
            self.add(Direction.SOUTH_EAST),
            self.add(Direction.SOUTH),
            self.add(Direction.SOUTH_WEST),
            self.add(Direction.WEST),
        ]

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
