"""
Utility helpers for building test boards.
"""

from typing import List, Sequence

from truncate_engine.board_io import board_from_string
from truncate_engine.geometry import Coordinate, Direction


class RecordingBag:
    """Tile supply stand-in that remembers every returned letter."""

    def __init__(self):
        self.returned: List[str] = []

    def return_tile(self, letter: str) -> None:
        self.returned.append(letter)


def make_board(rows: Sequence[str], roots: Sequence[Coordinate], orientations: Sequence[Direction]):
    """Build a board from a list of row strings."""
    return board_from_string("\n".join(rows), list(roots), list(orientations))


def column(x: int, ys: Sequence[int]) -> List[Coordinate]:
    return [Coordinate(x, y) for y in ys]


def row(y: int, xs: Sequence[int]) -> List[Coordinate]:
    return [Coordinate(x, y) for x in xs]
