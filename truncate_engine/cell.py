"""
The board's atomic unit: a square that is void, empty, or occupied by a player's letter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .geometry import Direction


class CellState(Enum):
    """Cell state enumeration."""
    VOID = 0
    EMPTY = 1
    OCCUPIED = 2


# Upside-down glyphs shown to players seated at the north edge
FLIPPED = dict(zip(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    [
        "∀", "ꓭ", "Ͻ", "ᗡ", "Ǝ", "ᖵ", "⅁", "H", "I", "ᒋ", "ꓘ", "⅂", "ꟽ", "N", "O", "Ԁ", "Ꝺ",
        "ꓤ", "S", "ꓕ", "Ո", "Ʌ", "Ϻ", "X", "⅄", "Z",
    ],
))


def flip_letter(letter: str) -> str:
    """Display glyph for a letter viewed upside down. Characters outside A-Z are unchanged."""
    return FLIPPED.get(letter, letter)


@dataclass(frozen=True)
class Cell:
    """
    A single square of the grid.

    Void cells are not part of the playable territory. Empty cells can
    receive a tile. Occupied cells carry the owning player index and a letter.
    """
    state: CellState
    owner: Optional[int] = None
    letter: Optional[str] = None

    @classmethod
    def void(cls) -> "Cell":
        return VOID

    @classmethod
    def empty(cls) -> "Cell":
        return EMPTY

    @classmethod
    def occupied(cls, owner: int, letter: str) -> "Cell":
        if not isinstance(letter, str) or len(letter) != 1:
            raise ValueError(f"A tile holds exactly one character, got {letter!r}")
        return cls(CellState.OCCUPIED, owner, letter)

    @property
    def is_void(self) -> bool:
        return self.state is CellState.VOID

    @property
    def is_empty(self) -> bool:
        return self.state is CellState.EMPTY

    @property
    def is_occupied(self) -> bool:
        return self.state is CellState.OCCUPIED

    def to_oriented_string(self, orientations: Sequence[Direction]) -> str:
        """Render the cell as seen on screen, flipping letters owned by north-seated players."""
        if self.is_occupied and orientations[self.owner] == Direction.NORTH:
            return flip_letter(self.letter)
        return str(self)

    def __str__(self) -> str:
        if self.is_void:
            return " "
        if self.is_empty:
            return "_"
        return self.letter


VOID = Cell(CellState.VOID)
EMPTY = Cell(CellState.EMPTY)
