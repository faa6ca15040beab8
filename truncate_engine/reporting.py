"""
Change events produced by board mutations.

These are purely descriptive: the board never reads them back. The
rendering and broadcast layers consume them.
"""

from dataclasses import dataclass
from enum import Enum

from .cell import Cell
from .geometry import Coordinate


class BoardChangeAction(Enum):
    ADDED = "added"
    SWAPPED = "swapped"
    DEFEATED = "defeated"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class BoardChangeDetail:
    """A coordinate and the cell it held (or now holds) for the change."""
    coordinate: Coordinate
    cell: Cell


@dataclass(frozen=True)
class BoardChange:
    detail: BoardChangeDetail
    action: BoardChangeAction
