"""
Truncate board engine package.

This package contains the core board logic for Truncate, including:
- Coordinates and directions
- The board grid, roots and orientations
- Connectivity, truncation and word extraction
- Swapping and fog of war
- Text and schema conversion of boards
"""

from .board import Board
from .board_io import board_from_string, board_to_string, grid_string
from .cell import Cell, CellState, flip_letter
from .errors import (
    BoardParseError, DisjointSwap, EmptySquareInWord, GamePlayError,
    InvalidPosition, NonExistentPlayer, NoSwapping, OccupiedPlacement,
    OutSideBoardDimensions, SelfSwap, UnoccupiedSwap, UnownedSwap
)
from .geometry import Coordinate, Direction
from .reporting import BoardChange, BoardChangeAction, BoardChangeDetail
from .tile_supply import TileSupplyProtocol

__all__ = [
    'Board', 'board_from_string', 'board_to_string', 'grid_string',
    'Cell', 'CellState', 'flip_letter',
    'Coordinate', 'Direction',
    'BoardChange', 'BoardChangeAction', 'BoardChangeDetail',
    'TileSupplyProtocol',
    'GamePlayError', 'BoardParseError', 'OutSideBoardDimensions', 'InvalidPosition',
    'NonExistentPlayer', 'OccupiedPlacement', 'SelfSwap', 'DisjointSwap',
    'UnoccupiedSwap', 'UnownedSwap', 'NoSwapping', 'EmptySquareInWord'
]
