"""
Text import and export of boards.

The text format is the one printed by str(Board): one line per row, one
character per square separated by single spaces. ' ' is a void square,
'_' is an empty square and any other character is a tile.
"""

from typing import List, Sequence

from .board import Board
from .cell import EMPTY, VOID, Cell
from .errors import BoardParseError
from .geometry import Coordinate, Direction


def _parse_square(character: str) -> Cell:
    if character == " ":
        return VOID
    if character == "_":
        return EMPTY
    # Ownership is resolved from the roots once the whole grid is read
    return Cell.occupied(0, character)


def board_from_string(
    text: str,
    roots: Sequence[Coordinate],
    orientations: Sequence[Direction],
) -> Board:
    """
    Build a board from its text rendering.

    Every tile starts out owned by player 0. Tiles connected to the root of
    each later player are then reassigned to that player, in root order.
    """
    if len(roots) != len(orientations):
        raise BoardParseError("Every player needs a root and orientation")

    squares: List[List[Cell]] = []
    for line in text.split("\n"):
        if any(separator != " " for separator in line[1::2]):
            raise BoardParseError("board strings should have spaces to separate each tile")
        squares.append([_parse_square(character) for character in line[::2]])

    if any(len(row) != len(squares[0]) for row in squares[1:]):
        raise BoardParseError("Unequal line lengths")

    board = Board(squares, roots, orientations)
    for player, root in enumerate(roots):
        if player == 0:
            continue
        for coordinate in board.depth_first_search(root):
            board.set(coordinate, player, board.get(coordinate).letter)
    return board


def grid_string(board: Board) -> str:
    """The grid rows of the board text, without the roots line."""
    return board_to_string(board, with_roots=False)


def board_to_string(board: Board, with_roots: bool = True) -> str:
    text = str(board)
    if with_roots:
        return text
    return text.rsplit("\nRoots:", 1)[0]


def oriented_grid_string(board: Board) -> str:
    """The grid as displayed on screen, with letters of north-seated players flipped."""
    orientations = board.orientations
    return "\n".join(
        " ".join(cell.to_oriented_string(orientations) for cell in row)
        for row in board.rows()
    )
