"""
Conversion between engine objects and the pydantic wire schemas.
"""

from typing import Optional

from truncate_schemas.board_state import (
    BoardChangeMessage, BoardState, ChangeAction, Position, SquareKind,
    SquareMessage
)
from truncate_schemas.game_rules import GameRules

from .board import Board
from .cell import EMPTY, VOID, Cell, CellState
from .geometry import Coordinate, Direction
from .reporting import BoardChange

_KINDS = {
    CellState.VOID: SquareKind.VOID,
    CellState.EMPTY: SquareKind.EMPTY,
    CellState.OCCUPIED: SquareKind.OCCUPIED,
}


def position_to_message(coordinate: Coordinate) -> Position:
    return Position(x=coordinate.x, y=coordinate.y)


def cell_to_message(cell: Cell) -> SquareMessage:
    return SquareMessage(kind=_KINDS[cell.state], owner=cell.owner, letter=cell.letter)


def cell_from_message(square: SquareMessage) -> Cell:
    if square.kind == SquareKind.VOID:
        return VOID
    if square.kind == SquareKind.EMPTY:
        return EMPTY
    return Cell.occupied(square.owner, square.letter)


def change_to_message(change: BoardChange) -> BoardChangeMessage:
    """Describe a board change for the broadcast layer."""
    return BoardChangeMessage(
        action=ChangeAction(change.action.value),
        position=position_to_message(change.detail.coordinate),
        square=cell_to_message(change.detail.cell),
    )


def board_to_state(board: Board) -> BoardState:
    return BoardState(
        squares=[[cell_to_message(cell) for cell in row] for row in board.rows()],
        roots=[position_to_message(root) for root in board.roots],
        orientations=[orientation.value for orientation in board.orientations],
    )


def board_from_state(state: BoardState) -> Board:
    """Rebuild a board from a snapshot. Raises BoardParseError for inconsistent snapshots."""
    return Board(
        [[cell_from_message(square) for square in row] for row in state.squares],
        [Coordinate(root.x, root.y) for root in state.roots],
        [Direction(orientation) for orientation in state.orientations],
    )


def player_view(board: Board, player: int, rules: GameRules, winner: Optional[int] = None) -> BoardState:
    """The snapshot sent to a single player, filtered by the visibility rule."""
    return board_to_state(board.filter_to_player(player, rules.visibility, winner))
