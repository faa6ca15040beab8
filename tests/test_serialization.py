"""
Tests for converting boards and changes to the wire schemas.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from truncate_engine.board import Board
from truncate_engine.cell import Cell
from truncate_engine.errors import BoardParseError
from truncate_engine.geometry import Coordinate, Direction
from truncate_engine.serialization import (
    board_from_state, board_to_state, change_to_message, player_view
)
from truncate_schemas.board_state import (
    BoardState, ChangeAction, Position, SquareKind, SquareMessage
)
from truncate_schemas.game_rules import GameRules, Visibility
from tests.utils_boards import make_board


def test_board_to_state():
    board = Board.new(3, 1, False)
    board.set(Coordinate(1, 1), 0, 'A')
    state = board_to_state(board)

    assert len(state.squares) == 3
    assert state.squares[0][0].kind == SquareKind.VOID
    assert state.squares[0][1].kind == SquareKind.EMPTY
    assert state.squares[1][1] == SquareMessage(kind=SquareKind.OCCUPIED, owner=0, letter='A')
    assert state.roots == [Position(x=1, y=0), Position(x=1, y=2)]
    assert state.orientations == ["north", "south"]


def test_state_round_trip_through_json():
    board = make_board(["_ C A T _", "_ _ _ _ _", "_ D O G _"], [Coordinate(1, 0), Coordinate(1, 2)],
                       [Direction.NORTH, Direction.SOUTH])
    payload = board_to_state(board).model_dump_json()
    restored = board_from_state(BoardState.model_validate_json(payload))
    assert restored == board
    assert restored.get(Coordinate(2, 2)) == Cell.occupied(1, 'O')


def test_board_from_state_checks_roots():
    state = BoardState(
        squares=[[SquareMessage(kind=SquareKind.VOID), SquareMessage(kind=SquareKind.EMPTY)]],
        roots=[Position(x=0, y=0)],
        orientations=["south"],
    )
    with pytest.raises(BoardParseError):
        board_from_state(state)


def test_board_from_state_checks_owners():
    state = board_to_state(Board.new(3, 1, False))
    state.squares[1][1] = SquareMessage(kind=SquareKind.OCCUPIED, owner=5, letter='A')
    with pytest.raises(BoardParseError, match="non-existent player 5"):
        board_from_state(state)


def test_schema_validation():
    with pytest.raises(ValidationError):
        SquareMessage(kind=SquareKind.OCCUPIED, owner=0)
    with pytest.raises(ValidationError):
        SquareMessage(kind=SquareKind.EMPTY, owner=0, letter='A')
    with pytest.raises(ValidationError):
        BoardState(squares=[], roots=[Position(x=0, y=0)], orientations=[])
    with pytest.raises(ValidationError):
        Position(x=-1, y=0)


def test_change_to_message():
    board = Board.new(3, 1, False)
    change = board.place(1, Coordinate(2, 1), 'E')
    message = change_to_message(change)

    assert message.action == ChangeAction.ADDED
    assert message.position == Position(x=2, y=1)
    assert message.square.letter == 'E'
    assert message.square.owner == 1
    assert message.model_dump(mode="json")["action"] == "added"


def test_player_view_applies_fog():
    board = make_board(["_ _ _ _ _"], [Coordinate(0, 0), Coordinate(4, 0)], [Direction.SOUTH, Direction.NORTH])
    board.set(Coordinate(0, 0), 0, 'A')
    board.set(Coordinate(4, 0), 1, 'Q')

    foggy = player_view(board, 0, GameRules())
    assert foggy.squares[0][4].kind == SquareKind.EMPTY

    clear = player_view(board, 0, GameRules(visibility=Visibility.STANDARD))
    assert clear.squares[0][4].letter == 'Q'

    finished = player_view(board, 0, GameRules(), winner=1)
    assert finished.squares[0][4].letter == 'Q'
