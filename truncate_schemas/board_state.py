"""
Pydantic schemas for board snapshots and board change notifications.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class SquareKind(str, Enum):
    VOID = "void"
    EMPTY = "empty"
    OCCUPIED = "occupied"


class ChangeAction(str, Enum):
    """What happened to a square."""
    ADDED = "added"
    SWAPPED = "swapped"
    DEFEATED = "defeated"
    TRUNCATED = "truncated"


class Position(BaseModel):
    """Position on the board. x grows rightward, y grows downward."""
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class SquareMessage(BaseModel):
    """A single square as sent to clients."""
    kind: SquareKind
    owner: Optional[int] = Field(default=None, ge=0)
    letter: Optional[str] = Field(default=None, min_length=1, max_length=1)

    @model_validator(mode="after")
    def _occupant_matches_kind(self) -> "SquareMessage":
        occupied = self.kind == SquareKind.OCCUPIED
        if occupied != (self.owner is not None) or occupied != (self.letter is not None):
            raise ValueError("owner and letter are required for occupied squares and only for them")
        return self


class BoardChangeMessage(BaseModel):
    """Notification of a single square change."""
    action: ChangeAction
    position: Position
    square: SquareMessage

    class Config:
        json_schema_extra = {
            "example": {
                "action": "swapped",
                "position": {"x": 4, "y": 2},
                "square": {"kind": "occupied", "owner": 0, "letter": "A"}
            }
        }


class BoardState(BaseModel):
    """Snapshot of a board, possibly filtered to a single player's view."""
    squares: List[List[SquareMessage]] = Field(description="Rows of squares, top to bottom")
    roots: List[Position] = Field(description="Root square per player, indexed by player")
    orientations: List[str] = Field(description="Side of the board each player sits at, indexed by player")

    class Config:
        json_schema_extra = {
            "example": {
                "squares": [
                    [{"kind": "void"}, {"kind": "empty"}, {"kind": "void"}],
                    [{"kind": "empty"}, {"kind": "occupied", "owner": 0, "letter": "A"}, {"kind": "empty"}],
                    [{"kind": "void"}, {"kind": "empty"}, {"kind": "void"}]
                ],
                "roots": [{"x": 1, "y": 0}, {"x": 1, "y": 2}],
                "orientations": ["north", "south"]
            }
        }

    @model_validator(mode="after")
    def _players_consistent(self) -> "BoardState":
        if len(self.roots) != len(self.orientations):
            raise ValueError("Every player needs a root and orientation")
        return self
