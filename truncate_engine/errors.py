"""
Errors raised by board operations.

Every GamePlayError is recoverable: the turn resolver reports it as a
rejected move and the board is left exactly as it was.
"""

from .geometry import Coordinate


class GamePlayError(Exception):
    """Base class for rejected board operations."""

    message = "Invalid board operation"

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))

    def __str__(self):
        return self.message


class OutSideBoardDimensions(GamePlayError):
    def __init__(self, position: Coordinate):
        super().__init__(position)
        self.position = position

    def __str__(self):
        return f"Coordinate {self.position} is outside of the board"


class InvalidPosition(GamePlayError):
    def __init__(self, position: Coordinate):
        super().__init__(position)
        self.position = position

    def __str__(self):
        return f"Coordinate {self.position} is not a playable square"


class NonExistentPlayer(GamePlayError):
    def __init__(self, index: int):
        super().__init__(index)
        self.index = index

    def __str__(self):
        return f"Player {self.index} does not exist"


class OccupiedPlacement(GamePlayError):
    def __init__(self, position: Coordinate):
        super().__init__(position)
        self.position = position

    def __str__(self):
        return f"Square {self.position} is already occupied"


class SelfSwap(GamePlayError):
    message = "Can't swap a tile with itself"


class DisjointSwap(GamePlayError):
    message = "Can only swap tiles that are connected"


class UnoccupiedSwap(GamePlayError):
    message = "Can only swap occupied squares"


class UnownedSwap(GamePlayError):
    message = "Can only swap your own tiles"


class NoSwapping(GamePlayError):
    message = "Swapping is not allowed"


class EmptySquareInWord(GamePlayError):
    message = "Words can't contain empty squares"


class BoardParseError(ValueError):
    """A board string or board layout is malformed."""
