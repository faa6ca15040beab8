"""
Pydantic schemas for the Truncate board core.
"""

from .board_state import (
    BoardChangeMessage, BoardState, ChangeAction, Position,
    SquareKind, SquareMessage
)
from .game_rules import (
    BattleRules, GameRules, OvertimeKind, OvertimeRule, SwapPenalty,
    SwapPolicy, Swapping, TileBagBehaviour, TileDistribution, Timing,
    TimingKind, Truncation, Visibility, WinCondition
)

__all__ = [
    "BoardChangeMessage",
    "BoardState",
    "ChangeAction",
    "Position",
    "SquareKind",
    "SquareMessage",
    "BattleRules",
    "GameRules",
    "OvertimeKind",
    "OvertimeRule",
    "SwapPenalty",
    "SwapPolicy",
    "Swapping",
    "TileBagBehaviour",
    "TileDistribution",
    "Timing",
    "TimingKind",
    "Truncation",
    "Visibility",
    "WinCondition"
]
