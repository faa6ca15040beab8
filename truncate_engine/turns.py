"""
Helpers for the turn resolver that apply configured rules to the board.
"""

import logging
from typing import List

from truncate_schemas.game_rules import GameRules, Truncation

from .board import Board
from .reporting import BoardChange
from .tile_supply import TileSupplyProtocol

logger = logging.getLogger(__name__)


def apply_truncation_rule(board: Board, rules: GameRules, bag: TileSupplyProtocol) -> List[BoardChange]:
    """
    Prune disconnected territory if the rules ask for it.

    Returns the Truncated changes, or nothing when truncation is disabled.
    """
    if rules.truncation == Truncation.ROOT:
        return board.truncate(bag)

    logger.debug(f"Truncation rule is {rules.truncation.value}, leaving board untouched")
    return []
