"""
Tile supply contract used when the board hands letters back.
"""

from __future__ import annotations

from typing import Protocol


class TileSupplyProtocol(Protocol):
    """
    Minimal contract for the tile bag owned by the turn resolver.
    """

    def return_tile(self, letter: str) -> None:
        ...
