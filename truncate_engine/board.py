"""
Truncate board implementation: the authoritative grid, player roots and
orientations, and every rule that reads or mutates territory.
"""

import logging
import os
import time
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from truncate_schemas.game_rules import SwapPolicy, Swapping, Visibility

from .cell import EMPTY, VOID, Cell
from .errors import (
    BoardParseError, DisjointSwap, EmptySquareInWord, InvalidPosition,
    NonExistentPlayer, NoSwapping, OccupiedPlacement, OutSideBoardDimensions,
    SelfSwap, UnoccupiedSwap, UnownedSwap
)
from .geometry import Coordinate, Direction
from .reporting import BoardChange, BoardChangeAction, BoardChangeDetail
from .tile_supply import TileSupplyProtocol

logger = logging.getLogger(__name__)

# Timing logs for truncation and fog computation (controlled via environment variable)
BOARD_DEBUG = bool(os.getenv("TRUNCATE_BOARD_DEBUG", ""))

Word = List[Coordinate]


def _void_grid(height: int, width: int) -> np.ndarray:
    return np.full((height, width), VOID, dtype=object)


class Board:
    """
    Truncate game board.

    The grid is a 2D object array of Cells indexed [y, x]. Each player has a
    root square that their territory must stay connected to, and an
    orientation: the side of the board they sit at, which decides the
    direction they read their words in.
    """

    DEFAULT_WIDTH = 9
    DEFAULT_HEIGHT = 9

    def __init__(self, squares, roots: Sequence[Coordinate], orientations: Sequence[Direction]):
        if isinstance(squares, np.ndarray):
            self._grid = squares.copy()
        else:
            self._grid = np.array(squares, dtype=object)
        self.roots: List[Coordinate] = list(roots)
        self._orientations: List[Direction] = [Direction(o) for o in orientations]
        self.validate()

    @classmethod
    def new(cls, width: int, height: int, padded: bool) -> "Board":
        """
        Create a board with a width x height playable centre.

        One extra void row above and below houses the roots of player 0
        (top) and player 1 (bottom), so the grid is height + 2 rows tall.
        Padding adds a further void ring around everything.
        """
        if width < 1 or height < 0:
            raise ValueError(f"Invalid board size {width}x{height}")

        roots = [
            Coordinate(width // 2 + width % 2 - 1, 0),
            Coordinate(width // 2, height + 1),
        ]

        grid = _void_grid(height + 2, width)
        grid[1:height + 1, :] = EMPTY
        for root in roots:
            grid[root.y, root.x] = EMPTY

        board = cls(grid, roots, [Direction.NORTH, Direction.SOUTH])
        if padded:
            board.grow()
        return board

    @classmethod
    def default(cls) -> "Board":
        return cls.new(cls.DEFAULT_WIDTH, cls.DEFAULT_HEIGHT, True)

    def validate(self) -> None:
        """Check the board layout, raising BoardParseError for anything unusable."""
        if self._grid.ndim != 2:
            raise BoardParseError("Unequal line lengths")
        if len(self.roots) != len(self._orientations):
            raise BoardParseError("Every player needs a root and orientation")
        for player, root in enumerate(self.roots):
            cell = self._cell(root)
            if cell is None or cell.is_void:
                raise BoardParseError(f"Root {root} of player {player} must be a playable square")
        for coordinate, cell in self.iter_cells():
            if cell.is_occupied and not 0 <= cell.owner < len(self.roots):
                raise BoardParseError(f"Square {coordinate} is owned by non-existent player {cell.owner}")

    # Dimensions and accessors

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def orientations(self) -> Tuple[Direction, ...]:
        return tuple(self._orientations)

    @property
    def player_count(self) -> int:
        return len(self.roots)

    def get_root(self, player: int) -> Coordinate:
        if not 0 <= player < len(self.roots):
            raise NonExistentPlayer(player)
        return self.roots[player]

    def _in_bounds(self, position: Coordinate) -> bool:
        return 0 <= position.y < self.height and 0 <= position.x < self.width

    def _cell(self, position: Coordinate) -> Optional[Cell]:
        """Raw cell lookup, including void cells. None when off the grid."""
        if not self._in_bounds(position):
            return None
        return self._grid[position.y, position.x]

    def _owned_by(self, position: Coordinate, player: int) -> bool:
        cell = self._cell(position)
        return cell is not None and cell.is_occupied and cell.owner == player

    def iter_cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Every grid cell, void ones included, row by row."""
        for (y, x), cell in np.ndenumerate(self._grid):
            yield Coordinate(x, y), cell

    def get(self, position: Coordinate) -> Cell:
        """Get the playable cell at a position."""
        cell = self._cell(position)
        if cell is None:
            raise OutSideBoardDimensions(position)
        if cell.is_void:
            raise InvalidPosition(position)
        return cell

    def set(self, position: Coordinate, player: int, letter: str) -> BoardChangeDetail:
        """Occupy an existing square with a player's letter, replacing whatever was there."""
        if not 0 <= player < len(self.roots):
            raise NonExistentPlayer(player)
        self.get(position)

        cell = Cell.occupied(player, letter)
        self._grid[position.y, position.x] = cell
        return BoardChangeDetail(position, cell)

    def clear(self, position: Coordinate) -> Optional[BoardChangeDetail]:
        """Empty an occupied square, returning what it held. Void and empty squares are ignored."""
        cell = self._cell(position)
        if cell is None or not cell.is_occupied:
            return None
        self._grid[position.y, position.x] = EMPTY
        return BoardChangeDetail(position, cell)

    def place(self, player: int, position: Coordinate, letter: str) -> BoardChange:
        """Put a new tile on an empty square."""
        if not 0 <= player < len(self.roots):
            raise NonExistentPlayer(player)
        if not self.get(position).is_empty:
            raise OccupiedPlacement(position)
        return BoardChange(self.set(position, player, letter), BoardChangeAction.ADDED)

    def neighbouring_squares(self, position: Coordinate) -> List[Tuple[Coordinate, Cell]]:
        """Playable orthogonal neighbours of a position, from north clockwise."""
        squares = []
        for neighbour in position.neighbors_4():
            if neighbour == position:
                continue
            cell = self._cell(neighbour)
            if cell is not None and not cell.is_void:
                squares.append((neighbour, cell))
        return squares

    # Grid shape

    def grow(self) -> None:
        """Add a void square to every edge of the board."""
        grid = _void_grid(self.height + 2, self.width + 2)
        grid[1:-1, 1:-1] = self._grid
        self._grid = grid
        self.roots = [Coordinate(root.x + 1, root.y + 1) for root in self.roots]

    def trim(self) -> None:
        """Remove edge rows and columns that contain only void squares."""
        if self._grid.size == 0:
            return
        playable = np.vectorize(lambda cell: not cell.is_void, otypes=[bool])(self._grid)
        rows = np.flatnonzero(playable.any(axis=1))
        cols = np.flatnonzero(playable.any(axis=0))
        if rows.size == 0:
            return

        trim_top = int(rows[0])
        trim_bottom = self.height - 1 - int(rows[-1])
        trim_left = int(cols[0])
        trim_right = self.width - 1 - int(cols[-1])

        self.roots = [
            Coordinate(max(root.x - trim_left, 0), max(root.y - trim_top, 0))
            for root in self.roots
        ]
        self._grid = self._grid[trim_top:self.height - trim_bottom, trim_left:self.width - trim_right]
        logger.debug(f"Trimmed board: top={trim_top}, bottom={trim_bottom}, left={trim_left}, right={trim_right}")

    def extend(self, side: Direction) -> None:
        """Add a single void row or column along one edge."""
        if side == Direction.NORTH:
            self._grid = np.vstack([_void_grid(1, self.width), self._grid])
            self.roots = [Coordinate(root.x, root.y + 1) for root in self.roots]
        elif side == Direction.SOUTH:
            self._grid = np.vstack([self._grid, _void_grid(1, self.width)])
        elif side == Direction.WEST:
            self._grid = np.hstack([_void_grid(self.height, 1), self._grid])
            self.roots = [Coordinate(root.x + 1, root.y) for root in self.roots]
        elif side == Direction.EAST:
            self._grid = np.hstack([self._grid, _void_grid(self.height, 1)])
        else:
            raise ValueError(f"Can only extend the board along a straight edge, not {side.value}")

    def toggle_square(self, position: Coordinate) -> Cell:
        """Board editing: turn a void square playable, or a playable square void."""
        cell = self._cell(position)
        if cell is None:
            raise OutSideBoardDimensions(position)
        if position in self.roots:
            raise ValueError(f"Root square {position} can't be removed")

        new_cell = EMPTY if cell.is_void else VOID
        self._grid[position.y, position.x] = new_cell
        return new_cell

    def move_root(self, player: int, position: Coordinate) -> None:
        """Board editing: move a player's root to another playable square."""
        current = self.get_root(player)
        self.get(position)
        if position != current and position in self.roots:
            raise ValueError(f"Square {position} is already a root")
        self.roots[player] = position

    def get_near_edge(self, side: Direction) -> List[Coordinate]:
        """The row or column just inside the given edge."""
        if side == Direction.NORTH:
            return [Coordinate(x, 1) for x in range(self.width)]
        if side == Direction.SOUTH:
            return [Coordinate(x, self.height - 2) for x in range(self.width)]
        if side == Direction.EAST:
            return [Coordinate(self.width - 2, y) for y in range(self.height)]
        if side == Direction.WEST:
            return [Coordinate(1, y) for y in range(self.height)]
        return []

    # Connectivity

    def depth_first_search(self, position: Coordinate) -> Set[Coordinate]:
        """
        The contiguous group of same-owner tiles containing a position.

        Returns an empty set if the position is not occupied.
        """
        start = self._cell(position)
        if start is None or not start.is_occupied:
            return set()

        owner = start.owner
        visited = {position}
        stack = [position]
        while stack:
            current = stack.pop()
            for neighbour, cell in self.neighbouring_squares(current):
                if neighbour not in visited and cell.is_occupied and cell.owner == owner:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return visited

    def truncate(self, bag: TileSupplyProtocol) -> List[BoardChange]:
        """
        Remove every tile that is not connected to a root.

        The letters of removed tiles are returned to the bag.
        """
        start = time.perf_counter()
        attached: Set[Coordinate] = set()
        for root in self.roots:
            attached.update(self.depth_first_search(root))

        changes = []
        for coordinate, cell in list(self.iter_cells()):
            if cell.is_occupied and coordinate not in attached:
                bag.return_tile(cell.letter)
                changes.append(BoardChange(self.clear(coordinate), BoardChangeAction.TRUNCATED))

        logger.debug(f"Truncation removed {len(changes)} tiles, {len(attached)} remain attached")
        if BOARD_DEBUG:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.info(f"Truncate: removed={len(changes)}, elapsed_ms={elapsed_ms:.2f}")
        return changes

    # Words

    def _walk(self, position: Coordinate, direction: Direction, owner: int) -> Word:
        """Consecutive squares owned by owner, stepping away from position."""
        run = []
        current = position
        while True:
            step = current.add(direction)
            if step == current or not self._owned_by(step, owner):
                return run
            run.append(step)
            current = step

    def get_words(self, position: Coordinate) -> List[Word]:
        """
        The words passing through a position, as [vertical, horizontal].

        Each word is ordered in the owner's reading direction. Single letter
        words are dropped unless the tile is isolated, in which case both
        single letter words are returned.
        """
        cell = self._cell(position)
        if cell is None or not cell.is_occupied:
            return []
        owner = cell.owner

        vertical = (
            self._walk(position, Direction.NORTH, owner)[::-1]
            + [position]
            + self._walk(position, Direction.SOUTH, owner)
        )
        horizontal = (
            self._walk(position, Direction.WEST, owner)[::-1]
            + [position]
            + self._walk(position, Direction.EAST, owner)
        )

        orientation = self._orientations[owner]
        if not orientation.read_top_to_bottom():
            vertical.reverse()
        if not orientation.read_left_to_right():
            horizontal.reverse()

        words = [vertical, horizontal]
        if all(len(word) == 1 for word in words):
            return words
        return [word for word in words if len(word) > 1]

    def collect_combatants(self, player: int, position: Coordinate) -> Tuple[List[Word], List[Word]]:
        """
        Gather the words involved in a battle triggered by a tile at position.

        Attackers are the words through position. Defenders are the words
        through each neighbouring tile owned by another player.
        """
        attackers = self.get_words(position)
        defenders: List[Word] = []
        for neighbour, cell in self.neighbouring_squares(position):
            if cell.is_occupied and cell.owner != player:
                for word in self.get_words(neighbour):
                    if word not in defenders:
                        defenders.append(word)
        return attackers, defenders

    def word_strings(self, words: Iterable[Word]) -> List[str]:
        """Spell out words given as coordinate lists."""
        strings = []
        for word in words:
            letters = []
            for coordinate in word:
                cell = self._cell(coordinate)
                if cell is None or not cell.is_occupied:
                    raise EmptySquareInWord()
                letters.append(cell.letter)
            strings.append("".join(letters))
        return strings

    def defeat(self, words: Iterable[Word], bag: TileSupplyProtocol) -> List[BoardChange]:
        """Remove the tiles of words that lost a battle, returning their letters to the bag."""
        changes = []
        seen: Set[Coordinate] = set()
        for word in words:
            for coordinate in word:
                if coordinate in seen:
                    continue
                seen.add(coordinate)
                cell = self._cell(coordinate)
                if cell is None or not cell.is_occupied:
                    continue
                bag.return_tile(cell.letter)
                changes.append(BoardChange(self.clear(coordinate), BoardChangeAction.DEFEATED))
        return changes

    # Swapping

    def swap(
        self,
        player: int,
        positions: Sequence[Coordinate],
        swap_rules: Union[Swapping, SwapPolicy],
    ) -> List[BoardChange]:
        """Exchange the letters of two of a player's tiles."""
        first, second = positions
        if first == second:
            raise SelfSwap()

        policy = swap_rules.policy if isinstance(swap_rules, Swapping) else SwapPolicy(swap_rules)
        if policy == SwapPolicy.CONTIGUOUS:
            if second not in self.depth_first_search(first):
                raise DisjointSwap()
        elif policy == SwapPolicy.NONE:
            raise NoSwapping()

        letters = []
        for position in (first, second):
            cell = self.get(position)
            if not cell.is_occupied:
                raise UnoccupiedSwap()
            if cell.owner != player:
                raise UnownedSwap()
            letters.append(cell.letter)

        logger.debug(f"Player {player} swapped {first} and {second}")
        return [
            BoardChange(self.set(first, player, letters[1]), BoardChangeAction.SWAPPED),
            BoardChange(self.set(second, player, letters[0]), BoardChangeAction.SWAPPED),
        ]

    # Visibility

    def _within_two_steps(self, position: Coordinate) -> Set[Coordinate]:
        reached = set()
        for first, _ in self.neighbouring_squares(position):
            reached.add(first)
            for second, _ in self.neighbouring_squares(first):
                reached.add(second)
        return reached

    def fog_of_war(self, player: int) -> "Board":
        """
        A copy of the board showing only what a player can see.

        Opposing tiles one or two orthogonal steps from the player's territory
        are visible, along with the whole words they belong to. Directly
        adjacent tiles count as contacts too. All other opposing tiles are
        cleared from the copy.
        """
        start = time.perf_counter()
        visible: Set[Coordinate] = set()
        for coordinate, cell in self.iter_cells():
            if not (cell.is_occupied and cell.owner == player):
                continue
            for contact in self._within_two_steps(coordinate):
                contact_cell = self._cell(contact)
                if contact_cell.is_occupied and contact_cell.owner != player:
                    for word in self.get_words(contact):
                        visible.update(word)

        foggy = self.copy()
        hidden = 0
        for coordinate, cell in self.iter_cells():
            if cell.is_occupied and cell.owner != player and coordinate not in visible:
                foggy.clear(coordinate)
                hidden += 1

        if BOARD_DEBUG:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.info(f"FogOfWar: player={player}, visible={len(visible)}, hidden={hidden}, elapsed_ms={elapsed_ms:.2f}")
        return foggy

    def filter_to_player(self, player: int, visibility: Visibility, winner: Optional[int]) -> "Board":
        """The board as it should be sent to a player."""
        # Everything is revealed once the game is over
        if winner is not None:
            return self.copy()
        if Visibility(visibility) == Visibility.STANDARD:
            return self.copy()
        return self.fog_of_war(player)

    # Copying and display

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(self._grid.copy(), list(self.roots), list(self._orientations))

    def rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._grid]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid.shape == other._grid.shape
            and bool((self._grid == other._grid).all())
            and self.roots == other.roots
            and self._orientations == other._orientations
        )

    __hash__ = None

    def __str__(self) -> str:
        lines = [" ".join(str(cell) for cell in row) for row in self._grid]
        roots = " / ".join(str(root) for root in self.roots)
        return "\n".join(lines + [f"Roots: {roots}"])

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, players={self.player_count})"
