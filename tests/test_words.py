"""
Tests for word extraction, combatant assembly and defeat.
"""

import unittest

from truncate_engine.board import Board
from truncate_engine.cell import Cell
from truncate_engine.errors import EmptySquareInWord
from truncate_engine.geometry import Coordinate, Direction
from truncate_engine.reporting import BoardChangeAction
from tests.utils_boards import RecordingBag, column, make_board, row

CROSS_ROWS = [
    "_ _ C _ _",
    "_ _ R _ _",
    "S W O R D",
    "_ _ S _ _",
    "_ _ S _ _",
]


class TestGetWords(unittest.TestCase):

    def test_empty_board_has_no_words(self):
        board = Board.default()
        for x in range(-2, 12):
            for y in range(-2, 12):
                position = Coordinate(max(x, 0), max(y, 0))
                self.assertEqual(board.get_words(position), [])
        self.assertEqual(board.get_words(Coordinate(40, 40)), [])

    def test_cross(self):
        board = make_board(CROSS_ROWS, [Coordinate(0, 0)], [Direction.SOUTH])
        cross = column(2, range(5))
        sword = row(2, range(5))

        self.assertEqual(board.get_words(Coordinate(2, 2)), [cross, sword])
        for y in [0, 1, 3, 4]:
            self.assertEqual(board.get_words(Coordinate(2, y)), [cross])
        for x in [0, 1, 3, 4]:
            self.assertEqual(board.get_words(Coordinate(x, 2)), [sword])

        self.assertEqual(board.word_strings([cross, sword]), ["CROSS", "SWORD"])

    def test_words_stop_at_other_players(self):
        board = make_board(
            [
                "_ _ C _ _",
                "_ _ R _ _",
                "_ _ O _ _",
                "_ _ S _ _",
                "_ _ S _ _",
            ],
            [Coordinate(0, 0), Coordinate(4, 4)],
            [Direction.SOUTH, Direction.NORTH],
        )
        self.assertEqual(board.get(Coordinate(2, 4)), Cell.occupied(0, 'S'))
        board.set(Coordinate(3, 4), 1, 'O')
        self.assertEqual(board.get_words(Coordinate(2, 4)), [column(2, range(5))])

    def test_isolated_tile(self):
        """A lone tile yields both of its single letter words."""
        board = make_board(["_ _ _", "_ A _", "_ _ _"], [Coordinate(0, 0)], [Direction.SOUTH])
        middle = Coordinate(1, 1)
        self.assertEqual(board.get_words(middle), [[middle], [middle]])
        self.assertEqual(board.word_strings(board.get_words(middle)), ["A", "A"])

    def test_orientations(self):
        corners = [Coordinate(0, 0), Coordinate(0, 6), Coordinate(6, 6), Coordinate(6, 0)]
        board = make_board(
            [
                "N E Z _ G A N",
                "A _ _ _ _ _ E",
                "G _ _ _ _ _ Z",
                "_ _ _ _ _ _ _",
                "Z _ _ _ _ _ G",
                "E _ _ _ _ _ A",
                "N A G _ Z E N",
            ],
            corners,
            [Direction.WEST, Direction.SOUTH, Direction.EAST, Direction.NORTH],
        )
        for corner in corners:
            words = board.word_strings(board.get_words(corner))
            self.assertEqual(sorted(words), ["NAG", "ZEN"])

    def test_north_reads_backwards(self):
        board = make_board(["C A T"], [Coordinate(0, 0)], [Direction.NORTH])
        words = board.get_words(Coordinate(1, 0))
        self.assertEqual(words, [row(0, [2, 1, 0])])
        self.assertEqual(board.word_strings(words), ["TAC"])

    def test_word_strings_rejects_empty_squares(self):
        board = make_board(CROSS_ROWS, [Coordinate(0, 0)], [Direction.SOUTH])
        with self.assertRaises(EmptySquareInWord):
            board.word_strings([[Coordinate(2, 0), Coordinate(3, 0)]])
        with self.assertRaises(EmptySquareInWord):
            board.word_strings([[Coordinate(20, 0)]])


class TestCombatants(unittest.TestCase):

    def setUp(self):
        self.board = make_board(
            [
                "_ C A T _",
                "_ _ _ _ _",
                "_ D O G _",
            ],
            [Coordinate(1, 0), Coordinate(1, 2)],
            [Direction.NORTH, Direction.SOUTH],
        )

    def test_collect_combatants(self):
        position = Coordinate(2, 1)
        self.board.place(0, position, 'X')
        attackers, defenders = self.board.collect_combatants(0, position)

        self.assertEqual(attackers, [[Coordinate(2, 1), Coordinate(2, 0)]])
        self.assertEqual(defenders, [row(2, [1, 2, 3])])
        self.assertEqual(self.board.word_strings(attackers), ["XA"])
        self.assertEqual(self.board.word_strings(defenders), ["DOG"])

    def test_no_defenders_without_contact(self):
        position = Coordinate(0, 1)
        self.board.place(0, position, 'S')
        attackers, defenders = self.board.collect_combatants(0, position)
        self.assertEqual(self.board.word_strings(attackers), ["S", "S"])
        self.assertEqual(defenders, [])

    def test_defender_words_are_unique(self):
        board = make_board(["_ _ _ _ _"], [Coordinate(0, 0), Coordinate(4, 0)], [Direction.SOUTH, Direction.NORTH])
        board.set(Coordinate(0, 0), 0, 'A')
        board.set(Coordinate(1, 0), 1, 'B')
        _, defenders = board.collect_combatants(0, Coordinate(0, 0))
        self.assertEqual(defenders, [[Coordinate(1, 0)]])


class TestDefeat(unittest.TestCase):

    def test_defeat_removes_words(self):
        board = make_board(CROSS_ROWS, [Coordinate(0, 0)], [Direction.SOUTH])
        bag = RecordingBag()
        changes = board.defeat([column(2, range(5)), row(2, range(5))], bag)

        # The shared O is only removed once
        self.assertEqual(len(changes), 9)
        self.assertEqual(sorted(bag.returned), sorted("CROSSSWRD"))
        self.assertTrue(all(change.action == BoardChangeAction.DEFEATED for change in changes))
        self.assertEqual(changes[0].detail.cell, Cell.occupied(0, 'C'))
        for coordinate, cell in board.iter_cells():
            self.assertFalse(cell.is_occupied, coordinate)


if __name__ == '__main__':
    unittest.main()
