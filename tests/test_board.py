import unittest

from game import (
    Board,
    BoardEngine,
    Cell,
    ConfigurationError,
    Direction,
    MoveCheck,
    apply_jump,
    check_move,
    jump_target,
    legal_targets,
    midpoint,
    parse_layout,
    preset,
)


class TestBoardAndMoves(unittest.TestCase):
    def _board(self, rows):
        layout, voids = parse_layout(rows)
        return Board.from_layout(layout, voids)

    def test_given_text_rows_when_building_then_statuses_match(self):
        b = self._board(["o. ", "...", " oo"])
        self.assertEqual(b.size, 3)
        self.assertEqual(b.at(0, 0), Cell.PEG)
        self.assertEqual(b.at(0, 1), Cell.EMPTY)
        self.assertEqual(b.at(0, 2), Cell.VOID)
        self.assertEqual(b.at(2, 0), Cell.VOID)
        self.assertEqual(b.voids, frozenset({(0, 2), (2, 0)}))
        self.assertEqual(b.peg_count(), 3)
        self.assertTrue(b.in_bounds((2, 2)))
        self.assertFalse(b.in_bounds((3, 0)))
        self.assertFalse(b.in_bounds((0, -1)))

    def test_given_board_when_copied_then_rows_not_shared(self):
        b = self._board(["oo.", "...", "..."])
        c = b.copy()
        c.set((0, 0), Cell.EMPTY)
        self.assertEqual(b.at(0, 0), Cell.PEG)
        self.assertNotEqual(b, c)
        self.assertEqual(b, b.copy())

    def test_given_void_cell_when_setting_then_refused(self):
        b = self._board(["o ", ".."])
        with self.assertRaises(ValueError):
            b.set((0, 1), Cell.PEG)
        with self.assertRaises(ValueError):
            b.set((0, 0), Cell.VOID)

    def test_given_selection_when_pretty_then_symbols_rendered(self):
        b = self._board(["o. ", "ooo", "..."])
        txt = b.pretty((1, 1))
        lines = txt.splitlines()
        self.assertEqual(lines[0], "  0 1 2")
        self.assertEqual(lines[1], "0 o .  ")
        self.assertEqual(lines[2], "1 o @ o")
        self.assertEqual(lines[3], "2 . . .")

    def test_given_directions_when_resolving_then_two_cells_along_axis(self):
        self.assertEqual(jump_target((3, 3), Direction.LEFT), (3, 1))
        self.assertEqual(jump_target((3, 3), Direction.RIGHT), (3, 5))
        self.assertEqual(jump_target((3, 3), Direction.UP), (1, 3))
        self.assertEqual(jump_target((3, 3), Direction.DOWN), (5, 3))
        self.assertEqual(Direction.parse("left"), Direction.LEFT)
        self.assertEqual(Direction.parse(" Up "), Direction.UP)
        self.assertEqual(Direction.parse("d"), Direction.DOWN)
        self.assertEqual(Direction.parse("R"), Direction.RIGHT)
        with self.assertRaises(ValueError):
            Direction.parse("diagonal")

    def test_given_pairs_when_midpoint_then_only_straight_two_steps(self):
        self.assertEqual(midpoint((0, 0), (0, 2)), (0, 1))
        self.assertEqual(midpoint((2, 2), (0, 2)), (1, 2))
        self.assertIsNone(midpoint((0, 0), (2, 2)))
        self.assertIsNone(midpoint((0, 0), (0, 1)))
        self.assertIsNone(midpoint((0, 0), (0, 3)))
        self.assertIsNone(midpoint((0, 0), (0, 0)))

    def test_given_board_when_applying_jump_then_original_untouched(self):
        b = self._board(["oo.", "...", "..."])
        self.assertEqual(check_move(b, (0, 0), (0, 2)), MoveCheck.OK)
        nb, mid = apply_jump(b, (0, 0), (0, 2))
        self.assertEqual(mid, (0, 1))
        self.assertEqual(nb.snapshot()[0], (Cell.EMPTY, Cell.EMPTY, Cell.PEG))
        self.assertEqual(b.snapshot()[0], (Cell.PEG, Cell.PEG, Cell.EMPTY))
        with self.assertRaises(ValueError):
            apply_jump(b, (0, 0), (1, 1))

    def test_given_english_center_when_listing_targets_then_four_openers_reach_it(self):
        layout, voids = preset("english")
        b = Board.from_layout(layout, voids)
        openers = [coord for coord in b.coords() if legal_targets(b, coord)]
        self.assertEqual(sorted(openers), [(1, 3), (3, 1), (3, 5), (5, 3)])
        self.assertEqual(legal_targets(b, (0, 0)), [])
        self.assertEqual(legal_targets(b, (3, 3)), [])

    def test_given_explicit_size_when_mismatched_then_error(self):
        layout, voids = preset("square3")
        with self.assertRaises(ConfigurationError):
            Board.from_layout(layout, voids, size=7)
        self.assertEqual(BoardEngine(layout, voids, size=3).size, 3)


if __name__ == "__main__":
    unittest.main(verbosity=2)
