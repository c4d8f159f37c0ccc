import unittest

from game import (
    BoardEngine,
    Cell,
    Direction,
    MoveCheck,
    new_engine,
)


def make_layout(rows):
    n = len(rows)
    out = []
    for r in rows:
        assert len(r) == n
        out.append([ch == 'o' for ch in r])
    return out


class TestPegfieldBasics(unittest.TestCase):
    def test_swipe_right_on_three_by_three(self):
        engine = BoardEngine(make_layout(['ooo', 'oo.', 'ooo']))
        self.assertEqual(engine.peg_count(), 8)
        engine.select_or_deselect((1, 0))
        res = engine.attempt_move_direction(Direction.RIGHT)
        self.assertTrue(res.applied)
        self.assertEqual(engine.status((1, 0)), Cell.EMPTY)
        self.assertEqual(engine.status((1, 1)), Cell.EMPTY)
        self.assertEqual(engine.status((1, 2)), Cell.PEG)
        self.assertEqual(engine.peg_count(), 7)
        self.assertFalse(engine.check_win())

    def test_swipe_onto_peg_is_rejected(self):
        engine = BoardEngine(make_layout(['ooo', 'o.o', 'ooo']))
        engine.select_or_deselect((1, 0))
        res = engine.attempt_move_direction(Direction.RIGHT)
        self.assertFalse(res.applied)
        self.assertEqual(res.reason, MoveCheck.DESTINATION_OCCUPIED)
        self.assertEqual(engine.peg_count(), 8)

    def test_one_cell_move_is_rejected(self):
        engine = BoardEngine(make_layout(['ooo', 'o.o', 'ooo']))
        engine.select_or_deselect((0, 1))
        before = engine.snapshot()
        res = engine.attempt_move((1, 1))
        self.assertFalse(res.applied)
        self.assertEqual(res.reason, MoveCheck.NOT_A_JUMP)
        self.assertEqual(engine.snapshot(), before)

    def test_last_peg_wins(self):
        engine = BoardEngine(make_layout(['oo.', '...', '...']))
        engine.select_or_deselect((0, 0))
        res = engine.attempt_move_direction(Direction.RIGHT)
        self.assertTrue(res.applied)
        self.assertTrue(res.won)
        self.assertTrue(engine.check_win())

    def test_english_preset_opening(self):
        engine = new_engine('english')
        self.assertEqual(engine.size, 7)
        self.assertEqual(engine.peg_count(), 32)
        self.assertEqual(engine.status((3, 3)), Cell.EMPTY)
        self.assertEqual(engine.status((0, 0)), Cell.VOID)
        engine.select_or_deselect((1, 3))
        self.assertEqual(engine.legal_targets(), [(3, 3)])
        self.assertTrue(engine.attempt_move_direction(Direction.DOWN).applied)
        self.assertEqual(engine.peg_count(), 31)


if __name__ == '__main__':
    unittest.main(verbosity=2)
