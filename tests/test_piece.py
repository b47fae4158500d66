import unittest
from collections import Counter

from blockfall_board import Board
from blockfall_piece import (
    KINDS, SHAPES, ActivePiece, Tetromino, random_piece,
    rotate_cw, try_drop, try_rotate, try_shift,
)
from blockfall_rng import PieceRandom
from tests.helpers import SequenceRandom, occupied


class CatalogTests(unittest.TestCase):
    def test_seven_kinds_with_distinct_colors(self):
        self.assertEqual(set(KINDS), {"I", "O", "T", "S", "Z", "J", "L"})
        colors = {Tetromino.of(k).color for k in KINDS}
        self.assertEqual(len(colors), 7)

    def test_every_shape_has_four_cells(self):
        for kind in KINDS:
            self.assertEqual(len(occupied(SHAPES[kind])), 4, kind)

    def test_random_piece_is_a_fresh_copy(self):
        piece = random_piece(SequenceRandom("T"))
        piece.shape[0][0] = 1
        self.assertEqual(SHAPES["T"], [[0, 1, 0], [1, 1, 1]])

    def test_seeded_randomizer_is_reproducible(self):
        r1, r2 = PieceRandom(7), PieceRandom(7)
        seq1 = [r1.next_piece() for _ in range(50)]
        seq2 = [r2.next_piece() for _ in range(50)]
        self.assertEqual(seq1, seq2)
        self.assertTrue(set(seq1) <= set(KINDS))

    def test_randomizer_is_uniform(self):
        rng = PieceRandom(2024)
        draws = 7000
        counts = Counter(random_piece(rng).kind for _ in range(draws))
        self.assertEqual(set(counts), set(KINDS))
        expected = draws / 7
        for kind in KINDS:
            # about five standard deviations either side
            self.assertLess(abs(counts[kind] - expected), 150, kind)

    def test_any_hashable_seed(self):
        with self.assertLogs("blockfall_rng", level="DEBUG") as logs:
            r1 = PieceRandom("nightly")
        r2 = PieceRandom("nightly")
        self.assertIn("'nightly'", logs.output[0])
        self.assertEqual([r1.next_piece() for _ in range(20)],
                         [r2.next_piece() for _ in range(20)])


class RotationTests(unittest.TestCase):
    def test_clockwise_t(self):
        self.assertEqual(rotate_cw([[0, 1, 0], [1, 1, 1]]), [[1, 0], [1, 1], [1, 0]])

    def test_i_piece_alternates_orientation(self):
        once = rotate_cw(SHAPES["I"])
        self.assertEqual(once, [[1], [1], [1], [1]])
        self.assertEqual(rotate_cw(once), SHAPES["I"])

    def test_four_turns_restore_every_shape(self):
        for kind in KINDS:
            m = SHAPES[kind]
            for _ in range(4):
                m = rotate_cw(m)
            self.assertEqual(m, SHAPES[kind], kind)

    def test_rotation_does_not_mutate_input(self):
        original = [row[:] for row in SHAPES["L"]]
        rotate_cw(SHAPES["L"])
        self.assertEqual(SHAPES["L"], original)


class MoveTests(unittest.TestCase):
    def setUp(self):
        self.board = Board.create_empty()

    def piece(self, kind, x, y):
        return ActivePiece.spawn(Tetromino.of(kind), x, y)

    def test_shift_commits_new_x(self):
        moved = try_shift(self.board, self.piece("O", 4, 0), -1)
        self.assertEqual(moved.position, (3, 0))

    def test_shift_into_wall_rejected(self):
        self.assertIsNone(try_shift(self.board, self.piece("O", 0, 0), -1))
        self.assertIsNone(try_shift(self.board, self.piece("I", 6, 0), 1))

    def test_shift_into_block_rejected(self):
        self.board.set(6, 1, "red")
        self.assertIsNone(try_shift(self.board, self.piece("O", 4, 0), 1))

    def test_rotate_in_place(self):
        rotated = try_rotate(self.board, self.piece("T", 4, 5))
        self.assertEqual(rotated.position, (4, 5))
        self.assertEqual(rotated.shape, [[1, 0], [1, 1], [1, 0]])

    def test_rotate_off_the_floor_rejected(self):
        # a vertical I at row 19 would need rows 19..22
        self.assertIsNone(try_rotate(self.board, self.piece("I", 0, 19)))

    def test_rotate_near_right_wall_has_no_kick(self):
        vertical = ActivePiece("I", [[1], [1], [1], [1]], "cyan", 9, 5)
        self.assertIsNone(try_rotate(self.board, vertical))

    def test_drop_and_ground(self):
        self.assertEqual(try_drop(self.board, self.piece("O", 4, 0)).position, (4, 1))
        self.assertIsNone(try_drop(self.board, self.piece("O", 4, 18)))

    def test_pieces_are_replaced_not_mutated(self):
        before = self.piece("O", 4, 0)
        try_shift(self.board, before, 1)
        try_drop(self.board, before)
        self.assertEqual(before.position, (4, 0))


if __name__ == "__main__":
    unittest.main()
