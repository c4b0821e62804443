'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''

import itertools
import random
import unittest

from ndcube.point import Point, ROTATION_TABLE
from ndcube.rotation import Rotation, Side


def all_rotations(dims):
    for axis, from_axis, to_axis in itertools.permutations(range(dims), 3):
        for side in Side:
            yield Rotation(axis, from_axis, to_axis, side)


class TestRotation(unittest.TestCase):

    def test_random_rotations_are_legal(self):
        rng = random.Random(3)
        for dims in (3, 4, 5):
            for _ in range(200):
                r = Rotation.random(dims, rng)
                self.assertTrue(r.is_valid(dims))
                self.assertEqual(len({r.axis, r.from_axis, r.to_axis}), 3)
                self.assertIn(r.side, (Side.FRONT, Side.BACK))

    def test_random_covers_every_rotation(self):
        rng = random.Random(11)
        seen = {Rotation.random(3, rng) for _ in range(2000)}
        self.assertEqual(seen, set(all_rotations(3)))

    def test_seeded_random_is_reproducible(self):
        a = [Rotation.random(4, random.Random(5)) for _ in range(3)]
        b = [Rotation.random(4, random.Random(5)) for _ in range(3)]
        self.assertEqual(a, b)

    def test_constructor_rejects_bad_values(self):
        with self.assertRaises(AssertionError):
            Rotation(1, 1, 0, Side.BACK)
        with self.assertRaises(AssertionError):
            Rotation(0, 1, 0, Side.BACK)
        with self.assertRaises(AssertionError):
            Rotation(0, 1, 2, 1)

    def test_raw_side_becomes_enum(self):
        r = Rotation(1, 2, 0, 2)
        self.assertIs(r.side, Side.BACK)
        self.assertEqual(r, Rotation(1, 2, 0, Side.BACK))

    def test_command_text(self):
        self.assertEqual(Rotation(1, 2, 0, Side.BACK).to_command(), "1202")
        self.assertEqual(Rotation(1, 2, 0, Side.BACK).inverse().to_command(), "1022")


class TestRotationTable(unittest.TestCase):

    def test_table_is_a_permutation_of_the_nine_pairs(self):
        pairs = set(itertools.product(range(3), repeat=2))
        self.assertEqual(set(ROTATION_TABLE), pairs)
        self.assertEqual(set(ROTATION_TABLE.values()), pairs)

    def test_table_has_order_four(self):
        for pair in ROTATION_TABLE:
            p = pair
            for _ in range(4):
                p = ROTATION_TABLE[p]
            self.assertEqual(p, pair)

    def test_only_the_middle_is_fixed(self):
        for pair, after in ROTATION_TABLE.items():
            if pair == (1, 1):
                self.assertEqual(after, pair)
            else:
                self.assertNotEqual(ROTATION_TABLE[after], pair)


class TestPoint(unittest.TestCase):

    def test_from_index_is_base_three(self):
        self.assertEqual(Point.from_index(0, 3).original_coords, (0, 0, 0))
        self.assertEqual(Point.from_index(1, 3).original_coords, (1, 0, 0))
        self.assertEqual(Point.from_index(3, 3).original_coords, (0, 1, 0))
        self.assertEqual(Point.from_index(5, 3).original_coords, (2, 1, 0))
        self.assertEqual(Point.from_index(26, 3).original_coords, (2, 2, 2))
        self.assertEqual(Point.from_index(80, 4).original_coords, (2, 2, 2, 2))

    def test_fresh_point_is_home(self):
        p = Point.create((0, 1, 2, 1))
        self.assertTrue(p.is_in_original_position())
        self.assertTrue(p.is_in_original_orientation())
        self.assertEqual(p.orientation, [0, 1, 2, 3])
        self.assertEqual(p.dist_from_original(), 0)
        self.assertEqual(p.incorrectness(), 0)

    def test_rotation_example(self):
        # (from, to) = (1, 2) maps to (0, 1)
        p = Point.create((0, 1, 2, 0))
        p.rotate(Rotation(0, 1, 2, Side.FRONT))
        self.assertEqual(p.coords, [0, 0, 1, 0])
        self.assertEqual(p.orientation, [0, 2, 1, 3])
        self.assertEqual(p.original_coords, (0, 1, 2, 0))

    def test_point_off_the_layer_is_untouched(self):
        p = Point.create((2, 1, 2))
        p.rotate(Rotation(0, 1, 2, Side.FRONT))
        self.assertEqual(p.coords, [2, 1, 2])
        self.assertEqual(p.orientation, [0, 1, 2])

    def test_middle_layer_never_moves(self):
        p = Point.create((1, 0, 2))
        for r in all_rotations(3):
            if r.axis == 0:
                p.rotate(r)
        self.assertEqual(p.coords, [1, 0, 2])
        self.assertTrue(p.is_in_original_orientation())

    def test_four_turns_are_identity(self):
        for index in range(81):
            for r in all_rotations(4):
                p = Point.from_index(index, 4)
                p.rotate(Rotation(3, 0, 1, Side.BACK))  # start from a non-trivial state
                before = (list(p.coords), list(p.orientation))
                for _ in range(4):
                    p.rotate(r)
                self.assertEqual((p.coords, p.orientation), before, msg=f"{r} on {p}")

    def test_inverse_undoes_in_one_step(self):
        for index in range(27):
            for r in all_rotations(3):
                p = Point.from_index(index, 3)
                p.rotate(r)
                p.rotate(r.inverse())
                self.assertTrue(p.is_in_original_position())
                self.assertTrue(p.is_in_original_orientation())

    def test_rotation_out_of_range_is_fatal(self):
        p = Point.create((0, 0, 0))
        with self.assertRaises(AssertionError):
            p.rotate(Rotation(3, 0, 1, Side.FRONT))

    def test_corrupted_coordinate_is_fatal(self):
        p = Point.create((0, 0, 0))
        p.coords[1] = 3
        with self.assertRaises(AssertionError):
            p.rotate(Rotation(0, 1, 2, Side.FRONT))

    def test_is_center(self):
        self.assertTrue(Point.create((1, 2, 1)).is_center())
        self.assertTrue(Point.create((1, 1, 1, 0)).is_center())
        self.assertFalse(Point.create((1, 1, 1)).is_center())
        self.assertFalse(Point.create((0, 2, 1)).is_center())

    def test_incorrectness_weights_orientation(self):
        p = Point(original_coords=(0, 0, 2), coords=[2, 0, 1], orientation=[1, 0, 2])
        self.assertEqual(p.dist_from_original(), 3)
        self.assertFalse(p.is_in_original_orientation())
        self.assertEqual(p.incorrectness(), 3 + Point.ORIENTATION_PENALTY)
        self.assertEqual(p.incorrectness(penalty=1), 4)

    def test_to_string(self):
        p = Point.create((0, 1, 2))
        text = p.to_string(use_color=False)
        self.assertEqual(text, "Current coordinates: 0 1 2 Orientation: 0 1 2 Original coordinates: 0 1 2")
        self.assertIn("\033[32m", p.to_string())


if __name__ == "__main__":
    unittest.main()
