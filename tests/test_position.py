import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from rat_maze.core.cells import Cell
from rat_maze.core.grid import Grid
from rat_maze.core.position import Position

class TestPosition(unittest.TestCase):
    def test_inverse_moves(self):
        p = Position(3, 5)
        self.assertEqual(p.above().below(), p)
        self.assertEqual(p.below().above(), p)
        self.assertEqual(p.to_the_left().to_the_right(), p)
        self.assertEqual(p.to_the_right().to_the_left(), p)

    def test_moves(self):
        p = Position(1, 1)
        self.assertEqual(p.above(), Position(0, 1))
        self.assertEqual(p.below(), Position(2, 1))
        self.assertEqual(p.to_the_left(), Position(1, 0))
        self.assertEqual(p.to_the_right(), Position(1, 2))

    def test_neighbor_order(self):
        # North, East, South, West
        self.assertEqual(list(Position(1, 1).neighbors()),
                         [Position(0, 1), Position(1, 2), Position(2, 1), Position(1, 0)])

    def test_is_at(self):
        self.assertTrue(Position(2, 3).is_at(Position(2, 3)))
        self.assertFalse(Position(2, 3).is_at(Position(3, 2)))

    def test_is_in_maze(self):
        grid = Grid(["roo", "owc"])
        self.assertTrue(Position(0, 0).is_in_maze(grid))
        self.assertTrue(Position(1, 2).is_in_maze(grid))
        self.assertFalse(Position(-1, 0).is_in_maze(grid))
        self.assertFalse(Position(0, -1).is_in_maze(grid))
        self.assertFalse(Position(2, 0).is_in_maze(grid))
        self.assertFalse(Position(0, 3).is_in_maze(grid))

    def test_can_be_moved_to(self):
        grid = Grid(["rooo", "owoc"])
        self.assertTrue(Position(0, 1).can_be_moved_to(grid))   # open
        self.assertTrue(Position(1, 3).can_be_moved_to(grid))   # cheese
        self.assertFalse(Position(1, 1).can_be_moved_to(grid))  # wall
        self.assertFalse(Position(0, 0).can_be_moved_to(grid))  # rat

        Position(0, 2).place(grid, Cell.PATH)
        Position(0, 3).place(grid, Cell.TRIED)
        self.assertFalse(Position(0, 2).can_be_moved_to(grid))
        self.assertFalse(Position(0, 3).can_be_moved_to(grid))

    def test_out_of_bounds_never_steppable(self):
        grid = Grid(["ro", "oc"])
        for p in (Position(-1, 0), Position(0, -1), Position(2, 0), Position(0, 2), Position(1, 2)):
            self.assertFalse(p.can_be_moved_to(grid), p)

    def test_contents_and_has_goal(self):
        grid = Grid(["rw", "oc"])
        self.assertEqual(Position(0, 1).contents(grid), Cell.WALL)
        self.assertTrue(Position(1, 1).has_goal(grid))
        self.assertFalse(Position(1, 0).has_goal(grid))

        Position(1, 1).place(grid, Cell.AGENT)
        self.assertFalse(Position(1, 1).has_goal(grid))

    def test_value_semantics(self):
        p = Position(1, 2)
        self.assertEqual(p, (1, 2))
        self.assertEqual(p.row, 1)
        self.assertEqual(p.column, 2)
        self.assertEqual(len({Position(1, 2), Position(1, 2)}), 1)

if __name__ == '__main__':
    unittest.main()
