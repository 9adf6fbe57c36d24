import unittest
import sys
import os

# Add project root to path so we can import maze_carver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        n = 10
        grid = Grid(n)
        self.assertEqual(len(grid.cells), n * n, f"Grid initialization size mismatch. Expected {n*n}, got {len(grid.cells)}")
        self.assertEqual((grid.rows, grid.cols), (n, n))
        # Nothing visited yet
        for val in grid.cells:
            self.assertFalse(val & Grid.VISITED)
        self.assertEqual(grid.visited_count(), 0)

    def test_rectangular(self):
        grid = Grid(3, 7)
        self.assertEqual(grid.size, 21)
        self.assertEqual(grid.get_index(2, 6), 20)

    def test_coordinates(self):
        grid = Grid(5)
        idx = grid.get_index(2, 3)
        self.assertEqual(idx, 13) # 2 * 5 + 3

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_visited_flags(self):
        grid = Grid(3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.mark_visited(1, 1)
        self.assertTrue(grid.is_visited(1, 1))
        # Marking twice is a no-op
        grid.mark_visited(1, 1)
        self.assertTrue(grid.is_visited(1, 1))
        self.assertEqual(grid.visited_count(), 1)

    def test_available_center(self):
        grid = Grid(3)
        self.assertEqual(grid.available_directions(1, 1), {Grid.UP, Grid.RIGHT, Grid.DOWN, Grid.LEFT})

        grid.mark_visited(0, 1)
        grid.mark_visited(1, 2)
        self.assertEqual(grid.available_directions(1, 1), {Grid.DOWN, Grid.LEFT})

    def test_available_excludes_off_grid(self):
        grid = Grid(3)
        # Corner (0,0) only has Right and Down
        self.assertEqual(grid.available_directions(0, 0), {Grid.RIGHT, Grid.DOWN})
        # Opposite corner only has Up and Left
        self.assertEqual(grid.available_directions(2, 2), {Grid.UP, Grid.LEFT})

    def test_single_cell_has_nothing_available(self):
        grid = Grid(1)
        self.assertEqual(grid.available_directions(0, 0), set())

    def test_neighbor(self):
        grid = Grid(3)
        self.assertEqual(grid.neighbor(1, 1, Grid.UP), (0, 1))
        self.assertEqual(grid.neighbor(1, 1, Grid.RIGHT), (1, 2))
        self.assertEqual(grid.neighbor(1, 1, Grid.DOWN), (2, 1))
        self.assertEqual(grid.neighbor(1, 1, Grid.LEFT), (1, 0))
        for d in Grid.DIRECTIONS:
            back = grid.neighbor(*grid.neighbor(1, 1, d), Grid.OPPOSITE[d])
            self.assertEqual(back, (1, 1))

    def test_memory_sanity(self):
        # 1 byte per cell
        n = 2000
        grid = Grid(n)
        size_bytes = grid.cells.buffer_info()[1] * grid.cells.itemsize
        self.assertEqual(size_bytes, n * n)

if __name__ == '__main__':
    unittest.main()
