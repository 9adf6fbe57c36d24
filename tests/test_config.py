import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.config import MazeConfig
from maze_carver.core.errors import ConfigError, MazeError

class TestConfig(unittest.TestCase):
    def test_defaults_are_valid(self):
        cfg = MazeConfig().validate()
        self.assertEqual(cfg.size, 50)
        self.assertEqual(cfg.maze_extent, 950)
        self.assertAlmostEqual(cfg.erase_half_length, 7.5)

    def test_rejects_non_positive_size(self):
        for size in (0, -3):
            with self.assertRaises(ConfigError):
                MazeConfig(size=size).validate()

    def test_rejects_non_positive_cell_size(self):
        with self.assertRaises(ConfigError):
            MazeConfig(cell_size=0).validate()

    def test_rejects_bad_margin(self):
        with self.assertRaises(ConfigError):
            MazeConfig(wall_margin=9.0).validate()
        with self.assertRaises(ConfigError):
            MazeConfig(wall_margin=-1.0).validate()

    def test_rejects_bad_strokes(self):
        with self.assertRaises(ConfigError):
            MazeConfig(line_width=0).validate()
        with self.assertRaises(ConfigError):
            MazeConfig(erase_width=-2).validate()

    def test_rejects_start_outside(self):
        with self.assertRaises(ConfigError):
            MazeConfig(size=5, start=(5, 0)).validate()

    def test_rejects_maze_larger_than_image(self):
        with self.assertRaises(ConfigError):
            MazeConfig(size=60).validate()
        MazeConfig(size=60, image_size=1200).validate()

    def test_config_error_hierarchy(self):
        self.assertTrue(issubclass(ConfigError, MazeError))
        self.assertTrue(issubclass(ConfigError, ValueError))

    def test_to_dict(self):
        d = MazeConfig(seed=7).to_dict()
        self.assertEqual(d["seed"], 7)
        self.assertEqual(d["cell_size"], 18.0)

if __name__ == '__main__':
    unittest.main()
