from typing import Optional, Tuple
from maze_carver.core.config import MazeConfig
from maze_carver.core.events import Cell, WallRemoval
from maze_carver.viz.canvas import Canvas

Segment = Tuple[Tuple[float, float], Tuple[float, float]]

class Renderer:
    def __init__(self, canvas: Canvas, rows: int, cols: Optional[int] = None, config: Optional[MazeConfig] = None):
        self.canvas = canvas
        self.rows = rows
        self.cols = rows if cols is None else cols
        self.config = config or MazeConfig()
        self.walls_removed = 0

    def draw_background(self):
        cv = self.canvas
        cv.set_color(self.config.background)
        cv.rectangle(0, 0, cv.width, cv.height)
        cv.fill()

    def draw_base_grid(self):
        """Fully walled lattice: rows+1 horizontal and cols+1 vertical lines."""
        cfg = self.config
        cv = self.canvas
        cv.set_color(cfg.wall_color)
        cv.set_line_width(cfg.line_width)
        cv.set_line_cap(Canvas.CAP_ROUND)

        left = cfg.padding
        top = cfg.padding
        right = left + self.cols * cfg.cell_size
        bottom = top + self.rows * cfg.cell_size

        for i in range(self.rows + 1):
            y = top + i * cfg.cell_size
            cv.move_to(left, y)
            cv.line_to(right, y)
            cv.stroke()
        for j in range(self.cols + 1):
            x = left + j * cfg.cell_size
            cv.move_to(x, top)
            cv.line_to(x, bottom)
            cv.stroke()

    def draw_initial(self):
        self.draw_background()
        self.draw_base_grid()

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        cfg = self.config
        half = cfg.cell_size / 2
        x = cfg.padding + (col + 1) * cfg.cell_size - half
        y = cfg.padding + (row + 1) * cfg.cell_size - half
        return x, y

    def wall_segment(self, current: Cell, previous: Cell) -> Segment:
        """
        The grid line between two adjacent cells, shortened by the wall
        margin at both ends so it stays clear of the crossing lines.
        """
        if abs(current[0] - previous[0]) + abs(current[1] - previous[1]) != 1:
            raise ValueError(f"Cells {current} and {previous} are not adjacent")

        cx, cy = self.cell_center(*current)
        px, py = self.cell_center(*previous)
        mx = (cx + px) / 2
        my = (cy + py) / 2
        half = self.config.erase_half_length

        if cx == px:
            # Stacked vertically: the shared wall is horizontal
            return (mx - half, my), (mx + half, my)
        # Side by side: the shared wall is vertical
        return (mx, my - half), (mx, my + half)

    def on_wall_removed(self, current: Cell, previous: Cell):
        (x0, y0), (x1, y1) = self.wall_segment(current, previous)
        cv = self.canvas
        cv.set_color(self.config.background)
        cv.set_line_width(self.config.erase_width)
        cv.set_line_cap(Canvas.CAP_BUTT)
        cv.move_to(x0, y0)
        cv.line_to(x1, y1)
        cv.stroke()
        self.walls_removed += 1

    def __call__(self, event: WallRemoval):
        self.on_wall_removed(event.current, event.previous)
