from array import array
from typing import Optional, Set, Tuple

class Grid:
    # Direction constants (indices into DIRECTIONS)
    UP    = 0
    RIGHT = 1
    DOWN  = 2
    LEFT  = 3

    # Order matters: the generator draws a random index into this tuple
    DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

    # Flags
    VISITED = 0b00000001

    # Direction Helpers
    DROW = {UP: -1, DOWN: 1, RIGHT: 0, LEFT: 0}
    DCOL = {UP: 0, DOWN: 0, RIGHT: 1, LEFT: -1}
    OPPOSITE = {UP: DOWN, DOWN: UP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: Optional[int] = None):
        if cols is None:
            cols = rows
        self.rows = rows
        self.cols = cols
        # 1 byte per cell, all unvisited
        self.cells = array('B', bytes(rows * cols))

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_index(self, row: int, col: int) -> int:
        if self.in_bounds(row, col):
            return row * self.cols + col
        raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def neighbor(self, row: int, col: int, direction: int) -> Tuple[int, int]:
        """Coordinates one step in `direction`. May lie outside the grid."""
        return row + self.DROW[direction], col + self.DCOL[direction]

    def mark_visited(self, row: int, col: int):
        self.cells[row * self.cols + col] |= self.VISITED

    def is_visited(self, row: int, col: int) -> bool:
        return (self.cells[row * self.cols + col] & self.VISITED) != 0

    def available_directions(self, row: int, col: int) -> Set[int]:
        """
        Directions whose neighbor exists and has not been visited yet.
        Off-grid directions are left out rather than reported as visited.
        """
        available = set()
        if row > 0 and not self.is_visited(row - 1, col):
            available.add(self.UP)
        if col < self.cols - 1 and not self.is_visited(row, col + 1):
            available.add(self.RIGHT)
        if row < self.rows - 1 and not self.is_visited(row + 1, col):
            available.add(self.DOWN)
        if col > 0 and not self.is_visited(row, col - 1):
            available.add(self.LEFT)
        return available

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & self.VISITED)
