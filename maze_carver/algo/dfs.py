import random
from typing import Callable, Iterator, List, Optional, Tuple
from maze_carver.core.grid import Grid
from maze_carver.core.events import WallRemoval

class RecursiveBacktracker:
    """
    Randomized depth-first carve over a Grid.

    The walk keeps its own stack instead of recursing, so grid size is not
    limited by the interpreter's recursion depth. Each stack frame re-queries
    availability when it becomes the top again, which is exactly what the
    recursive version does after a child call returns.

    `rng` may be any object with a `randrange(n)` method; otherwise a
    `random.Random(seed)` is used.
    """
    def __init__(self, grid: Grid, seed: Optional[int] = None, rng=None, start: Tuple[int, int] = (0, 0)):
        self.grid = grid
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.start = start
        self.step_count = 0

        # Validates the start cell up front
        grid.get_index(*start)

    def choose_direction(self, available) -> int:
        # Uniform draw-and-reject over all four directions
        while True:
            direction = Grid.DIRECTIONS[self.rng.randrange(4)]
            if direction in available:
                return direction

    def run(self) -> Iterator[WallRemoval]:
        """Yields one WallRemoval per carved passage, in carving order."""
        grid = self.grid
        start_row, start_col = self.start
        grid.mark_visited(start_row, start_col)

        stack: List[Tuple[int, int]] = [(start_row, start_col)]

        while stack:
            row, col = stack[-1]
            available = grid.available_directions(row, col)

            if not available:
                # Backtrack
                stack.pop()
                continue

            direction = self.choose_direction(available)
            nrow, ncol = grid.neighbor(row, col, direction)

            grid.mark_visited(nrow, ncol)
            stack.append((nrow, ncol))
            self.step_count += 1

            yield WallRemoval((nrow, ncol), (row, col))

    def run_all(self, *listeners: Callable[[WallRemoval], None]) -> List[WallRemoval]:
        """Run to completion, handing every event to each listener as it is carved."""
        events = []
        for event in self.run():
            for listener in listeners:
                listener(event)
            events.append(event)
        return events
