from dataclasses import dataclass, asdict
from typing import Optional, Tuple

from maze_carver.core.errors import ConfigError

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class MazeConfig:
    """
    All the numbers that shape a maze image.
    Defaults reproduce the classic 50x50 maze on a 1000x1000 canvas:
    18px cells, 50px padding, 3px round-capped walls erased with 4px strokes.
    """
    size: int = 50
    cell_size: float = 18.0
    padding: float = 50.0
    image_size: int = 1000

    line_width: float = 3.0
    erase_width: float = 4.0
    # Keeps the erasing stroke off the perpendicular grid lines
    wall_margin: float = 1.5

    background: Color = (0, 0, 0)
    wall_color: Color = (13, 97, 168)

    start: Tuple[int, int] = (0, 0)
    seed: Optional[int] = None

    @property
    def erase_half_length(self) -> float:
        return self.cell_size / 2 - self.wall_margin

    @property
    def maze_extent(self) -> float:
        """Pixel coordinate of the far grid line (right and bottom)."""
        return self.padding + self.size * self.cell_size

    def validate(self) -> "MazeConfig":
        if self.size <= 0:
            raise ConfigError(f"Grid size must be positive, got {self.size}")
        if self.cell_size <= 0:
            raise ConfigError(f"Cell size must be positive, got {self.cell_size}")
        if self.padding < 0:
            raise ConfigError(f"Padding cannot be negative, got {self.padding}")
        if self.image_size <= 0:
            raise ConfigError(f"Image size must be positive, got {self.image_size}")
        if self.line_width <= 0 or self.erase_width <= 0:
            raise ConfigError(
                f"Stroke widths must be positive, got line={self.line_width} erase={self.erase_width}"
            )
        if not (0 <= self.wall_margin < self.cell_size / 2):
            raise ConfigError(
                f"Wall margin must be in [0, {self.cell_size / 2}), got {self.wall_margin}"
            )
        row, col = self.start
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ConfigError(f"Start cell {self.start} outside {self.size}x{self.size} grid")
        if self.maze_extent > self.image_size:
            raise ConfigError(
                f"{self.size}x{self.size} maze of {self.cell_size}px cells with {self.padding}px padding "
                f"needs {self.maze_extent:g}px, image is {self.image_size}px"
            )
        return self

    def to_dict(self):
        return asdict(self)
