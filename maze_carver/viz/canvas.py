import logging
import math
from typing import List, Tuple

import pygame

from maze_carver.core.errors import RenderError

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

class Canvas:
    """
    Off-screen drawing surface with a small path API:
    build a path with move_to/line_to/rectangle, then stroke() or fill() it
    using the current color, line width and cap style.

    Backed by a plain pygame.Surface, so no window or display is needed.
    """
    CAP_BUTT = "butt"
    CAP_ROUND = "round"

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        try:
            self.surface = pygame.Surface((width, height))
        except (pygame.error, ValueError) as e:
            raise RenderError("create surface", f"{width}x{height}: {e}") from e

        self.color = (0, 0, 0)
        self.line_width = 1.0
        self.line_cap = self.CAP_BUTT
        # Each subpath: [points, closed]
        self._path: List[list] = []

    def set_color(self, rgb: Tuple[int, int, int]):
        self.color = tuple(rgb)

    def set_line_width(self, width: float):
        self.line_width = width

    def set_line_cap(self, cap: str):
        if cap not in (self.CAP_BUTT, self.CAP_ROUND):
            raise ValueError(f"Unknown line cap: {cap}")
        self.line_cap = cap

    def move_to(self, x: float, y: float):
        self._path.append([[(x, y)], False])

    def line_to(self, x: float, y: float):
        if not self._path:
            self.move_to(x, y)
            return
        self._path[-1][0].append((x, y))

    def rectangle(self, x: float, y: float, w: float, h: float):
        self._path.append([[(x, y), (x + w, y), (x + w, y + h), (x, y + h)], True])

    @staticmethod
    def _pixel_span(lo: float, hi: float) -> Tuple[int, int]:
        """(first pixel, count) for the pixels c with lo <= c < hi."""
        start = math.ceil(lo)
        return start, max(0, math.ceil(hi) - start)

    def _stroke_segment(self, surface: pygame.Surface, p0: Point, p1: Point):
        (x0, y0), (x1, y1) = p0, p1
        half = self.line_width / 2

        if y0 == y1:
            x, w = self._pixel_span(min(x0, x1), max(x0, x1))
            y, h = self._pixel_span(y0 - half, y0 + half)
        elif x0 == x1:
            x, w = self._pixel_span(x0 - half, x0 + half)
            y, h = self._pixel_span(min(y0, y1), max(y0, y1))
        else:
            pygame.draw.line(surface, self.color, p0, p1, max(1, int(round(self.line_width))))
            return

        # Axis-aligned strokes cover exactly their extent so neighbouring
        # strokes that only touch never share a pixel
        if w and h:
            pygame.draw.rect(surface, self.color, pygame.Rect(x, y, w, h))

    def stroke(self):
        surface = self._require_surface()
        radius = self.line_width / 2

        for points, closed in self._path:
            if closed:
                points = points + points[:1]
            for p0, p1 in zip(points, points[1:]):
                self._stroke_segment(surface, p0, p1)
            if self.line_cap == self.CAP_ROUND and len(points) > 1:
                for point in points:
                    pygame.draw.circle(surface, self.color, point, radius)

        self._path = []

    def fill(self):
        surface = self._require_surface()
        for points, _closed in self._path:
            if len(points) >= 3:
                pygame.draw.polygon(surface, self.color, points)
        self._path = []

    def write_to_file(self, path: str):
        surface = self._require_surface()
        try:
            pygame.image.save(surface, path)
        except (pygame.error, OSError) as e:
            raise RenderError("write image", f"{path}: {e}") from e
        logger.debug(f"Wrote {self.width}x{self.height} image to {path}")

    def close(self):
        self.surface = None
        self._path = []

    def _require_surface(self) -> pygame.Surface:
        if self.surface is None:
            raise RenderError("draw", "canvas already closed")
        return self.surface
