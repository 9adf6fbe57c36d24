import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

from maze_carver.core.errors import RenderError

logger = logging.getLogger(__name__)


def surface_to_frame(surface: pygame.Surface) -> np.ndarray:
    view = pygame.surfarray.array3d(surface)
    # view is (width, height, 3) RGB; OpenCV wants (height, width, 3) BGR
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    """
    Captures the canvas every `frame_every` carved walls and writes an mp4.
    Use as a generator listener: recorder(event).
    """
    def __init__(self, canvas, active=False, output_file=None, fps=30, frame_every=25):
        self.canvas = canvas
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.frame_every = max(1, frame_every)
        self.writer = None
        self.frame_size = None
        self.frame_count = 0
        self.events_seen = 0

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"maze_carve_{ts}.mp4"

            if os.path.exists("recordings"):
                self.output_file = os.path.join("recordings", fname)
            else:
                self.output_file = fname

    def __call__(self, event):
        self.events_seen += 1
        if self.events_seen % self.frame_every == 0:
            self.capture_frame()

    def capture_frame(self):
        if not self.active:
            return

        surface = self.canvas.surface
        width, height = surface.get_size()

        # Initialize writer on first frame
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            if not self.writer.isOpened():
                self.writer = None
                self.active = False
                raise RenderError("open video", self.output_file)
            logger.info(f"Recording started: {self.output_file}")

        self.writer.write(surface_to_frame(surface))
        self.frame_count += 1

    def start(self):
        self.capture_frame()

    def stop(self):
        if not self.active:
            return
        # Final frame shows the finished maze, even when no periodic frame was due
        self.capture_frame()
        self.writer.release()
        logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
        self.writer = None
        self.active = False
