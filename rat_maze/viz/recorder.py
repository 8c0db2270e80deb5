import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)

RECORDINGS_DIR = "recordings"

def recording_filename(maze_name: str, when: datetime = None) -> str:
    """solve_<maze>_<timestamp>.mp4, under recordings/ when that folder exists."""
    when = when or datetime.now()
    fname = f"solve_{maze_name}_{when.strftime('%Y%m%d_%H%M%S')}.mp4"
    if os.path.isdir(RECORDINGS_DIR):
        return os.path.join(RECORDINGS_DIR, fname)
    return fname

class VideoRecorder:
    """
    Turns the renderer's surface into one mp4 frame per solver step, so
    the video plays back the rat's walk at a fixed rate.
    """
    def __init__(self, active=False, output_file=None, fps=30, maze_name="maze"):
        self.active = active
        self.fps = fps
        self.output_file = output_file
        if self.active and not self.output_file:
            self.output_file = recording_filename(maze_name)
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def open_writer(self, size):
        self.frame_size = size
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, size)
        if not self.writer.isOpened():
            self.writer = None
            raise OSError(f"Cannot open video writer for {self.output_file}")
        logger.info(f"Recording solve to {self.output_file}")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        if self.writer is None:
            self.open_writer(surface.get_size())
        elif surface.get_size() != self.frame_size:
            surface = pygame.transform.smoothscale(surface, self.frame_size)

        # surfarray is (x, y, rgb); OpenCV wants (y, x, bgr)
        rgb = np.ascontiguousarray(pygame.surfarray.array3d(surface).swapaxes(0, 1))
        self.writer.write(cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            self.writer = None
            logger.info(f"Saved {self.frame_count} solver steps to {self.output_file}")
