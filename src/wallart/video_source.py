"""Seek-by-index frame readers for wall art sampling."""

from __future__ import annotations

import logging
from typing import Protocol

import cv2
import numpy as np

logger_app = logging.getLogger(__name__)


class VideoSource(Protocol):
    """Protocol for frame sources consumed by ``WallArtBuilder``."""

    def open(self) -> bool:
        """Open the source and return whether frames can be read."""

    def frame_count(self) -> int:
        """Return the total number of frames reported by the source."""

    def seek_to(self, int_frame_index: int) -> None:
        """Position the source so the next read returns ``int_frame_index``."""

    def read_frame(self) -> np.ndarray | None:
        """Return the next RGB frame, or ``None`` at end of stream."""

    def close(self) -> None:
        """Release decoder resources."""


class OpenCvVideoSource:
    """Read RGB frames from a movie file through ``cv2.VideoCapture``.

    Third-party API reference:
    https://docs.opencv.org/4.x/d8/dfe/classcv_1_1VideoCapture.html
    """

    def __init__(self, str_movie_path: str) -> None:
        self.str_movie_path: str = str_movie_path
        self._video_capture: cv2.VideoCapture | None = None
        self.int_frame_count: int = 0

    def open(self) -> bool:
        """Open the capture and read one frame so container properties are populated."""
        self.close()
        obj_capture = cv2.VideoCapture(self.str_movie_path)
        if not obj_capture.isOpened():
            logger_app.error("Error opening video file: %s", self.str_movie_path)
            obj_capture.release()
            return False

        bool_ok, array_first_frame = obj_capture.read()
        if not bool_ok or array_first_frame is None:
            logger_app.error("Error decoding video file: %s", self.str_movie_path)
            obj_capture.release()
            return False

        self.int_frame_count = max(0, int(obj_capture.get(cv2.CAP_PROP_FRAME_COUNT)))
        self._video_capture = obj_capture
        logger_app.info(
            "Opened %s with %d frames.", self.str_movie_path, self.int_frame_count
        )
        return True

    def frame_count(self) -> int:
        return self.int_frame_count

    def _require_capture(self) -> cv2.VideoCapture:
        if self._video_capture is None:
            raise RuntimeError("Video source is not open.")
        return self._video_capture

    def seek_to(self, int_frame_index: int) -> None:
        self._require_capture().set(cv2.CAP_PROP_POS_FRAMES, int_frame_index)

    def read_frame(self) -> np.ndarray | None:
        """Decode the frame at the current position and convert it from BGR to RGB."""
        bool_ok, array_bgr = self._require_capture().read()
        if not bool_ok or array_bgr is None or array_bgr.size == 0:
            return None

        array_rgb: np.ndarray = cv2.cvtColor(array_bgr, cv2.COLOR_BGR2RGB)
        return array_rgb

    def close(self) -> None:
        if self._video_capture is not None:
            self._video_capture.release()
            self._video_capture = None
