"""Shared pytest configuration and fixtures for the wall art test suite."""

from pathlib import Path
import sys

import numpy as np
import pytest


path_project_root = Path(__file__).resolve().parents[1]
path_src = path_project_root / "src"
if str(path_src) not in sys.path:
    sys.path.insert(0, str(path_src))


class StubVideoSource:
    """In-memory frame source that records how the builder drives it."""

    def __init__(
        self,
        list_array_frames: list[np.ndarray],
        bool_can_open: bool = True,
        int_reported_frame_count: int | None = None,
    ) -> None:
        self.list_array_frames = list_array_frames
        self.bool_can_open = bool_can_open
        self.int_reported_frame_count = int_reported_frame_count
        self.list_int_seeks: list[int] = []
        self.bool_open_called = False
        self.bool_closed = False
        self._int_position = 0

    def open(self) -> bool:
        self.bool_open_called = True
        return self.bool_can_open

    def frame_count(self) -> int:
        if self.int_reported_frame_count is not None:
            return self.int_reported_frame_count
        return len(self.list_array_frames)

    def seek_to(self, int_frame_index: int) -> None:
        self.list_int_seeks.append(int_frame_index)
        self._int_position = int_frame_index

    def read_frame(self) -> np.ndarray | None:
        if self._int_position >= len(self.list_array_frames):
            return None
        array_frame = self.list_array_frames[self._int_position]
        self._int_position += 1
        return array_frame

    def close(self) -> None:
        self.bool_closed = True


def build_solid_frame(
    tuple_color: tuple[int, int, int], int_height: int = 6, int_width: int = 8
) -> np.ndarray:
    """Create an RGB frame filled with one color."""
    array_frame = np.empty((int_height, int_width, 3), dtype=np.uint8)
    array_frame[:, :] = tuple_color
    return array_frame


@pytest.fixture
def list_tuple_palette() -> list[tuple[int, int, int]]:
    """Ten distinct RGB colors, one per synthetic frame."""
    list_tuple_colors = [
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 0),
        (0, 255, 255),
        (255, 0, 255),
        (128, 64, 32),
        (32, 64, 128),
        (10, 200, 90),
        (250, 250, 250),
    ]
    return list_tuple_colors


@pytest.fixture
def stub_palette_source(list_tuple_palette: list[tuple[int, int, int]]) -> StubVideoSource:
    """Ten-frame source where frame ``i`` is solid ``list_tuple_palette[i]``."""
    list_array_frames = [build_solid_frame(tuple_color) for tuple_color in list_tuple_palette]
    obj_source = StubVideoSource(list_array_frames)
    return obj_source


@pytest.fixture
def array_coordinate_frame() -> np.ndarray:
    """5x8 frame whose pixel at ``(y, x)`` is ``(y, x, 7)``."""
    int_height, int_width = 5, 8
    array_frame = np.zeros((int_height, int_width, 3), dtype=np.uint8)
    for int_y in range(int_height):
        for int_x in range(int_width):
            array_frame[int_y, int_x] = (int_y, int_x, 7)
    return array_frame
