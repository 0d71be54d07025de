"""Tests for the OpenCV-backed video source."""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest

from wallart import video_source
from wallart.video_source import OpenCvVideoSource
from wallart.wallart_errors import UnopenableSourceError
from wallart.wallart_generator import WallArtBuilder
from wallart.wallart_generator import create_movie_wall_art
from wallart.wallart_settings import RenderStyle
from wallart.wallart_settings import WallArtSettings

LIST_TUPLE_RGB_COLORS = [
    (220, 30, 30),
    (30, 220, 30),
    (30, 30, 220),
    (220, 220, 30),
    (30, 220, 220),
    (220, 30, 220),
]


@pytest.fixture
def path_test_video(tmp_path: Path) -> Path:
    """Write a six-frame MJPG AVI whose frames are solid ``LIST_TUPLE_RGB_COLORS``."""
    path_video = tmp_path / "movie.avi"
    obj_writer = cv2.VideoWriter(str(path_video), cv2.VideoWriter_fourcc(*"MJPG"), 10, (32, 24))
    if not obj_writer.isOpened():
        pytest.skip("OpenCV build cannot encode MJPG video.")

    for tuple_rgb in LIST_TUPLE_RGB_COLORS:
        array_frame = np.empty((24, 32, 3), dtype=np.uint8)
        array_frame[:, :] = tuple_rgb[::-1]
        obj_writer.write(array_frame)
    obj_writer.release()
    return path_video


def assert_color_close(array_actual: np.ndarray, tuple_expected: tuple[int, int, int]) -> None:
    """Compare colors with a tolerance for JPEG compression."""
    array_diff = np.abs(array_actual.astype(np.int16) - np.array(tuple_expected, dtype=np.int16))
    assert int(array_diff.max()) <= 12


def test_open_missing_file_returns_false(tmp_path: Path) -> None:
    obj_source = OpenCvVideoSource(str(tmp_path / "missing.mp4"))
    assert obj_source.open() is False
    obj_source.close()


def test_read_before_open_raises() -> None:
    obj_source = OpenCvVideoSource("movie.mp4")
    with pytest.raises(RuntimeError):
        obj_source.read_frame()


def test_seek_and_read_returns_rgb_frames(path_test_video: Path) -> None:
    """Frames come back in RGB order at the requested index."""
    obj_source = OpenCvVideoSource(str(path_test_video))
    assert obj_source.open() is True
    try:
        assert obj_source.frame_count() == len(LIST_TUPLE_RGB_COLORS)

        obj_source.seek_to(3)
        array_frame = obj_source.read_frame()
        assert array_frame is not None
        assert array_frame.shape == (24, 32, 3)
        assert_color_close(array_frame[12, 16], LIST_TUPLE_RGB_COLORS[3])

        obj_source.seek_to(5)
        assert obj_source.read_frame() is not None
        assert obj_source.read_frame() is None
    finally:
        obj_source.close()


def test_builder_samples_real_video(path_test_video: Path) -> None:
    """Three columns over six frames sample frames 0, 2 and 4."""
    array_art = WallArtBuilder().build(
        OpenCvVideoSource(str(path_test_video)), 3, 5, RenderStyle.AVERAGE_COLOR
    )

    for int_column, int_frame_index in enumerate([0, 2, 4]):
        assert_color_close(array_art[2, int_column], LIST_TUPLE_RGB_COLORS[int_frame_index])


class UndecodableVideoCapture:
    """Capture stub for a container that opens but yields no decodable frames."""

    def __init__(self, str_path: str) -> None:
        self.str_path = str_path
        self.bool_released = False

    def isOpened(self) -> bool:
        return True

    def read(self) -> tuple[bool, None]:
        return False, None

    def get(self, int_property: int) -> float:
        return 100.0

    def release(self) -> None:
        self.bool_released = True


class ReadableVideoCapture(UndecodableVideoCapture):
    """Capture stub that decodes a tiny black frame on every read."""

    def read(self) -> tuple[bool, np.ndarray]:
        return True, np.zeros((2, 2, 3), dtype=np.uint8)


class CaptureRecorder:
    """Build readable capture stubs and keep every instance for assertions."""

    def __init__(self) -> None:
        self.list_obj_captures: list[ReadableVideoCapture] = []

    def __call__(self, str_path: str) -> ReadableVideoCapture:
        obj_capture = ReadableVideoCapture(str_path)
        self.list_obj_captures.append(obj_capture)
        return obj_capture


def test_open_undecodable_file_returns_false(monkeypatch: pytest.MonkeyPatch) -> None:
    """A container that opens but decodes no frame is reported as unopenable."""
    list_obj_captures: list[UndecodableVideoCapture] = []

    def build_capture(str_path: str) -> UndecodableVideoCapture:
        obj_capture = UndecodableVideoCapture(str_path)
        list_obj_captures.append(obj_capture)
        return obj_capture

    monkeypatch.setattr(video_source.cv2, "VideoCapture", build_capture)
    obj_source = OpenCvVideoSource("corrupt.mp4")

    assert obj_source.open() is False
    assert list_obj_captures[0].bool_released is True
    with pytest.raises(RuntimeError):
        obj_source.read_frame()


def test_undecodable_movie_writes_no_image(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Undecodable movies abort the run before any image is written."""
    monkeypatch.setattr(video_source.cv2, "VideoCapture", UndecodableVideoCapture)
    path_art = tmp_path / "art.png"
    obj_settings = WallArtSettings("corrupt.mp4", str(path_art), 4, 2)

    with pytest.raises(UnopenableSourceError):
        create_movie_wall_art(obj_settings)

    assert not path_art.exists()


def test_reopen_releases_previous_capture(monkeypatch: pytest.MonkeyPatch) -> None:
    obj_recorder = CaptureRecorder()
    monkeypatch.setattr(video_source.cv2, "VideoCapture", obj_recorder)
    obj_source = OpenCvVideoSource("movie.mp4")

    assert obj_source.open() is True
    assert obj_source.open() is True

    assert obj_recorder.list_obj_captures[0].bool_released is True
    assert obj_recorder.list_obj_captures[1].bool_released is False
    obj_source.close()
    assert obj_recorder.list_obj_captures[1].bool_released is True
