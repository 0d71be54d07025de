"""Frame reduction for wall art columns.

Each ``RenderStyle`` maps to one reducer that collapses an RGB frame of shape
``(H, W, 3)`` into either one color (a solid column) or a sequence of colors
(a gradient column).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Union

import numpy as np

from .wallart_errors import InvalidStyleError
from .wallart_settings import RenderStyle

logger_app = logging.getLogger(__name__)

TypeColor = tuple[int, int, int]
TypeColorOrSequence = Union[TypeColor, np.ndarray]


def _validate_frame(array_frame: np.ndarray) -> tuple[int, int]:
    """Return ``(height, width)`` of an RGB frame, rejecting malformed input."""
    if array_frame.ndim != 3 or array_frame.shape[2] != 3:
        raise ValueError(f"Frame must have shape (H, W, 3). Received: {array_frame.shape}")

    int_height: int = int(array_frame.shape[0])
    int_width: int = int(array_frame.shape[1])
    if int_height < 1 or int_width < 1:
        raise ValueError(f"Frame must not be empty. Received: {array_frame.shape}")
    return int_height, int_width


def _to_color(array_pixel: np.ndarray) -> TypeColor:
    tuple_color: TypeColor = (int(array_pixel[0]), int(array_pixel[1]), int(array_pixel[2]))
    return tuple_color


def reduce_center_pixel(array_frame: np.ndarray, int_output_length: int) -> TypeColor:
    """Return the pixel at ``(H // 2, W // 2)``."""
    int_height, int_width = _validate_frame(array_frame)
    tuple_color: TypeColor = _to_color(array_frame[int_height // 2, int_width // 2])
    return tuple_color


def reduce_average_color(array_frame: np.ndarray, int_output_length: int) -> TypeColor:
    """Return the truncated per-channel mean over every pixel of the frame."""
    int_height, int_width = _validate_frame(array_frame)
    int_pixel_count: int = int_height * int_width

    array_channel_sums: np.ndarray = array_frame.reshape(-1, 3).sum(axis=0, dtype=np.uint64)
    array_mean: np.ndarray = array_channel_sums // np.uint64(int_pixel_count)
    tuple_color: TypeColor = _to_color(array_mean)
    return tuple_color


def reduce_pixel_strip(array_frame: np.ndarray, int_output_length: int) -> np.ndarray:
    """Summarize a frame as ``int_output_length`` locally averaged colors.

    Pixels are walked column by column (top to bottom within each column,
    left to right across columns) and averaged in consecutive chunks of
    ``(H * W) // int_output_length`` pixels. Each chunk mean fills
    ``max(1, chunk // int_output_length)`` strip slots from the cursor.

    Pixels after the last full chunk are dropped, and slots the walk never
    reaches stay black.
    """
    int_height, int_width = _validate_frame(array_frame)
    int_pixel_count: int = int_height * int_width

    int_sample_interval: int = int_pixel_count // int_output_length
    int_chunk_size: int = max(1, int_sample_interval)
    int_strip_interval: int = max(1, int_sample_interval // int_output_length)

    # Chunks past this count would land beyond the clamped cursor.
    int_chunks_needed: int = -(-int_output_length // int_strip_interval)
    int_chunk_count: int = min(int_pixel_count // int_chunk_size, int_chunks_needed)

    array_strip: np.ndarray = np.zeros((int_output_length, 3), dtype=np.uint8)

    array_column_major: np.ndarray = array_frame.transpose(1, 0, 2).reshape(-1, 3)
    array_chunks: np.ndarray = array_column_major[: int_chunk_count * int_chunk_size].reshape(
        int_chunk_count, int_chunk_size, 3
    )
    array_means: np.ndarray = array_chunks.sum(axis=1, dtype=np.int64) // int_chunk_size

    array_slots: np.ndarray = np.repeat(array_means, int_strip_interval, axis=0)[:int_output_length]
    array_strip[: len(array_slots)] = array_slots.astype(np.uint8)
    return array_strip


DICT_REDUCERS: dict[RenderStyle, Callable[[np.ndarray, int], TypeColorOrSequence]] = {
    RenderStyle.CENTER_PIXEL: reduce_center_pixel,
    RenderStyle.AVERAGE_COLOR: reduce_average_color,
    RenderStyle.PIXEL_STRIP: reduce_pixel_strip,
}


def validate_style(style: object) -> RenderStyle:
    """Return ``style`` when it names a known reducer, else raise ``InvalidStyleError``."""
    if not isinstance(style, RenderStyle) or style not in DICT_REDUCERS:
        logger_app.error("Style not set or found: %r", style)
        raise InvalidStyleError(f"Style not set or found: {style!r}")
    return style


def reduce_frame(
    array_frame: np.ndarray, style: RenderStyle, int_output_length: int
) -> TypeColorOrSequence:
    """Reduce one frame to column data for the selected style.

    Inputs:
    - ``array_frame``: RGB frame with shape ``(H, W, 3)``.
    - ``style``: rendering style for the whole run.
    - ``int_output_length``: output column height.

    Output:
    - An RGB tuple for solid styles, or an ``(int_output_length, 3)`` uint8
      array for ``RenderStyle.PIXEL_STRIP``.
    """
    obj_style: RenderStyle = validate_style(style)
    if int_output_length < 1:
        raise ValueError(f"Output length must be >= 1. Received: {int_output_length}")

    fn_reducer = DICT_REDUCERS[obj_style]
    obj_result: TypeColorOrSequence = fn_reducer(array_frame, int_output_length)
    return obj_result
