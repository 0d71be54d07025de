"""Column painting into the wall art output buffer."""

from __future__ import annotations

import logging

import numpy as np

from .pixel_reducer import TypeColorOrSequence
from .wallart_errors import LengthMismatchError

logger_app = logging.getLogger(__name__)


def allocate_output_image(int_art_width: int, int_art_height: int) -> np.ndarray:
    """Allocate a black RGB buffer with shape ``(int_art_height, int_art_width, 3)``."""
    if int_art_width < 1 or int_art_height < 1:
        raise ValueError(
            f"Art dimensions must be >= 1. Received: {int_art_width}x{int_art_height}"
        )
    array_output: np.ndarray = np.zeros((int_art_height, int_art_width, 3), dtype=np.uint8)
    return array_output


def _as_uint8_colors(obj_data: TypeColorOrSequence) -> np.ndarray:
    """Convert one color or a color sequence to uint8, rejecting out-of-range channels."""
    array_data: np.ndarray = np.asarray(obj_data)
    if array_data.dtype == np.uint8:
        return array_data

    if array_data.size and (array_data.min() < 0 or array_data.max() > 255):
        raise ValueError("Color channels must be within [0, 255].")
    array_result: np.ndarray = array_data.astype(np.uint8)
    return array_result


def render_column(
    array_output: np.ndarray, int_column: int, obj_data: TypeColorOrSequence
) -> None:
    """Write reduced color data into one column of the output buffer.

    Inputs:
    - ``array_output``: output buffer with shape ``(height, width, 3)``.
    - ``int_column``: target column, ``0 <= int_column < width``.
    - ``obj_data``: one RGB color (solid column) or ``height`` colors
      (gradient column, row ``i`` gets ``obj_data[i]``).
    """
    int_art_height: int = int(array_output.shape[0])
    int_art_width: int = int(array_output.shape[1])
    if not 0 <= int_column < int_art_width:
        raise IndexError(f"Column {int_column} outside output width {int_art_width}.")

    array_colors: np.ndarray = _as_uint8_colors(obj_data)
    if array_colors.shape == (3,):
        array_output[:, int_column] = array_colors
        return

    if array_colors.ndim != 2 or array_colors.shape[1] != 3:
        raise ValueError(f"Column data must be a color or a color sequence. Received: {array_colors.shape}")

    if array_colors.shape[0] != int_art_height:
        logger_app.error(
            "Strip length %d does not match art height %d at column %d.",
            array_colors.shape[0],
            int_art_height,
            int_column,
        )
        raise LengthMismatchError(
            f"Strip length {array_colors.shape[0]} does not match art height {int_art_height}."
        )

    array_output[:, int_column] = array_colors
