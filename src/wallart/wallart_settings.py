"""Run settings and rendering style selection for wall art builds.

This module isolates the per-run configuration from the builder so
`wallart_generator.py` stays focused on the sampling pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .wallart_errors import InvalidStyleError

logger_app = logging.getLogger(__name__)

DEFAULT_ART_WIDTH: int = 1080
DEFAULT_ART_HEIGHT: int = 1920


class RenderStyle(Enum):
    """How one sampled frame is reduced to column pixel data."""

    CENTER_PIXEL = "center_pixel"
    AVERAGE_COLOR = "average_color"
    PIXEL_STRIP = "pixel_strip"

    @classmethod
    def from_name(cls, str_name: str) -> RenderStyle:
        """Resolve a style from its value or member name, case-insensitive."""
        str_normalized: str = str_name.strip().lower().replace("-", "_")
        for obj_style in cls:
            if str_normalized in (obj_style.value, obj_style.name.lower()):
                return obj_style

        logger_app.error("Unknown render style: %r", str_name)
        raise InvalidStyleError(f"Style not set or found: {str_name!r}")

    @classmethod
    def list_names(cls) -> list[str]:
        """Return style values in declaration order for CLI choices."""
        list_str_names: list[str] = [obj_style.value for obj_style in cls]
        return list_str_names


@dataclass
class WallArtSettings:
    """Validated configuration for one wall art run.

    Inputs:
    - ``str_movie_path``: Filesystem path of the source movie.
    - ``str_art_path``: Destination path of the rendered image.
    - ``int_art_width``/``int_art_height``: Output dimensions in pixels.
    - ``style``: ``RenderStyle`` member or its name.

    Output/Behavior:
    - Paths are stripped and must be non-empty.
    - Dimensions must be positive.
    - String styles are coerced to ``RenderStyle``.
    """

    str_movie_path: str
    str_art_path: str
    int_art_width: int = DEFAULT_ART_WIDTH
    int_art_height: int = DEFAULT_ART_HEIGHT
    style: RenderStyle | str = RenderStyle.AVERAGE_COLOR

    def __post_init__(self) -> None:
        """Validate paths and dimensions and normalize the style."""
        str_movie_path: str = (self.str_movie_path or "").strip()
        if not str_movie_path:
            raise ValueError("Movie path cannot be empty or whitespace.")
        self.str_movie_path = str_movie_path

        str_art_path: str = (self.str_art_path or "").strip()
        if not str_art_path:
            raise ValueError("Art path cannot be empty or whitespace.")
        self.str_art_path = str_art_path

        if self.int_art_width < 1:
            raise ValueError(f"Art width must be >= 1. Received: {self.int_art_width}")
        if self.int_art_height < 1:
            raise ValueError(f"Art height must be >= 1. Received: {self.int_art_height}")

        if isinstance(self.style, str):
            self.style = RenderStyle.from_name(self.style)
        elif not isinstance(self.style, RenderStyle):
            logger_app.error("Render style has unsupported type: %r", self.style)
            raise InvalidStyleError(f"Style not set or found: {self.style!r}")
