"""Core wall art sampling pipeline and CLI entrypoint.

This module owns the build that turns a movie into one still image: it plans
the sampled frames, reduces each frame to column data and assembles the
columns left to right. It also contains the CLI entrypoint used by
``poetry run wallart``.
"""

from __future__ import annotations

import importlib.metadata
import logging
import os
import sys
from enum import Enum

import numpy as np
from tqdm import tqdm

from .column_renderer import allocate_output_image
from .column_renderer import render_column
from .image_sink import ImageSink
from .image_sink import PillowImageSink
from .pixel_reducer import TypeColorOrSequence
from .pixel_reducer import reduce_frame
from .pixel_reducer import validate_style
from .sampling_planner import get_sample_interval
from .sampling_planner import plan_sample_indices
from .video_source import OpenCvVideoSource
from .video_source import VideoSource
from .wallart_errors import UnopenableSourceError
from .wallart_settings import DEFAULT_ART_HEIGHT
from .wallart_settings import DEFAULT_ART_WIDTH
from .wallart_settings import RenderStyle
from .wallart_settings import WallArtSettings

# Structured logging without timestamps for cleaner CLI output.
logging.basicConfig(format="%(levelname)s: %(message)s", level=logging.INFO)
logger_app = logging.getLogger(__name__)


def get_version() -> str:
    """Retrieve package version from installed metadata."""
    try:
        str_version_result: str = importlib.metadata.version("movie-wall-art")
        return str_version_result
    except importlib.metadata.PackageNotFoundError as exc_error:
        logger_app.warning(
            "Package 'movie-wall-art' not found. Using 'unknown' version. Context: %s",
            exc_error,
        )
        str_unknown_version: str = "unknown"
        return str_unknown_version


class BuildState(Enum):
    """Linear lifecycle of one ``WallArtBuilder.build`` call."""

    CREATED = "created"
    OPENED = "opened"
    SAMPLING = "sampling"
    FINALIZED = "finalized"


class WallArtBuilder:
    """Assemble a movie wall art image one sampled frame per column.

    Output/Behavior:
    - ``build`` returns a read-only ``(height, width, 3)`` uint8 RGB buffer.
    - Columns are filled strictly left to right in sample-plan order.
    - Running out of frames stops sampling early; the remaining columns
      stay black and the build still succeeds.
    - ``build_state``, ``tuple_sample_plan`` and ``int_columns_written``
      describe the most recent build.
    """

    def __init__(self) -> None:
        self.build_state: BuildState = BuildState.CREATED
        self.tuple_sample_plan: tuple[int, ...] = ()
        self.int_columns_written: int = 0

    def _open_source(self, obj_video_source: VideoSource) -> int:
        """Open the source and return its frame count."""
        if not obj_video_source.open():
            logger_app.error("Error opening video source: %r", obj_video_source)
            raise UnopenableSourceError("Error opening video file.")

        self.build_state = BuildState.OPENED
        int_frame_count: int = int(obj_video_source.frame_count())
        return int_frame_count

    def _sample_columns(
        self,
        obj_video_source: VideoSource,
        array_output: np.ndarray,
        style: RenderStyle,
    ) -> None:
        """Read, reduce and render every planned frame until the plan or stream ends."""
        int_art_height: int = int(array_output.shape[0])
        int_total_columns: int = len(self.tuple_sample_plan)

        obj_plan_iterable = tqdm(
            self.tuple_sample_plan,
            desc=f"Sampling {style.value}",
            unit="column",
        )
        for int_column, int_frame_index in enumerate(obj_plan_iterable):
            obj_video_source.seek_to(int_frame_index)
            array_frame: np.ndarray | None = obj_video_source.read_frame()
            if array_frame is None:
                logger_app.info(
                    "End of stream at frame %d. Rendered %d of %d columns.",
                    int_frame_index,
                    int_column,
                    int_total_columns,
                )
                break

            obj_column_data: TypeColorOrSequence = reduce_frame(
                array_frame, style, int_art_height
            )
            render_column(array_output, int_column, obj_column_data)
            self.int_columns_written += 1

    def build(
        self,
        obj_video_source: VideoSource,
        int_art_width: int,
        int_art_height: int,
        style: RenderStyle,
    ) -> np.ndarray:
        """Build the wall art buffer from a video source.

        Inputs:
        - ``obj_video_source``: unopened ``VideoSource``; it is closed on return.
        - ``int_art_width``/``int_art_height``: output dimensions.
        - ``style``: reduction style for every column.

        Output:
        - Read-only RGB buffer with shape ``(int_art_height, int_art_width, 3)``.

        Raises ``InvalidStyleError`` before touching the source, and
        ``UnopenableSourceError`` when the source cannot be opened.
        """
        obj_style: RenderStyle = validate_style(style)
        array_output: np.ndarray = allocate_output_image(int_art_width, int_art_height)

        self.build_state = BuildState.CREATED
        self.tuple_sample_plan = ()
        self.int_columns_written = 0

        try:
            int_frame_count: int = self._open_source(obj_video_source)

            self.build_state = BuildState.SAMPLING
            int_sample_interval: int = get_sample_interval(int_frame_count, int_art_width)
            self.tuple_sample_plan = plan_sample_indices(int_frame_count, int_art_width)
            if int_sample_interval == 0 and int_frame_count > 0:
                logger_app.warning(
                    "Movie has fewer frames (%d) than art columns (%d); every column samples frame 0.",
                    int_frame_count,
                    int_art_width,
                )
            logger_app.info(
                "Sampling %d frames every %d frames in %s style.",
                len(self.tuple_sample_plan),
                int_sample_interval,
                obj_style.value,
            )

            self._sample_columns(obj_video_source, array_output, obj_style)
        finally:
            obj_video_source.close()

        array_output.setflags(write=False)
        self.build_state = BuildState.FINALIZED
        return array_output


def create_movie_wall_art(
    obj_settings: WallArtSettings,
    obj_video_source: VideoSource | None = None,
    obj_image_sink: ImageSink | None = None,
) -> np.ndarray:
    """Build wall art for ``obj_settings`` and write it to ``str_art_path``.

    A failed build raises before the sink is called, so no image is written.
    """
    if obj_video_source is None:
        obj_video_source = OpenCvVideoSource(obj_settings.str_movie_path)
    if obj_image_sink is None:
        obj_image_sink = PillowImageSink()

    obj_builder: WallArtBuilder = WallArtBuilder()
    array_art: np.ndarray = obj_builder.build(
        obj_video_source,
        obj_settings.int_art_width,
        obj_settings.int_art_height,
        obj_settings.style,
    )

    if not obj_image_sink.encode_and_write(array_art, obj_settings.str_art_path):
        raise RuntimeError(f"Error saving image: {obj_settings.str_art_path}")
    return array_art


def build_default_art_path(str_movie_path: str, str_style: str, str_output_dir: str = "output") -> str:
    """Return ``<output_dir>/<movie stem>_wallart_<style>.png``."""
    str_filename: str = os.path.splitext(os.path.basename(str_movie_path))[0]
    str_art_path: str = os.path.join(str_output_dir, f"{str_filename}_wallart_{str_style}.png")
    return str_art_path


def main() -> None:
    """CLI entrypoint for movie wall art generation."""
    import argparse

    obj_parser = argparse.ArgumentParser(description="Movie Wall Art Generator")

    obj_parser.add_argument(
        "movie_path",
        nargs="?",
        type=str,
        help="Path to the source movie.",
    )
    obj_parser.add_argument(
        "--version", "-v", action="store_true", help="Print version and exit"
    )
    obj_parser.add_argument(
        "--art_path",
        type=str,
        help="Output image path. Defaults to output/<movie>_wallart_<style>.png.",
    )
    obj_parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_ART_WIDTH,
        help="Output width in pixels; one sampled frame per column.",
    )
    obj_parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_ART_HEIGHT,
        help="Output height in pixels.",
    )
    obj_parser.add_argument(
        "--style",
        type=str,
        default=RenderStyle.AVERAGE_COLOR.value,
        choices=RenderStyle.list_names(),
        help="How each sampled frame is reduced to a column.",
    )

    obj_args = obj_parser.parse_args()

    if obj_args.version:
        str_version_text: str = f"wallart v{get_version()} (Python {sys.version.split()[0]})"
        logger_app.info(str_version_text)
        sys.exit(0)

    if obj_args.movie_path is None:
        logger_app.error("movie_path is required.")
        sys.exit(1)
    if obj_args.width < 1 or obj_args.height < 1:
        logger_app.error("Art width and height must be >= 1.")
        sys.exit(1)

    str_art_path: str = obj_args.art_path
    if str_art_path is None:
        str_art_path = build_default_art_path(obj_args.movie_path, obj_args.style)

    try:
        obj_settings: WallArtSettings = WallArtSettings(
            str_movie_path=obj_args.movie_path,
            str_art_path=str_art_path,
            int_art_width=obj_args.width,
            int_art_height=obj_args.height,
            style=obj_args.style,
        )
    except Exception as exc_error:
        logger_app.error("Initialization error. Context: %s", exc_error)
        sys.exit(1)

    logger_app.info(
        "Rendering %dx%d wall art from %s...",
        obj_settings.int_art_width,
        obj_settings.int_art_height,
        obj_settings.str_movie_path,
    )
    try:
        create_movie_wall_art(obj_settings)
    except Exception as exc_error:
        logger_app.error("Rendering failed. Context: %s", exc_error)
        sys.exit(1)


if __name__ == "__main__":
    main()
