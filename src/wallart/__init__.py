"""Public package interface for the movie wall art renderer."""

from .__version__ import __version__
from .column_renderer import allocate_output_image
from .column_renderer import render_column
from .image_sink import ImageSink
from .image_sink import PillowImageSink
from .pixel_reducer import reduce_frame
from .sampling_planner import plan_sample_indices
from .video_source import OpenCvVideoSource
from .video_source import VideoSource
from .wallart_errors import InvalidStyleError
from .wallart_errors import LengthMismatchError
from .wallart_errors import UnopenableSourceError
from .wallart_errors import WallArtError
from .wallart_generator import BuildState
from .wallart_generator import WallArtBuilder
from .wallart_generator import create_movie_wall_art
from .wallart_generator import get_version
from .wallart_generator import main
from .wallart_settings import RenderStyle
from .wallart_settings import WallArtSettings

__all__ = [
    "__version__",
    "BuildState",
    "ImageSink",
    "InvalidStyleError",
    "LengthMismatchError",
    "OpenCvVideoSource",
    "PillowImageSink",
    "RenderStyle",
    "UnopenableSourceError",
    "VideoSource",
    "WallArtBuilder",
    "WallArtError",
    "WallArtSettings",
    "allocate_output_image",
    "create_movie_wall_art",
    "get_version",
    "main",
    "plan_sample_indices",
    "reduce_frame",
    "render_column",
]
