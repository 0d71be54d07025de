"""Image file output for finished wall art buffers."""

from __future__ import annotations

import logging
import os
from typing import Protocol

import numpy as np
from PIL import Image

logger_app = logging.getLogger(__name__)


class ImageSink(Protocol):
    """Protocol for encoders that persist a finished output buffer."""

    def encode_and_write(self, array_image: np.ndarray, str_path: str) -> bool:
        """Encode ``array_image`` to ``str_path`` and report success."""


class PillowImageSink:
    """Encode RGB buffers with Pillow, inferring the format from the file extension."""

    def __init__(self, str_default_format: str = "png") -> None:
        self.str_default_format: str = str_default_format

    def resolve_format(self, str_path: str) -> str:
        """Return the Pillow format name for ``str_path``."""
        str_ext: str = os.path.splitext(str_path)[1].lower().lstrip(".")
        if not str_ext:
            return self.str_default_format.upper()

        dict_extensions: dict[str, str] = Image.registered_extensions()
        str_format: str = dict_extensions.get(f".{str_ext}", self.str_default_format.upper())
        return str_format

    def encode_and_write(self, array_image: np.ndarray, str_path: str) -> bool:
        """Save an RGB buffer to disk, creating the parent directory when needed."""
        try:
            str_output_dir: str = os.path.dirname(str_path)
            if str_output_dir:
                os.makedirs(str_output_dir, exist_ok=True)

            image_output: Image.Image = Image.fromarray(np.ascontiguousarray(array_image))
            image_output.save(str_path, format=self.resolve_format(str_path))
            logger_app.info("Saved wall art image to %s", str_path)
            return True
        except Exception as exc_error:
            logger_app.error("Failed to save wall art image. Context: %s", exc_error)
            return False
