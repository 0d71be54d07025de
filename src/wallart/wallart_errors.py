"""Exception taxonomy for wall art builds.

Every error here aborts the build before an image is written. Running out of
frames is not an error: ``VideoSource.read_frame`` returns ``None`` and the
builder keeps the partially filled image.
"""

from __future__ import annotations


class WallArtError(Exception):
    """Base class for failures that abort a wall art build."""


class UnopenableSourceError(WallArtError, RuntimeError):
    """Raised when the movie cannot be opened or decoded."""


class InvalidStyleError(WallArtError, ValueError):
    """Raised when a rendering style is unknown or unset."""


class LengthMismatchError(WallArtError, ValueError):
    """Raised when a color strip does not match the output column height."""
