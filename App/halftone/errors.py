"""Exceptions raised by the halftone pipeline."""


class HalftoneError(Exception):
    """Base class for halftone errors."""


class ImageLoadError(HalftoneError):
    """The source image could not be opened or decoded."""


class ImageSaveError(HalftoneError):
    """The generated image could not be encoded to disk."""


class EmptyImageError(HalftoneError, ValueError):
    """Generation was requested for a zero-sized source image."""


class InvalidCellSizeError(HalftoneError, ValueError):
    """Cell size is below one pixel."""


class InvalidSeedError(HalftoneError, ValueError):
    """Configured seed is not a non-negative integer."""


class StoreLockError(HalftoneError, RuntimeError):
    """The shared image store lock could not be acquired.

    AIDEV-NOTE: This is a logic fault (something held the lock too long),
    so the command layer lets it propagate instead of reporting it.
    """
