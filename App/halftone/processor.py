"""Command surface: load, generate and save halftone images.

AIDEV-NOTE: The *_image commands mirror the three actions of the viewer.
They report failures as (None, message) / (False, message) so callers
can show the message; StoreLockError is a logic fault and propagates.
"""

import os
from pathlib import Path

import numpy as np
from PIL import Image

from models import HalftoneConfig, Picture, RenderStyle

from .compositor import generate_image
from .errors import (
    HalftoneError,
    ImageLoadError,
    ImageSaveError,
    InvalidSeedError,
    StoreLockError,
)
from .preview import preview
from .store import ImageStore


class HalftoneProcessor:
    """Loads a source image and renders it in the configured style."""

    def __init__(
        self,
        config: HalftoneConfig | None = None,
        store: ImageStore | None = None,
    ):
        self.config = config or HalftoneConfig()
        self.store = store or ImageStore()

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, JPG, TIFF, WEBP, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            ImageLoadError: If file cannot be loaded or is invalid
        """
        try:
            with Image.open(file_path) as image:
                # AIDEV-NOTE: Always convert to RGBA for consistent processing
                image = image.convert("RGBA")
            return image
        except Exception as e:
            raise ImageLoadError(
                f"The file at {file_path} could not be opened: {e}"
            ) from e

    def make_rng(self) -> np.random.Generator:
        """Random source for one generation, seeded from the config if set."""
        try:
            return np.random.default_rng(self.config.seed)
        except (TypeError, ValueError) as e:
            raise InvalidSeedError(f"Invalid seed {self.config.seed!r}: {e}") from e

    def generate(
        self,
        cell_size: int | None = None,
        style: RenderStyle | None = None,
    ) -> Image.Image:
        """Render the held image at full size.

        Args:
            cell_size: Pixels per cell, uses config default if None
            style: Render style, uses config default if None

        Returns:
            RGBA image of size (cell_size * width, cell_size * height)

        Raises:
            EmptyImageError: If no image has been loaded
            InvalidCellSizeError: If cell_size < 1
        """
        cell_size = cell_size if cell_size is not None else self.config.cell_size
        style = style or self.config.render_style

        source = self.store.snapshot()
        return generate_image(source, cell_size, style, self.make_rng())

    def open_image(self, file_path: str | Path) -> "tuple[Picture | None, str | None]":
        """Load an image into the store and return its preview.

        A failed load keeps the previously held image.

        Returns:
            Tuple of (preview: Optional[Picture], error_message: Optional[str])
        """
        try:
            image = self.load_image(file_path)
        except ImageLoadError as e:
            return None, str(e)

        self.store.replace(image)
        width, height = image.size
        print(f"Loaded image with size: {width}x{height} pixels.")
        return preview(image, self.config.preview_width), None

    def gen_image(
        self,
        cell_size: int | None = None,
        style: RenderStyle | None = None,
    ) -> "tuple[Picture | None, str | None]":
        """Render the held image and return a preview of the result.

        Returns:
            Tuple of (preview: Optional[Picture], error_message: Optional[str])
        """
        try:
            result = self.generate(cell_size, style)
        except StoreLockError:
            raise
        except HalftoneError as e:
            return None, str(e)

        return preview(result, self.config.preview_width), None

    def save_image(
        self,
        file_path: str | Path,
        cell_size: int | None = None,
        style: RenderStyle | None = None,
    ) -> "tuple[bool, str | None]":
        """Render the held image at full size and write it to disk.

        Nothing is written if rendering fails.

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            result = self.generate(cell_size, style)
            self.write_image(result, file_path)
        except StoreLockError:
            raise
        except HalftoneError as e:
            return False, str(e)

        print(f"Saved {result.size[0]}x{result.size[1]} image to {file_path}")
        return True, None

    def write_image(self, image: Image.Image, file_path: str | Path) -> None:
        """Encode an image to disk, format chosen from the file extension."""
        path = Path(file_path)
        if path.suffix.lower() in (".jpg", ".jpeg"):
            # JPEG has no alpha channel
            image = image.convert("RGB")
        # AIDEV-NOTE: Encode next to the target and swap it in, so a failed
        # save never leaves a truncated file at the target path
        partial = path.with_name(f".{path.stem}.partial{path.suffix}")
        try:
            image.save(partial)
            os.replace(partial, path)
        except (OSError, ValueError) as e:
            partial.unlink(missing_ok=True)
            raise ImageSaveError(f"Could not save image to {file_path}: {e}") from e
