"""Display scaling for previews."""

from PIL import Image

from models import PREVIEW_WIDTH, Picture


def scale_to_width(image: Image.Image, width: int = PREVIEW_WIDTH) -> Image.Image:
    """Resize an image to the given width, keeping its aspect ratio.

    Args:
        image: Input PIL image
        width: Target width in pixels

    Returns:
        Lanczos-resampled RGBA image
    """
    orig_width, orig_height = image.size
    scale = width / orig_width
    new_width = int(orig_width * scale)
    new_height = max(int(orig_height * scale), 1)

    return image.convert("RGBA").resize(
        (new_width, new_height), Image.Resampling.LANCZOS
    )


def to_picture(image: Image.Image) -> Picture:
    """Package an image as raw RGBA bytes for display."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    width, height = rgba.size
    return Picture(width=width, height=height, data=rgba.tobytes())


def preview(image: Image.Image, width: int = PREVIEW_WIDTH) -> Picture:
    """Scale an image for display and package it as a Picture."""
    return to_picture(scale_to_width(image, width))
