"""Canvas compositor: turns a source image into a halftone canvas.

AIDEV-NOTE: Each source pixel becomes one cell of cell_size x cell_size
output pixels. Cells are independent, the only shared state is the
random source, so a fixed seed gives the same image every time.
"""

import numpy as np
from PIL import Image

from models import RenderStyle

from . import patterns
from .canvas import WHITE, Canvas
from .errors import EmptyImageError, InvalidCellSizeError
from .features import coverage, pixel_to_hue


def draw_cell(
    canvas: Canvas,
    style: RenderStyle,
    cell: int,
    x: int,
    y: int,
    pixel,
    rng: np.random.Generator,
) -> None:
    """Draw the cell for source pixel (x, y) in the given style."""
    t = coverage(pixel)

    if style == RenderStyle.DOTS:
        patterns.dots(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.VLINES:
        patterns.vlines(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.HLINES:
        patterns.hlines(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.CROSS:
        patterns.cross(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.STIPPLE:
        patterns.stipple(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.GRID:
        patterns.grid(canvas, cell, x, y, t, rng)
    elif style == RenderStyle.MULTI:
        patterns.multi(canvas, cell, x, y, t, pixel_to_hue(pixel), rng)
    else:
        raise NotImplementedError(f"Render style {style} is not implemented.")


def generate(
    image: Image.Image,
    cell_size: int,
    style: RenderStyle,
    rng: "np.random.Generator | None" = None,
    record: bool = False,
) -> Canvas:
    """Render a whole image as halftone cells.

    Args:
        image: Source image (any mode, read as RGBA)
        cell_size: Output pixels per source pixel along each axis (>= 1)
        style: Pattern drawn into each cell
        rng: Random source for stipple and line masks,
            fresh entropy if None
        record: Keep a list of drawn shapes on the returned canvas

    Returns:
        Canvas of size (cell_size * width, cell_size * height)

    Raises:
        InvalidCellSizeError: If cell_size < 1
        EmptyImageError: If the image has no pixels
    """
    if cell_size < 1:
        raise InvalidCellSizeError(f"Cell size must be at least 1, got {cell_size}")

    width, height = image.size
    if width == 0 or height == 0:
        raise EmptyImageError(
            f"Cannot generate from an empty image ({width}x{height}). Load an image first."
        )

    if rng is None:
        rng = np.random.default_rng()

    source = image if image.mode == "RGBA" else image.convert("RGBA")
    pixels = source.load()

    canvas = Canvas(cell_size * width, cell_size * height, record=record)
    canvas.fill(WHITE)

    for x in range(width):
        for y in range(height):
            draw_cell(canvas, style, cell_size, x, y, pixels[x, y], rng)

    return canvas


def generate_image(
    image: Image.Image,
    cell_size: int,
    style: RenderStyle,
    rng: "np.random.Generator | None" = None,
) -> Image.Image:
    """Same as generate(), returning the finished RGBA image."""
    return generate(image, cell_size, style, rng).to_image()
