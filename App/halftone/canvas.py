"""Output raster with the drawing primitives used by the cell patterns."""

import numpy as np
from PIL import Image, ImageDraw

from models import Shape

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)

# Circles are drawn at this many subpixels per pixel, then box-filtered down
SUPERSAMPLE = 4


class Canvas:
    """Mutable RGB raster that patterns draw into.

    Colors are RGBA tuples; alpha below 255 blends over what is already
    on the canvas. Pixel (i, j) covers [i, i+1) x [j, j+1).

    AIDEV-NOTE: Pass record=True to keep a list of every drawn Shape.
    Tests use it to check which primitive a cell produced; leave it off
    for real images since stipple can draw cell_size**2 dots per pixel.
    """

    def __init__(self, width: int, height: int, record: bool = False):
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), WHITE[:3])
        # RGBA draw mode on an RGB image blends translucent fills
        self._draw = ImageDraw.Draw(self.image, "RGBA")
        self.shapes: "list[Shape] | None" = [] if record else None

    @property
    def pixels(self) -> np.ndarray:
        """Snapshot of the raster as an (height, width, 3) uint8 array."""
        return np.asarray(self.image)

    def fill(self, color: "tuple[int, int, int, int]" = WHITE) -> None:
        """Fill the whole canvas with a solid color."""
        self.image.paste(color[:3], (0, 0, self.width, self.height))

    def _record(self, kind: str, geometry: tuple, color) -> None:
        if self.shapes is not None:
            self.shapes.append(Shape(kind=kind, geometry=geometry, color=tuple(color)))

    def dot(self, x: float, y: float, color=BLACK) -> None:
        """Set the single pixel containing (x, y)."""
        self.dots(np.array([x]), np.array([y]), color)

    def dots(self, xs: np.ndarray, ys: np.ndarray, color=BLACK) -> None:
        """Set the pixels containing each (xs[i], ys[i]) in one draw call."""
        px = np.floor(np.asarray(xs, dtype=np.float64)).astype(np.int64)
        py = np.floor(np.asarray(ys, dtype=np.float64)).astype(np.int64)
        inside = (px >= 0) & (px < self.width) & (py >= 0) & (py < self.height)
        points = list(zip(px[inside].tolist(), py[inside].tolist()))
        if not points:
            return

        self._draw.point(points, fill=tuple(color))
        if self.shapes is not None:
            for point in points:
                self._record("dot", point, color)

    def vline(self, x: int, y0: int, y1: int, color=BLACK) -> None:
        """1px vertical line from y0 to y1 inclusive."""
        if not 0 <= x < self.width:
            return
        y0 = max(y0, 0)
        y1 = min(y1, self.height - 1)
        if y1 < y0:
            return
        self._draw.line([(x, y0), (x, y1)], fill=tuple(color), width=1)
        self._record("line", (x, y0, x, y1), color)

    def hline(self, y: int, x0: int, x1: int, color=BLACK) -> None:
        """1px horizontal line from x0 to x1 inclusive."""
        if not 0 <= y < self.height:
            return
        x0 = max(x0, 0)
        x1 = min(x1, self.width - 1)
        if x1 < x0:
            return
        self._draw.line([(x0, y), (x1, y)], fill=tuple(color), width=1)
        self._record("line", (x0, y, x1, y), color)

    def circle(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        color=BLACK,
        clip: "tuple[int, int, int, int] | None" = None,
    ) -> None:
        """Anti-aliased filled circle, optionally clipped to a (x0, y0, x1, y1) box.

        AIDEV-NOTE: The disc is drawn into a supersampled mask tile the size
        of the clip box, box-filtered down to pixel coverage and pasted
        through that mask, so nothing lands outside the box. A radius
        smaller than half a subpixel draws nothing.
        """
        if radius * SUPERSAMPLE < 0.5:
            return

        x0, y0, x1, y1 = clip if clip is not None else (0, 0, self.width, self.height)
        x0 = max(x0, int(np.floor(center_x - radius)), 0)
        y0 = max(y0, int(np.floor(center_y - radius)), 0)
        x1 = min(x1, int(np.ceil(center_x + radius)), self.width)
        y1 = min(y1, int(np.ceil(center_y + radius)), self.height)
        if x1 <= x0 or y1 <= y0:
            return

        tile_w = x1 - x0
        tile_h = y1 - y0
        mask = Image.new("L", (tile_w * SUPERSAMPLE, tile_h * SUPERSAMPLE), 0)
        cx = (center_x - x0) * SUPERSAMPLE
        cy = (center_y - y0) * SUPERSAMPLE
        r = radius * SUPERSAMPLE
        ImageDraw.Draw(mask).ellipse([cx - r, cy - r, cx + r - 1, cy + r - 1], fill=255)
        mask = mask.resize((tile_w, tile_h), Image.Resampling.BOX)

        alpha = color[3]
        if alpha < 255:
            mask = mask.point(lambda v: v * alpha // 255)
        if mask.getbbox() is None:
            return

        self.image.paste(tuple(color[:3]), (x0, y0, x1, y1), mask)
        self._record("circle", (center_x, center_y, radius), color)

    def to_image(self) -> Image.Image:
        """Hand off the canvas as an RGBA PIL image."""
        return self.image.convert("RGBA")
