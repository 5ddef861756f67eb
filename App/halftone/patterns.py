"""Cell pattern generators.

AIDEV-NOTE: Every generator draws one cell, the square
[x*cell, x*cell + cell) x [y*cell, y*cell + cell) of the canvas, and
never touches pixels outside it. Coverage t is 0 (white) to 1 (black).
"""

import numpy as np

from models import RenderStyle

from .canvas import BLACK, Canvas
from .sampling import halton_seq, proportion_mask, round_count

# Midway between 1/2 (touching the cell edges) and sqrt(2)/2 (touching the corners)
DOT_RADIUS_FACTOR = 0.6036

CROSS_COLOR = (0, 0, 0, 127)


def dots(canvas: Canvas, cell: int, x: int, y: int, t: float, rng=None) -> None:
    """One filled circle centered in the cell, radius proportional to t."""
    x0 = x * cell
    y0 = y * cell
    canvas.circle(
        x0 + cell / 2,
        y0 + cell / 2,
        t * cell * DOT_RADIUS_FACTOR,
        BLACK,
        clip=(x0, y0, x0 + cell, y0 + cell),
    )


def _vertical_sweep(canvas, cell, x, y, t, rng, color) -> None:
    mask = proportion_mask(cell, t, rng)
    for offset in np.flatnonzero(mask):
        canvas.vline(x * cell + int(offset), y * cell, y * cell + cell - 1, color)


def _horizontal_sweep(canvas, cell, x, y, t, rng, color) -> None:
    mask = proportion_mask(cell, t, rng)
    for offset in np.flatnonzero(mask):
        canvas.hline(y * cell + int(offset), x * cell, x * cell + cell - 1, color)


def vlines(canvas: Canvas, cell: int, x: int, y: int, t: float, rng) -> None:
    """round(t * cell) vertical lines at shuffled column offsets."""
    _vertical_sweep(canvas, cell, x, y, t, rng, BLACK)


def hlines(canvas: Canvas, cell: int, x: int, y: int, t: float, rng) -> None:
    """round(t * cell) horizontal lines at shuffled row offsets."""
    _horizontal_sweep(canvas, cell, x, y, t, rng, BLACK)


def cross(canvas: Canvas, cell: int, x: int, y: int, t: float, rng) -> None:
    """Half-opacity vertical and horizontal lines with independent masks."""
    _vertical_sweep(canvas, cell, x, y, t, rng, CROSS_COLOR)
    _horizontal_sweep(canvas, cell, x, y, t, rng, CROSS_COLOR)


def stipple(canvas: Canvas, cell: int, x: int, y: int, t: float, rng) -> None:
    """round(t * cell**2) single pixel dots placed on a Halton sequence.

    AIDEV-NOTE: The sequence seed is drawn from rng, so the whole image is
    reproducible from one seed while each cell gets its own offset.
    """
    n = round_count(t * cell * cell)
    if n == 0:
        return
    seed = int(rng.integers(0, 2**63))
    points = halton_seq(cell, cell, n, seed)
    x0 = x * cell
    y0 = y * cell
    canvas.dots(x0 + points[:, 0], y0 + points[:, 1], BLACK)


def grid(canvas: Canvas, cell: int, x: int, y: int, t: float, rng=None) -> None:
    """Dots on a regular sub-grid, spacing clamp(1/t, 1, cell).

    At t = 0 the spacing saturates to the cell size, leaving one dot at
    the cell origin.
    """
    spacing = cell if t <= 0 else min(max(1.0 / t, 1.0), float(cell))
    offsets = np.arange(0.0, cell, spacing)
    xs, ys = np.meshgrid(cell * x + offsets, cell * y + offsets, indexing="ij")
    canvas.dots(xs.ravel(), ys.ravel(), BLACK)


def style_for_hue(hue: int) -> RenderStyle:
    """Pick the pattern used by the multi style for a hue in degrees."""
    if 15 <= hue <= 45:  # orange
        return RenderStyle.CROSS
    elif 46 <= hue <= 75:  # yellow
        return RenderStyle.STIPPLE
    elif 76 <= hue <= 165:  # green
        return RenderStyle.VLINES
    elif 166 <= hue <= 255:  # blue
        return RenderStyle.DOTS
    elif 256 <= hue <= 345:  # purple
        return RenderStyle.GRID
    else:  # red
        return RenderStyle.HLINES


def multi(
    canvas: Canvas, cell: int, x: int, y: int, t: float, hue: int, rng
) -> None:
    """Draw the cell with whichever style its hue bucket selects."""
    generator = HUE_GENERATORS[style_for_hue(hue)]
    generator(canvas, cell, x, y, t, rng)


HUE_GENERATORS = {
    RenderStyle.CROSS: cross,
    RenderStyle.STIPPLE: stipple,
    RenderStyle.VLINES: vlines,
    RenderStyle.DOTS: dots,
    RenderStyle.GRID: grid,
    RenderStyle.HLINES: hlines,
}
