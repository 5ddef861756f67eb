"""Data models and constants for the halftone generator."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# AIDEV-NOTE: Preview width matches the viewer display canvas
PREVIEW_WIDTH = 1024  # px

# Cell size bounds accepted by the CLI
MIN_CELL_SIZE = 1
MAX_CELL_SIZE = 100
DEFAULT_CELL_SIZE = 10

# Configuration file path
CONFIG_FILE = Path.home() / ".halftone_config.json"


class RenderStyle(Enum):
    """Cell pattern styles.

    AIDEV-NOTE: Each style turns a cell's coverage into ink differently.
    The set is closed; the compositor dispatches on every member.
    """

    DOTS = "dots"  # One filled circle per cell, radius scales with coverage
    VLINES = "vlines"  # Vertical 1px lines, exact count from proportion mask
    HLINES = "hlines"  # Horizontal 1px lines, exact count from proportion mask
    CROSS = "cross"  # Half-opacity vertical + horizontal lines
    STIPPLE = "stipple"  # Halton-placed single pixel dots
    GRID = "grid"  # Regular sub-grid of dots, spacing shrinks with coverage
    MULTI = "multi"  # Hue picks one of the other styles per cell


@dataclass(frozen=True)
class Shape:
    """A primitive drawn onto the canvas.

    AIDEV-NOTE: Only recorded when the canvas is created with record=True.
    Geometry is in output pixel coordinates:
    - circle: (center_x, center_y, radius)
    - line: (x0, y0, x1, y1), inclusive endpoints
    - dot: (x, y)
    """

    kind: str
    geometry: "tuple[float, ...]"
    color: "tuple[int, int, int, int]"  # RGBA (0-255)


@dataclass
class Picture:
    """Raw RGBA pixels of a preview image, ready for display."""

    width: int
    height: int
    data: bytes


@dataclass
class HalftoneConfig:
    """Configuration for halftone generation."""

    # Side length of the square output cell drawn for each source pixel
    cell_size: int = DEFAULT_CELL_SIZE

    # Pattern drawn into each cell
    render_style: RenderStyle = RenderStyle.DOTS

    # Seed for the stipple and line mask randomness.
    # None draws fresh entropy on every generation.
    seed: "int | None" = None

    # Width of the preview returned by open/generate commands
    preview_width: int = PREVIEW_WIDTH
