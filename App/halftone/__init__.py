"""Halftone rendering of raster images.

AIDEV-NOTE: This package turns each source pixel into a cell of ink.
Organized into modular components:
- features: per-pixel coverage and hue
- sampling: Halton points and exact-proportion line masks
- canvas: output raster and drawing primitives
- patterns: the cell styles (dots, lines, cross, stipple, grid, multi)
- compositor: walks the source image and dispatches per cell
- preview: display scaling
- store: shared source image holder
- processor: load / generate / save commands
"""

from .compositor import generate, generate_image
from .processor import HalftoneProcessor
from .store import ImageStore

__all__ = ["HalftoneProcessor", "ImageStore", "generate", "generate_image"]
