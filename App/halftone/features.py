"""Per-pixel features: ink coverage and hue."""

import math

# ITU-R 601 luma weights
RED_WEIGHT = 0.2989
GREEN_WEIGHT = 0.5870
BLUE_WEIGHT = 0.1140


def luminance(pixel) -> float:
    """Perceptual luminance (0-1) of an RGB or RGBA pixel. Alpha is ignored."""
    r, g, b = pixel[:3]
    return (RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b) / 255.0


def coverage(pixel) -> float:
    """Ink coverage for a pixel: 0 for white, 1 for black."""
    return 1.0 - luminance(pixel)


def pixel_to_hue(pixel) -> int:
    """Hue of a pixel in whole degrees, in [0, 360).

    Args:
        pixel: RGB or RGBA tuple (0-255 each channel)

    Returns:
        Hue in degrees. Greys (no chroma) have hue 0.
    """
    r = pixel[0] / 255.0
    g = pixel[1] / 255.0
    b = pixel[2] / 255.0

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    if delta == 0.0:
        # Achromatic, hue is undefined
        return 0

    if high == r:
        hue = 60.0 * math.fmod((g - b) / delta, 6.0)
    elif high == g:
        hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        hue = 60.0 * ((r - g) / delta + 4.0)

    hue = round(hue)
    if hue < 0:
        hue += 360
    return hue % 360
