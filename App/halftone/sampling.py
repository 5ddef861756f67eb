"""Random and quasi-random sampling helpers for the cell patterns.

AIDEV-NOTE: Every function takes its randomness explicitly (a seed or a
numpy Generator) so that a fixed seed reproduces the same output.
"""

import math

import numpy as np

# Coprime bases for the two Halton axes
HALTON_BASE_X = 2
HALTON_BASE_Y = 3


def round_count(value: float) -> int:
    """Round a non-negative count, halves going up."""
    return int(math.floor(value + 0.5))


def radical_inverse(indices: np.ndarray, base: int) -> np.ndarray:
    """Radical inverse of each index in the given base, in [0, 1)."""
    digits = np.array(indices, dtype=np.int64)
    result = np.zeros(digits.shape, dtype=np.float64)
    f = 1.0
    while digits.any():
        f /= base
        result += f * (digits % base)
        digits //= base
    return result


def halton(index: int, base: int) -> float:
    """Radical inverse of a single index in the given base, in [0, 1)."""
    return float(radical_inverse(np.array([index]), base)[0])


def halton_seq(width: float, height: float, n: int, seed: int) -> np.ndarray:
    """Generate n Halton points inside a width x height rectangle.

    Args:
        width: Rectangle width
        height: Rectangle height
        n: Number of points
        seed: Seed for the random starting index of the sequence

    Returns:
        Array of shape (n, 2) with x in [0, width) and y in [0, height)

    AIDEV-NOTE: The starting index is drawn from the seed so neighbouring
    cells do not repeat the same point pattern. Coordinates are clamped to
    dimension - 1 in case a value rounds onto the far edge.
    """
    rng = np.random.default_rng(seed)
    k = int(rng.integers(0, 2**32))

    indices = np.arange(k, k + n, dtype=np.int64)
    points = np.empty((n, 2), dtype=np.float64)
    points[:, 0] = radical_inverse(indices, HALTON_BASE_X) * width
    points[:, 1] = radical_inverse(indices, HALTON_BASE_Y) * height

    np.clip(points[:, 0], 0.0, max(width - 1.0, 0.0), out=points[:, 0])
    np.clip(points[:, 1], 0.0, max(height - 1.0, 0.0), out=points[:, 1])
    return points


def proportion_mask(n: int, t: float, rng: np.random.Generator) -> np.ndarray:
    """Boolean mask of length n with exactly round(t * n) entries set.

    Args:
        n: Mask length (number of lines in the sweep)
        t: Coverage, 0-1
        rng: Random source used to shuffle the set positions

    Returns:
        Shuffled boolean array

    AIDEV-NOTE: An exact count keeps a cell's ink proportional to its
    coverage every time, not only on average.
    """
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"Coverage must be in [0, 1], got {t}")

    count = min(round_count(t * n), n)
    mask = np.zeros(n, dtype=bool)
    mask[:count] = True
    rng.shuffle(mask)
    return mask
