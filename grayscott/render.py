import math

import numpy as np

from .simulation import Field

OPAQUE = 255


def to_intensity(a, b):
    """Gray level of a single cell: floor((a - b) * 255) clamped to [0, 255]."""
    c = math.floor((a - b) * 255)
    return min(max(c, 0), 255)


def intensity_field(grid):
    """Gray level of every cell of the current buffer, shape (width, height)."""
    current = grid.current
    c = np.floor((current[Field.A] - current[Field.B]) * 255)
    return np.clip(c, 0, 255).astype(np.uint8)


def to_rgba(grid):
    """
    Row-major RGBA pixels, shape (height, width, 4): pixel (x, y) is at
    [y, x], the gray level repeated in R, G and B, alpha always 255.
    """
    gray = intensity_field(grid).T
    pixels = np.empty(gray.shape + (4,), dtype=np.uint8)
    pixels[..., 0] = gray
    pixels[..., 1] = gray
    pixels[..., 2] = gray
    pixels[..., 3] = OPAQUE
    return pixels
