import logging
import operator
from enum import IntEnum

import numpy as np
from numba import njit

from .config import Parameters, seed_half_extent_init

logger = logging.getLogger(__name__)


class Field(IntEnum):
    A = 0  # feed chemical
    B = 1  # autocatalytic chemical


# 3x3 Laplacian weights, indexed [dx + 1, dy + 1]. Sums to 0.
LAPLACIAN_KERNEL = np.array([
    [0.05, 0.2, 0.05],
    [0.2, -1.0, 0.2],
    [0.05, 0.2, 0.05],
], dtype=np.float64)

BACKGROUND = (1.0, 0.0)
SEED = (1.0, 1.0)


class Grid:
    """
    Two (2, width, height) buffers of concentrations, indexed
    [field, x, y]. Steps read `current` and write `next`, then swap.
    """

    def __init__(self, current, nxt=None):
        current = np.ascontiguousarray(current, dtype=np.float64)
        if current.ndim != 3 or current.shape[0] != 2:
            raise ValueError(f"Grid buffers must have shape (2, width, height), got {current.shape}")
        if current.shape[1] <= 0 or current.shape[2] <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {current.shape[1:]}")
        if nxt is None:
            nxt = np.empty_like(current)
            nxt[Field.A] = BACKGROUND[0]
            nxt[Field.B] = BACKGROUND[1]
        else:
            nxt = np.ascontiguousarray(nxt, dtype=np.float64)
            if nxt.shape != current.shape:
                raise ValueError(f"next buffer shape {nxt.shape} does not match {current.shape}")
        self.current = current
        self.next = nxt

    @property
    def shape(self):
        return self.current.shape[1:]

    @property
    def width(self):
        return self.current.shape[1]

    @property
    def height(self):
        return self.current.shape[2]

    @property
    def a(self):
        return self.current[Field.A]

    @property
    def b(self):
        return self.current[Field.B]

    def cell(self, x, y):
        """(a, b) of the current buffer at (x, y)."""
        return float(self.current[Field.A, x, y]), float(self.current[Field.B, x, y])

    def swap(self):
        self.current, self.next = self.next, self.current

    def copy_border(self):
        """Copy the one-cell frame of `current` into `next`."""
        self.next[:, 0, :] = self.current[:, 0, :]
        self.next[:, -1, :] = self.current[:, -1, :]
        self.next[:, :, 0] = self.current[:, :, 0]
        self.next[:, :, -1] = self.current[:, :, -1]

    def copy(self):
        return Grid(self.current.copy(), self.next.copy())


def initialize(width, height, seed_half_extent=seed_half_extent_init, next_fill=BACKGROUND):
    """
    Background (a=1, b=0) everywhere, with a centered square of
    half-extent `seed_half_extent` set to (a=1, b=1). The next buffer is
    filled with `next_fill`.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if seed_half_extent < 0:
        raise ValueError(f"seed_half_extent must be non-negative, got {seed_half_extent}")

    current = np.empty((2, width, height), dtype=np.float64)
    current[Field.A] = BACKGROUND[0]
    current[Field.B] = BACKGROUND[1]

    center_x, center_y = width // 2, height // 2
    xs = np.abs(np.arange(width) - center_x) < seed_half_extent
    ys = np.abs(np.arange(height) - center_y) < seed_half_extent
    region = np.outer(xs, ys)
    current[Field.A][region] = SEED[0]
    current[Field.B][region] = SEED[1]

    nxt = np.empty_like(current)
    nxt[Field.A] = next_fill[0]
    nxt[Field.B] = next_fill[1]

    logger.debug("Initialized %dx%d grid, %d seeded cells", width, height, int(region.sum()))
    return Grid(current, nxt)


@njit
def _laplacian_at(values, kernel, x, y):
    """Weighted 3x3 sum around (x, y). No bounds check."""
    total = 0.0
    for dx in range(3):
        for dy in range(3):
            total += kernel[dx, dy] * values[x + dx - 1, y + dy - 1]
    return total


@njit
def _clamp(value, low, high):
    if value < low:
        return low
    if value > high:
        return high
    return value


@njit
def _react(current, nxt, kernel, d_a, d_b, feed, kill):
    """
    Gray-Scott update of every interior cell of `current` into `nxt`.
    Border cells of `nxt` are not written.
    """
    nx_val = current.shape[1]
    ny_val = current.shape[2]
    field_a = current[0]
    field_b = current[1]
    for i in range(1, nx_val - 1):
        for j in range(1, ny_val - 1):
            a = field_a[i, j]
            b = field_b[i, j]
            lap_a = _laplacian_at(field_a, kernel, i, j)
            lap_b = _laplacian_at(field_b, kernel, i, j)
            abb = a * b * b
            nxt[0, i, j] = _clamp(a + d_a * lap_a - abb + feed * (1.0 - a), 0.0, 1.0)
            nxt[1, i, j] = _clamp(b + d_b * lap_b + abb - (kill + feed) * b, 0.0, 1.0)


def laplacian(grid, field, x, y):
    """
    Discrete Laplacian of `field` at (x, y), read from the current buffer.
    Only interior cells (1 <= x <= width-2, 1 <= y <= height-2) are valid.
    """
    field = Field(field)
    try:
        x, y = operator.index(x), operator.index(y)
    except TypeError:
        raise ValueError(f"Laplacian coordinates must be integers, got ({x!r}, {y!r})") from None
    if not (1 <= x <= grid.width - 2 and 1 <= y <= grid.height - 2):
        raise ValueError(
            f"Laplacian undefined at ({x}, {y}) on a {grid.width}x{grid.height} grid; "
            "only interior cells have a full neighbourhood"
        )
    return _laplacian_at(grid.current[field], LAPLACIAN_KERNEL, x, y)


def step(grid, parameters=None, copy_border=False):
    """
    Advance the grid by one generation and swap the buffers.

    With copy_border=False the border of the next buffer keeps whatever
    it held before, so after the swap the visible border is the value that
    buffer carried two steps ago.
    """
    if parameters is None:
        parameters = Parameters()
    if copy_border:
        grid.copy_border()
    _react(grid.current, grid.next, LAPLACIAN_KERNEL,
           parameters.d_a, parameters.d_b, parameters.feed, parameters.kill)
    grid.swap()
    return grid
