"""Edge-strength estimators for diagonal and orthogonal gaps.

Every estimator sums :func:`channel_difference_sum` over nine pixel pairs
around ``(x, y)`` and returns a non-negative integer; 0 means the
neighbourhood is uniform along that axis. Stencils reach up to 3 pixels from
the target, so callers keep targets at least 3 pixels away from the border.
"""
from __future__ import annotations

import numpy as np
from numba import njit

from .channels import channel_difference_sum
from .grid import get_pixel

Array = np.ndarray


@njit(cache=True)
def _pair(grid: Array, xa: int, ya: int, xb: int, yb: int) -> int:
    return channel_difference_sum(get_pixel(grid, xa, ya), get_pixel(grid, xb, yb))


@njit(cache=True)
def diagonal_d1(grid: Array, x: int, y: int) -> int:
    """Up-right diagonal strength at a diagonal gap.

    Compares each pixel of a 3x3 lattice with its neighbour two steps down
    and to the left.
    """
    d1 = 0
    for cy in range(y - 3, y + 2, 2):
        for cx in range(x - 1, x + 4, 2):
            d1 += _pair(grid, cx, cy, cx - 2, cy + 2)
    return d1


@njit(cache=True)
def diagonal_d2(grid: Array, x: int, y: int) -> int:
    """Down-right diagonal strength at a diagonal gap.

    Compares each pixel of a 3x3 lattice with its neighbour two steps down
    and to the right.
    """
    d2 = 0
    for cy in range(y - 3, y + 2, 2):
        for cx in range(x - 3, x + 2, 2):
            d2 += _pair(grid, cx, cy, cx + 2, cy + 2)
    return d2


@njit(cache=True)
def horizontal_weight(grid: Array, x: int, y: int) -> int:
    """Horizontal differences around an orthogonal gap (vertical-edge evidence)."""
    weight = 0
    weight += _pair(grid, x + 1, y - 2, x - 1, y - 2)

    weight += _pair(grid, x + 2, y - 1, x, y - 1)
    weight += _pair(grid, x, y - 1, x - 2, y - 1)

    weight += _pair(grid, x + 3, y, x + 1, y)
    weight += _pair(grid, x + 1, y, x - 1, y)
    weight += _pair(grid, x - 1, y, x - 3, y)

    weight += _pair(grid, x + 2, y + 1, x, y + 1)
    weight += _pair(grid, x, y + 1, x - 2, y + 1)

    weight += _pair(grid, x + 1, y + 2, x - 1, y + 2)
    return weight


@njit(cache=True)
def vertical_weight(grid: Array, x: int, y: int) -> int:
    """Vertical differences around an orthogonal gap (horizontal-edge evidence).

    Mirror of :func:`horizontal_weight` with the x and y offsets swapped.
    """
    weight = 0
    weight += _pair(grid, x - 2, y + 1, x - 2, y - 1)

    weight += _pair(grid, x - 1, y + 2, x - 1, y)
    weight += _pair(grid, x - 1, y, x - 1, y - 2)

    weight += _pair(grid, x, y + 3, x, y + 1)
    weight += _pair(grid, x, y + 1, x, y - 1)
    weight += _pair(grid, x, y - 1, x, y - 3)

    weight += _pair(grid, x + 1, y + 2, x + 1, y)
    weight += _pair(grid, x + 1, y, x + 1, y - 2)

    weight += _pair(grid, x + 2, y + 1, x + 2, y - 1)
    return weight
