"""Two-phase gap filling over a nearest-prescaled ARGB grid.

Phase 1 visits diagonal gaps (both coordinates odd); their stencils only read
source pixels. Phase 2 visits orthogonal gaps (exactly one coordinate odd);
their stencils read source pixels and phase-1 results, so phase 2 must start
after phase 1 has finished. Source pixels (both even) are never written.

Gaps closer than ``STENCIL_RADIUS`` to any border are left with their nearest
values; pad the source (see :mod:`dccikit.dcci.scaler`) to fill the full frame.
"""
from __future__ import annotations

import numpy as np
from numba import njit

from .grid import get_pixel, set_pixel
from .kernel import blend
from .strength import diagonal_d1, diagonal_d2, horizontal_weight, vertical_weight

Array = np.ndarray

STENCIL_RADIUS = 3


@njit(cache=True)
def _down_right_samples(grid: Array, x: int, y: int):
    return (
        get_pixel(grid, x - 3, y - 3),
        get_pixel(grid, x - 1, y - 1),
        get_pixel(grid, x + 1, y + 1),
        get_pixel(grid, x + 3, y + 3),
    )


@njit(cache=True)
def _up_right_samples(grid: Array, x: int, y: int):
    return (
        get_pixel(grid, x + 3, y - 3),
        get_pixel(grid, x + 1, y - 1),
        get_pixel(grid, x - 1, y + 1),
        get_pixel(grid, x - 3, y + 3),
    )


@njit(cache=True)
def _vertical_samples(grid: Array, x: int, y: int):
    return (
        get_pixel(grid, x, y - 3),
        get_pixel(grid, x, y - 1),
        get_pixel(grid, x, y + 1),
        get_pixel(grid, x, y + 3),
    )


@njit(cache=True)
def _horizontal_samples(grid: Array, x: int, y: int):
    return (
        get_pixel(grid, x - 3, y),
        get_pixel(grid, x - 1, y),
        get_pixel(grid, x + 1, y),
        get_pixel(grid, x + 3, y),
    )


@njit(cache=True)
def interpolate_diagonal_gap(grid: Array, x: int, y: int, channels: int = 4) -> int:
    """DCCI value for the diagonal gap at ``(x, y)``.

    A dominant up-right strength (d1) means the edge runs down-right, so the
    down-right samples are used; a dominant d2 selects the up-right samples.
    """
    d1 = diagonal_d1(grid, x, y)
    d2 = diagonal_d2(grid, x, y)
    return blend(
        _down_right_samples(grid, x, y),
        _up_right_samples(grid, x, y),
        d1,
        d2,
        channels,
    )


@njit(cache=True)
def interpolate_orthogonal_gap(grid: Array, x: int, y: int, channels: int = 4) -> int:
    """DCCI value for the orthogonal gap at ``(x, y)``.

    A dominant horizontal weight selects the vertical samples, a dominant
    vertical weight the horizontal ones.
    """
    d1 = horizontal_weight(grid, x, y)
    d2 = vertical_weight(grid, x, y)
    return blend(
        _vertical_samples(grid, x, y),
        _horizontal_samples(grid, x, y),
        d1,
        d2,
        channels,
    )


@njit(cache=True)
def _inside_margin(x: int, y: int, width: int, height: int) -> bool:
    return (
        STENCIL_RADIUS <= x <= width - 1 - STENCIL_RADIUS
        and STENCIL_RADIUS <= y <= height - 1 - STENCIL_RADIUS
    )


@njit(cache=True)
def fill_diagonal_gaps(grid: Array, channels: int = 4) -> None:
    """Phase 1: fill every diagonal gap inside the margin, row-major."""
    height, width = grid.shape
    for y in range(1, height, 2):
        for x in range(1, width, 2):
            if _inside_margin(x, y, width, height):
                set_pixel(grid, x, y, interpolate_diagonal_gap(grid, x, y, channels))


@njit(cache=True)
def fill_orthogonal_gaps(grid: Array, channels: int = 4) -> None:
    """Phase 2: fill every orthogonal gap inside the margin, row-major."""
    height, width = grid.shape
    for y in range(height):
        start = 1 if y % 2 == 0 else 0
        for x in range(start, width, 2):
            if _inside_margin(x, y, width, height):
                set_pixel(grid, x, y, interpolate_orthogonal_gap(grid, x, y, channels))


def fill_gaps(grid: Array, channels: int = 4) -> Array:
    """Run both phases in place on a nearest-prescaled ``uint32`` grid.

    Parameters
    ----------
    grid : np.ndarray
        Packed ARGB grid of shape (2H-1, 2W-1), dtype=uint32, with the source
        pixels at even/even positions.
    channels : int
        3 or 4; see :func:`dccikit.dcci.kernel.interpolate_4tap`.

    Returns
    -------
    np.ndarray
        The same ``grid`` object, for chaining.
    """
    if not isinstance(grid, np.ndarray) or grid.ndim != 2 or grid.dtype != np.uint32:
        raise ValueError("grid must be a 2-D uint32 array of packed pixels")
    if channels not in (3, 4):
        raise ValueError("channels must be 3 or 4")

    fill_diagonal_gaps(grid, channels)
    fill_orthogonal_gaps(grid, channels)
    return grid
