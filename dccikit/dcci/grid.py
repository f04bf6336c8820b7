"""Packed ARGB pixel grids.

The working buffer is a 2-D ``uint32`` array indexed ``grid[y, x]`` where each
element holds one ``0xAARRGGBB`` pixel. Conversion helpers move between that
layout and the (H, W, 3) / (H, W, 4) ``uint8`` arrays used everywhere else.
"""
from __future__ import annotations

import numpy as np
from numba import njit

Array = np.ndarray

OPAQUE = 0xFF000000


@njit(cache=True)
def get_pixel(grid: Array, x: int, y: int) -> int:
    return np.int64(grid[y, x])


@njit(cache=True)
def set_pixel(grid: Array, x: int, y: int, pixel: int) -> None:
    grid[y, x] = pixel


def gap_class(x: int, y: int) -> str:
    """Classify a scaled-grid coordinate.

    Returns ``"source"`` when both coordinates are even, ``"diagonal"`` when
    both are odd and ``"orthogonal"`` when exactly one is odd.
    """
    odd = (x % 2) + (y % 2)
    if odd == 0:
        return "source"
    if odd == 2:
        return "diagonal"
    return "orthogonal"


def pack_argb(arr: Array) -> Array:
    """Pack an RGB or RGBA ``uint8`` image into a ``uint32`` ARGB grid.

    RGB input is treated as fully opaque.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("arr must be an image with shape (H, W, 3) or (H, W, 4)")
    if arr.dtype != np.uint8:
        raise ValueError("arr must have dtype=uint8")

    planes = arr.astype(np.uint32)
    if arr.shape[2] == 4:
        alpha = planes[:, :, 3] << 24
    else:
        alpha = np.full(arr.shape[:2], OPAQUE, dtype=np.uint32)
    grid = alpha | (planes[:, :, 0] << 16) | (planes[:, :, 1] << 8) | planes[:, :, 2]
    return grid.astype(np.uint32)


def unpack_argb(grid: Array, channels: int = 4) -> Array:
    """Unpack a ``uint32`` ARGB grid to (H, W, 3) RGB or (H, W, 4) RGBA."""
    if not isinstance(grid, np.ndarray) or grid.ndim != 2:
        raise ValueError("grid must be a 2-D array of packed pixels")
    if channels not in (3, 4):
        raise ValueError("channels must be 3 or 4")

    H, W = grid.shape
    out = np.empty((H, W, channels), dtype=np.uint8)
    out[:, :, 0] = (grid >> 16) & 0xFF
    out[:, :, 1] = (grid >> 8) & 0xFF
    out[:, :, 2] = grid & 0xFF
    if channels == 4:
        out[:, :, 3] = (grid >> 24) & 0xFF
    return out
