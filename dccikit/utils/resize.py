"""Nearest-neighbor resizing for NumPy image arrays and packed grids.

Both helpers accept (H, W) packed ARGB grids as well as (H, W, C) images and
only differ in how output positions map back to input indices:

- ``resize_nearest`` rounds ``i * H / new_h``. Resizing (H, W) to
  (2H-1, 2W-1) this way puts every source pixel on an even/even position and
  copies a neighbouring source pixel into each gap, which is the grid DCCI
  starts from.
- ``enlarge_nearest`` floors ``i / factor``, turning each pixel into a
  ``factor x factor`` block for viewing results.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def _check_array(arr: Array) -> None:
    if not isinstance(arr, np.ndarray) or arr.ndim not in (2, 3):
        raise ValueError("arr must be an (H, W) grid or an (H, W, C) image")


def _take(arr: Array, yi: Array, xi: Array) -> Array:
    # Fancy indexing keeps any trailing channel axis and returns a new array
    return arr[yi[:, None], xi[None, :]]


def _nearest_indices(size: int, new_size: int) -> Array:
    pos = np.arange(new_size) * (size / new_size)
    return np.clip(np.rint(pos), 0, size - 1).astype(np.int64)


def resize_nearest(arr: Array, new_h: int, new_w: int) -> Array:
    """Resize an image or packed grid to (new_h, new_w) via nearest-neighbor.

    Parameters
    ----------
    arr : np.ndarray
        Either an (H, W, C) image or an (H, W) packed ARGB grid.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).

    Returns
    -------
    np.ndarray
        Resized array with the input's dtype and trailing dimensions.
    """
    _check_array(arr)
    if new_h < 1 or new_w < 1:
        raise ValueError("new_h and new_w must be >= 1")

    H, W = arr.shape[:2]
    if H == new_h and W == new_w:
        return arr.copy()
    return _take(arr, _nearest_indices(H, new_h), _nearest_indices(W, new_w))


def resize_for_dcci(arr: Array) -> Array:
    """Nearest-resize (H, W) to (2H-1, 2W-1), keeping sources on even positions."""
    H, W = arr.shape[:2]
    return resize_nearest(arr, 2 * H - 1, 2 * W - 1)


def enlarge_nearest(arr: Array, factor: int) -> Array:
    """Blow every pixel up into a ``factor x factor`` block (factor >= 1)."""
    _check_array(arr)
    if factor < 1:
        raise ValueError("factor must be >= 1")

    H, W = arr.shape[:2]
    yi = np.arange(H * factor) // factor
    xi = np.arange(W * factor) // factor
    return _take(arr, yi, xi)
