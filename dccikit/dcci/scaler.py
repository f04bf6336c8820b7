"""DCCI scaling entry points.

``scale`` works on packed ARGB grids; ``scale_dcci`` wraps it for
(H, W, 3) / (H, W, 4) ``uint8`` arrays and applies the border policy.
"""
from __future__ import annotations

from typing import Literal, Optional

import numpy as np

from ..utils.pad import SOURCE_PAD, crop_scaled, pad_source
from ..utils.resize import resize_for_dcci
from .fill import fill_gaps
from .grid import pack_argb, unpack_argb

Array = np.ndarray

Margin = Literal["skip", "replicate", "mirror"]

MARGIN_MODES = ("skip", "replicate", "mirror")


def scale(grid: Array, channels: int = 4) -> Array:
    """Scale a packed ARGB grid from (H, W) to (2H-1, 2W-1).

    The input grid is left untouched; source pixels land unchanged on the
    even/even positions of the result and every gap at least 3 pixels from
    the border is interpolated.
    """
    if not isinstance(grid, np.ndarray) or grid.ndim != 2 or grid.dtype != np.uint32:
        raise ValueError("grid must be a 2-D uint32 array of packed pixels")
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise ValueError("grid must be at least 1x1")

    scaled = resize_for_dcci(grid)
    return fill_gaps(scaled, channels)


def scale_dcci(
    image_array: Array,
    channels: Optional[int] = None,
    margin: Margin = "skip",
    times: int = 1,
) -> Array:
    """Scale an RGB or RGBA image with Directional Cubic Convolution Interpolation.

    Parameters
    ----------
    image_array : np.ndarray
        Image of shape (H, W, 3) or (H, W, 4), dtype=uint8.
    channels : int | None
        Channels to interpolate: 4 includes alpha, 3 interpolates RGB only and
        makes gap pixels opaque. Defaults to the image's channel count.
    margin : str
        Border policy. ``"skip"`` leaves gaps within 3 pixels of the border
        with their nearest values; ``"replicate"`` and ``"mirror"`` pad the
        source first so the whole frame is interpolated.
    times : int
        Number of successive DCCI passes; each maps n to 2n-1.

    Returns
    -------
    np.ndarray
        Scaled image with the same channel count and dtype as the input.
    """
    if (
        not isinstance(image_array, np.ndarray)
        or image_array.ndim != 3
        or image_array.shape[2] not in (3, 4)
    ):
        raise ValueError("image_array must be an image with shape (H, W, 3) or (H, W, 4)")
    if image_array.shape[0] < 1 or image_array.shape[1] < 1:
        raise ValueError("image_array must be at least 1x1")
    if channels is None:
        channels = image_array.shape[2]
    if channels not in (3, 4):
        raise ValueError("channels must be 3 or 4")
    if margin not in MARGIN_MODES:
        raise ValueError(f"Unknown margin policy: {margin}")
    if times < 1:
        raise ValueError("times must be >= 1")

    work = image_array
    for _ in range(times):
        padded = work if margin == "skip" else pad_source(work, margin)
        scaled = unpack_argb(scale(pack_argb(padded), channels), work.shape[2])
        work = scaled if margin == "skip" else crop_scaled(scaled, SOURCE_PAD)
    return np.ascontiguousarray(work)
