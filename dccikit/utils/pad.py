"""Border padding used by the DCCI margin policies.

Stencils reach 3 scaled pixels from their target, and orthogonal gaps read
diagonal gaps that in turn read 3 pixels further out. Padding the source by
``SOURCE_PAD`` pixels moves the original frame 6 scaled pixels away from every
border, so every pixel its gaps depend on is interpolated as well and the
result can be cropped back out.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray

SOURCE_PAD = 3

# margin policy -> np.pad mode
_PAD_MODES = {
    "replicate": "edge",
    "mirror": "reflect",
}


def pad_source(arr: Array, margin: str, pad: int = SOURCE_PAD) -> Array:
    """Pad an (H, W, C) image on all four sides according to ``margin``.

    ``"replicate"`` repeats the edge pixels, ``"mirror"`` reflects the image
    about its edge pixels (a single-pixel axis falls back to repeating it).
    """
    if margin not in _PAD_MODES:
        raise ValueError(f"Unknown padding policy: {margin}")
    if pad < 0:
        raise ValueError("pad must be >= 0")
    if pad == 0:
        return arr.copy()

    pad_width = [(pad, pad), (pad, pad)] + [(0, 0)] * (arr.ndim - 2)
    return np.pad(arr, pad_width=pad_width, mode=_PAD_MODES[margin])


def crop_scaled(arr: Array, pad: int = SOURCE_PAD) -> Array:
    """Remove the border a padded source leaves on its DCCI-scaled result."""
    if pad == 0:
        return arr
    border = 2 * pad
    H, W = arr.shape[:2]
    return arr[border:H - border, border:W - border]
