"""Directional Cubic Convolution Interpolation (DCCI).

Exported API
------------
- scale_dcci(image_array, channels=None, margin="skip", times=1)
- scale(grid, channels=4)

Margin policies
---------------
- "skip"      : gaps within 3 pixels of the border keep their nearest values
- "replicate" : pad the source by repeating edge pixels, scale, crop
- "mirror"    : pad the source by reflection, scale, crop

Implementation notes
--------------------
The working buffer is a ``uint32`` grid of packed ARGB pixels. The image is
first nearest-resized to (2H-1, 2W-1); Numba-compiled loops then fill the
diagonal gaps and afterwards the horizontal and vertical gaps, choosing per
pixel between two cubic interpolation directions from local edge strength.
"""
from __future__ import annotations

from .channels import InvalidRangeError, force_valid_range
from .scaler import MARGIN_MODES, scale, scale_dcci

__all__ = [
    "InvalidRangeError",
    "MARGIN_MODES",
    "force_valid_range",
    "scale",
    "scale_dcci",
]
