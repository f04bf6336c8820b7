"""Utility functions for DcciScale.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- resize: Nearest-neighbor resizing (the (2H-1, 2W-1) DCCI prescale) and
  integer-factor block enlarging.
- pad: Source padding and result cropping for the DCCI margin policies.
"""
from .loader import load_image, save_image
from .resize import resize_nearest, resize_for_dcci, enlarge_nearest
from .pad import pad_source, crop_scaled

__all__ = [
    "load_image",
    "save_image",
    "resize_nearest",
    "resize_for_dcci",
    "enlarge_nearest",
    "pad_source",
    "crop_scaled",
]
