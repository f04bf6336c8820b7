from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from dccikit.dcci import scale, scale_dcci, force_valid_range, InvalidRangeError  # noqa: F401
from dccikit.utils.loader import load_image, save_image  # noqa: F401
from dccikit.utils.resize import resize_nearest, enlarge_nearest  # noqa: F401

__all__ = [
    "scale",
    "scale_dcci",
    "force_valid_range",
    "InvalidRangeError",
    "load_image",
    "save_image",
    "resize_nearest",
    "enlarge_nearest",
]
