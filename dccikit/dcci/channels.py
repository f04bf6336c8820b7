"""Per-channel arithmetic on packed ARGB pixels.

A pixel is a 32-bit integer laid out as ``0xAARRGGBB``. Channel indices
follow that order: 0=alpha, 1=red, 2=green, 3=blue.
"""
from __future__ import annotations

from numba import njit


class InvalidRangeError(ValueError):
    """Raised when a clamping range has ``maximum < minimum``."""


@njit(cache=True)
def _shift_for_channel(channel: int) -> int:
    return 24 - 8 * channel


@njit(cache=True)
def get_channel(pixel: int, channel: int) -> int:
    """Return the 8-bit value of ``channel`` in a packed pixel."""
    return (pixel >> _shift_for_channel(channel)) & 0xFF


@njit(cache=True)
def with_channel(pixel: int, channel: int, value: int) -> int:
    """Return ``pixel`` with ``channel`` replaced by ``value`` (0..255)."""
    shift = _shift_for_channel(channel)
    return (pixel & ~(0xFF << shift)) | (value << shift)


@njit(cache=True)
def clamp_to_byte(value: int) -> int:
    return min(max(value, 0), 255)


def force_valid_range(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` to ``[minimum, maximum]``.

    Raises
    ------
    InvalidRangeError
        If ``maximum`` is less than ``minimum``.
    """
    if maximum < minimum:
        raise InvalidRangeError("maximum should not be less than minimum")
    return min(max(value, minimum), maximum)


@njit(cache=True)
def channel_difference_sum(pixel_a: int, pixel_b: int) -> int:
    """Sum of absolute red, green and blue differences, in [0, 765].

    Alpha does not take part: the sum only feeds edge-strength estimation.
    """
    total = 0
    for shift in (0, 8, 16):
        total += abs(((pixel_a >> shift) & 0xFF) - ((pixel_b >> shift) & 0xFF))
    return total
