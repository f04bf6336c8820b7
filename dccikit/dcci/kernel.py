"""Cubic convolution kernel and directional blending.

The kernel applies the fixed 4-tap weights (-1, 9, 9, -1) / 16 to four
collinear samples, independently per channel. The blender decides between two
candidate directions from their edge strengths and, when neither dominates,
mixes both candidates with inverse fifth-power weights.
"""
from __future__ import annotations

import math

from numba import njit

from .channels import clamp_to_byte, get_channel, with_channel
from .grid import OPAQUE

# classify_edge results
SMOOTH = 0
DOMINANT_FIRST = 1
DOMINANT_SECOND = 2

# A direction wins outright only when its score beats the other by 15%.
EDGE_RATIO_NUM = 115
EDGE_RATIO_DEN = 100


@njit(cache=True)
def _first_channel(channels: int) -> int:
    # With 3 channels alpha (index 0) is left out and forced opaque.
    return 4 - channels


@njit(cache=True)
def _empty_pixel(channels: int) -> int:
    if channels == 3:
        return OPAQUE
    return 0


@njit(cache=True)
def _div16(total: int) -> int:
    # Truncates toward zero, unlike floor division.
    if total < 0:
        return -((-total) // 16)
    return total // 16


@njit(cache=True)
def interpolate_4tap(p0: int, p1: int, p2: int, p3: int, channels: int = 4) -> int:
    """Cubic convolution of four equally spaced packed pixels.

    Parameters
    ----------
    p0, p1, p2, p3 : int
        Packed ARGB samples, ordered along the interpolation line with the
        target between ``p1`` and ``p2``.
    channels : int
        4 to interpolate alpha as well, 3 to interpolate RGB only and emit an
        opaque pixel.

    Returns
    -------
    int
        Packed ARGB result, each channel clamped to [0, 255].
    """
    pixel = _empty_pixel(channels)
    for channel in range(_first_channel(channels), 4):
        total = -get_channel(p0, channel)
        total += 9 * get_channel(p1, channel)
        total += 9 * get_channel(p2, channel)
        total -= get_channel(p3, channel)
        # total lies in [-510, 4590] before clamping
        pixel = with_channel(pixel, channel, clamp_to_byte(_div16(total)))
    return pixel


@njit(cache=True)
def classify_edge(d1: int, d2: int) -> int:
    """Return DOMINANT_FIRST, DOMINANT_SECOND or SMOOTH for two edge strengths."""
    if EDGE_RATIO_DEN * (1 + d1) > EDGE_RATIO_NUM * (1 + d2):
        return DOMINANT_FIRST
    if EDGE_RATIO_DEN * (1 + d2) > EDGE_RATIO_NUM * (1 + d1):
        return DOMINANT_SECOND
    return SMOOTH


@njit(cache=True)
def blend_weights(d1: int, d2: int):
    """Normalised weights ``(w1, w2)`` with ``w = 1 / (1 + d**5)``.

    ``w1`` belongs to the candidate interpolated across the first strength,
    ``w2`` to the one across the second; they sum to 1.
    """
    w1 = 1.0 / (1.0 + float(d1) ** 5)
    w2 = 1.0 / (1.0 + float(d2) ** 5)
    return w1 / (w1 + w2), w2 / (w1 + w2)


@njit(cache=True)
def weighted_average(
    pixel_a: int, pixel_b: int, weight_a: float, weight_b: float, channels: int = 4
) -> int:
    """Per-channel weighted mean of two packed pixels, rounded half up."""
    pixel = _empty_pixel(channels)
    for channel in range(_first_channel(channels), 4):
        mean = weight_a * get_channel(pixel_a, channel) + weight_b * get_channel(pixel_b, channel)
        rounded = int(math.floor(mean + 0.5))
        pixel = with_channel(pixel, channel, clamp_to_byte(rounded))
    return pixel


@njit(cache=True)
def blend(
    first: tuple, second: tuple, d1: int, d2: int, channels: int = 4
) -> int:
    """Pick or mix the two 4-tap candidates according to their edge strengths.

    ``first`` holds the samples to use when ``d1`` dominates and ``second``
    those for when ``d2`` dominates. In a smooth area both are interpolated
    and averaged with :func:`blend_weights`.
    """
    edge = classify_edge(d1, d2)
    if edge == DOMINANT_FIRST:
        return interpolate_4tap(first[0], first[1], first[2], first[3], channels)
    if edge == DOMINANT_SECOND:
        return interpolate_4tap(second[0], second[1], second[2], second[3], channels)
    first_weight, second_weight = blend_weights(d1, d2)
    return weighted_average(
        interpolate_4tap(first[0], first[1], first[2], first[3], channels),
        interpolate_4tap(second[0], second[1], second[2], second[3], channels),
        first_weight,
        second_weight,
        channels,
    )
