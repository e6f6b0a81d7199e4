"""RGB to Lab-like color space conversion.

The conversion is a simplified approximation of CIE Lab (it is the
"Hunter Lab" style formula applied to sRGB-derived XYZ), not the standard
CIE L*a*b* transform. The constants are fixed: strip scores computed from
these values are balanced against entropy scores by ``color_distance``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

# sRGB -> XYZ matrix (D65), rows produce X, Y, Z from linear R, G, B
_XYZ_MATRIX = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

_SRGB_THRESHOLD = 0.04045


class RGBColor(NamedTuple):
    """Average color of a region, each channel in [0, 255]."""

    red: float
    green: float
    blue: float


class LabColor(NamedTuple):
    """Color in the perceptual space produced by ``rgb_to_lab``."""

    l: float  # noqa: E741
    a: float
    b: float


def _linearize(channel: float) -> float:
    """Normalize a 0-255 channel, undo sRGB gamma and scale to 0-100."""
    value = channel / 255
    if value > _SRGB_THRESHOLD:
        value = ((value + 0.055) / 1.055) ** 2.4
    else:
        value = value / 12.92
    return value * 100


def rgb_to_lab(color: Sequence[float]) -> LabColor:
    """Convert an RGB color to the Lab-like space used for scoring.

    Args:
        color: (red, green, blue) with channels in [0, 255]. Any three-item
            sequence is accepted, including ``RGBColor``.

    Returns:
        LabColor. Pure black (Y == 0) maps to (0, 0, 0).
    """
    red, green, blue = (_linearize(channel) for channel in color)

    x, y, z = (
        row[0] * red + row[1] * green + row[2] * blue for row in _XYZ_MATRIX
    )

    if y == 0:
        return LabColor(0.0, 0.0, 0.0)

    sqrt_y = math.sqrt(y)
    return LabColor(
        l=10 * sqrt_y,
        a=17.5 * (1.02 * x - y) / sqrt_y,
        b=7 * (y - 0.847 * z) / sqrt_y,
    )
