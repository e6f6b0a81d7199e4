"""Color difference between two Lab colors."""

from __future__ import annotations

import math

from focalcrop.color.conversion import LabColor

# Brings distances into the same range as region entropy values
DISTANCE_SCALE = 10


def color_distance(first: LabColor, second: LabColor) -> float:
    """Return the Euclidean distance between two colors, divided by 10.

    Args:
        first: A color from ``rgb_to_lab``.
        second: Another color from ``rgb_to_lab``.

    Returns:
        Non-negative distance on the same scale as entropy scores.
    """
    sum_of_squares = sum((b - a) ** 2 for a, b in zip(first, second, strict=True))
    return math.sqrt(sum_of_squares) / DISTANCE_SCALE
