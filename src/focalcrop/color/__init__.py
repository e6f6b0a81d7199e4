"""Color conversion and distance used to score image strips."""

from focalcrop.color.conversion import LabColor, RGBColor, rgb_to_lab
from focalcrop.color.distance import DISTANCE_SCALE, color_distance

__all__ = [
    "DISTANCE_SCALE",
    "LabColor",
    "RGBColor",
    "color_distance",
    "rgb_to_lab",
]
