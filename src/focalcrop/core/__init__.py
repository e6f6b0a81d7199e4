"""Core algorithms for focalcrop.

This package contains the focal point search and crop placement.

Public API:
    - SliceAnalyzer: Scores image strips along one axis.
    - evaluate_bias: Which side of the winning strip matters more.
    - FocalPointLocator: Runs both axis passes over a smoothed image.
    - calculate_crop_coordinates: Rule-of-thirds crop placement.
    - SmartCropper: Entry point tying the above to one image.
"""

from focalcrop.core.crop_calculator import (
    CropCoordinates,
    calculate_crop_coordinates,
    validate_destination,
)
from focalcrop.core.focal_point import SMOOTHNESS, FocalPoint, FocalPointLocator
from focalcrop.core.slices import (
    BestSlice,
    SliceAnalyzer,
    SliceAxis,
    evaluate_bias,
    select_best_index,
)
from focalcrop.core.smart_crop import SmartCropper

__all__ = [
    "SMOOTHNESS",
    "BestSlice",
    "CropCoordinates",
    "FocalPoint",
    "FocalPointLocator",
    "SliceAnalyzer",
    "SliceAxis",
    "SmartCropper",
    "calculate_crop_coordinates",
    "evaluate_bias",
    "select_best_index",
    "validate_destination",
]
