"""focalcrop: focal point detection and rule-of-thirds crop coordinates."""

from focalcrop.core import (
    CropCoordinates,
    FocalPoint,
    FocalPointLocator,
    SmartCropper,
    calculate_crop_coordinates,
)
from focalcrop.raster import PillowRaster, RasterImageProtocol

__version__ = "0.1.0"

__all__ = [
    "CropCoordinates",
    "FocalPoint",
    "FocalPointLocator",
    "PillowRaster",
    "RasterImageProtocol",
    "SmartCropper",
    "__version__",
    "calculate_crop_coordinates",
]
