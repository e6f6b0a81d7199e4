"""Raster layer for focalcrop.

This package provides the capability interface the focal point search
samples images through, and a Pillow-backed implementation of it.

Key Components:
    - RasterImageProtocol: size / smooth / average_color / entropy
    - PillowRaster: Pillow + numpy implementation, plus crop execution
    - RasterError hierarchy with path and region context

Example:
    from focalcrop.raster import PillowRaster

    with PillowRaster("photo.jpg") as image:
        print(image.get_size())
"""

from focalcrop.raster.exceptions import RasterError, RasterOpenError, RasterReadError
from focalcrop.raster.reader import SUPPORTED_EXTENSIONS, PillowRaster
from focalcrop.raster.types import RasterImageProtocol

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "PillowRaster",
    "RasterError",
    "RasterImageProtocol",
    "RasterOpenError",
    "RasterReadError",
]
