"""Pixel rectangles and bounds checks used by the raster adapter and core.

Example:
    from focalcrop.geometry import GeometryValidator, Region, Size

    strip = Region(x=100, y=0, width=50, height=400)
    GeometryValidator().check(strip, Size(width=800, height=400))
"""

from focalcrop.geometry.primitives import Region, Size
from focalcrop.geometry.validators import GeometryValidator, ValidationError

__all__ = [
    "GeometryValidator",
    "Region",
    "Size",
    "ValidationError",
]
