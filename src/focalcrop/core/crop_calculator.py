"""Rule-of-thirds crop placement.

Given a focal point and a target size, decides which axis has to be cropped
(the one along which the source is relatively longer) and places the crop
so the focal point falls on a third line, or on the center when the focal
point has no bias.

Boundary Behavior:
    The far-edge clamp moves an overflowing offset to ``source - dest - 1``,
    one pixel short of flush. When the destination spans the whole source
    along the cropped axis this gives -1, which the final clamp turns into 0.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from focalcrop.core.focal_point import FocalPoint
from focalcrop.geometry import Region, Size

# Fraction of the crop that should sit before the focal point
_BEFORE_FOCUS_POSITIVE = 2 / 3
_BEFORE_FOCUS_NEGATIVE = 1 / 3
_BEFORE_FOCUS_CENTERED = 0.5


class CropCoordinates(NamedTuple):
    """Top-left corner of the crop rectangle.

    Values are the raw placement formula results (after clamping) and may be
    fractional.
    """

    x: float
    y: float

    def to_region(self, dest_width: int, dest_height: int) -> Region:
        """Return the integer crop rectangle (offsets rounded down)."""
        return Region(
            x=math.floor(self.x),
            y=math.floor(self.y),
            width=dest_width,
            height=dest_height,
        )


def _offset(focus: float, weight: int, source: int, dest: int) -> float:
    """Place a crop of length ``dest`` along one axis of length ``source``."""
    if weight > 0:
        before = _BEFORE_FOCUS_POSITIVE
    elif weight < 0:
        before = _BEFORE_FOCUS_NEGATIVE
    else:
        before = _BEFORE_FOCUS_CENTERED

    offset = focus * source - before * dest
    if offset >= source - dest:
        offset = source - dest - 1
    return offset


def validate_destination(source_size: Size, dest_width: int, dest_height: int) -> None:
    """Check that a ``dest_width x dest_height`` crop fits inside the source.

    Raises:
        ValueError: If a destination dimension is not positive or larger
            than the matching source dimension.
    """
    if dest_width <= 0 or dest_height <= 0:
        raise ValueError(
            f"Destination size must be positive, got {dest_width}x{dest_height}"
        )
    if dest_width > source_size.width or dest_height > source_size.height:
        raise ValueError(
            f"Destination size {dest_width}x{dest_height} exceeds source size "
            f"{source_size.width}x{source_size.height}"
        )


def calculate_crop_coordinates(
    focal_point: FocalPoint,
    source_size: Size,
    dest_width: int,
    dest_height: int,
) -> CropCoordinates:
    """Compute where to crop a ``dest_width x dest_height`` window.

    Args:
        focal_point: Result of FocalPointLocator.locate().
        source_size: Dimensions of the image being cropped.
        dest_width: Crop width in pixels.
        dest_height: Crop height in pixels.

    Returns:
        CropCoordinates with both offsets >= 0.

    Raises:
        ValueError: If a destination dimension is not positive or larger
            than the matching source dimension.
    """
    validate_destination(source_size, dest_width, dest_height)

    # Is the source wider (relative to the target) than it is tall?
    if source_size.aspect_ratio >= dest_width / dest_height:
        x = _offset(
            focal_point.x, focal_point.x_weight, source_size.width, dest_width
        )
        y = 0.0
    else:
        x = 0.0
        y = _offset(
            focal_point.y, focal_point.y_weight, source_size.height, dest_height
        )

    return CropCoordinates(x=max(0.0, x), y=max(0.0, y))
