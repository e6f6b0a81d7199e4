"""Public entry points for smart cropping.

SmartCropper ties the focal point search and the crop placement to a
single image handle.

Example:
    >>> from focalcrop.raster import PillowRaster
    >>>
    >>> with PillowRaster("photo.jpg") as image:
    ...     cropper = SmartCropper(image)
    ...     region = cropper.get_crop_region(400, 300)
    ...     image.crop(region).save("photo-400x300.jpg")
"""

from __future__ import annotations

from focalcrop.core.crop_calculator import (
    CropCoordinates,
    calculate_crop_coordinates,
    validate_destination,
)
from focalcrop.core.focal_point import (
    DEFAULT_SLICE_COUNT,
    DEFAULT_WEIGHT,
    FocalPoint,
    FocalPointLocator,
)
from focalcrop.geometry import Region
from focalcrop.raster.types import RasterImageProtocol


class SmartCropper:
    """Finds the focal point of an image and where to crop around it.

    The image size is read once at construction and cached. If the host
    image is resized afterwards, build a new SmartCropper.
    """

    __slots__ = ("_image", "_locator", "_size")

    def __init__(
        self,
        image: RasterImageProtocol,
        locator: FocalPointLocator | None = None,
    ) -> None:
        """Initialize the cropper.

        Args:
            image: Image host implementing RasterImageProtocol.
            locator: Optional focal point locator. Defaults to a
                FocalPointLocator over the same image.
        """
        self._image = image
        self._locator = locator or FocalPointLocator(image)
        self._size = image.get_size()

    def get_focal_point(
        self,
        slice_count: int = DEFAULT_SLICE_COUNT,
        weight: float = DEFAULT_WEIGHT,
    ) -> FocalPoint:
        """Find the most interesting point of the image.

        Args:
            slice_count: Strips per axis. More is slower but more accurate.
            weight: Balance between entropy (0) and color (1) scoring.

        Returns:
            FocalPoint with fractional coordinates and per-axis bias.
        """
        return self._locator.locate(slice_count=slice_count, weight=weight)

    def get_crop_coordinates(self, dest_width: int, dest_height: int) -> CropCoordinates:
        """Get the top-left corner of the best ``dest_width x dest_height`` crop.

        Uses the default slice count and weight.

        Returns:
            CropCoordinates (x, y).

        Raises:
            ValueError: If the destination size is not positive or does not
                fit inside the image.
        """
        validate_destination(self._size, dest_width, dest_height)
        focal_point = self.get_focal_point()
        return calculate_crop_coordinates(
            focal_point, self._size, dest_width, dest_height
        )

    def get_crop_region(self, dest_width: int, dest_height: int) -> Region:
        """Get the best crop as an integer rectangle inside the image."""
        return self.get_crop_coordinates(dest_width, dest_height).to_region(
            dest_width, dest_height
        )
