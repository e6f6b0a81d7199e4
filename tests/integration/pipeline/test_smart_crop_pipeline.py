"""End-to-end tests: file on disk to focal point and crop.

Run with: pytest -m integration
"""

from __future__ import annotations

from pathlib import Path

import pytest

from focalcrop import PillowRaster, SmartCropper
from focalcrop.core import CropCoordinates

pytestmark = pytest.mark.integration


class TestSolidImage:
    """A flat image has no preferred region."""

    def test_focal_point_is_centered(self, solid_image: Path) -> None:
        with PillowRaster(solid_image) as image:
            point = SmartCropper(image).get_focal_point()

        assert (point.x, point.y) == (0.5, 0.5)
        assert (point.x_weight, point.y_weight) == (0, 0)

    def test_square_crop_is_centered(self, solid_image: Path) -> None:
        with PillowRaster(solid_image) as image:
            coords = SmartCropper(image).get_crop_coordinates(100, 100)

        assert coords == CropCoordinates(x=100, y=0)


class TestBusyRegion:
    """Crops move toward the detailed part of the picture."""

    def test_focal_point_finds_right_block(self, busy_right_image: Path) -> None:
        with PillowRaster(busy_right_image) as image:
            point = SmartCropper(image).get_focal_point()

        assert point.x > 0.75

    def test_crop_covers_right_block(self, busy_right_image: Path) -> None:
        with PillowRaster(busy_right_image) as image:
            region = SmartCropper(image).get_crop_region(200, 200)
            cropped = image.crop(region)

        assert region.y == 0
        assert region.x >= 300
        assert region.right <= 600
        assert cropped.size == (200, 200)

    def test_crop_covers_top_block(self, busy_top_image: Path) -> None:
        with PillowRaster(busy_top_image) as image:
            point = SmartCropper(image).get_focal_point()
            region = SmartCropper(image).get_crop_region(200, 200)

        assert point.y < 0.25
        assert region.x == 0
        assert region.y <= 100

    def test_entropy_only_and_color_only_agree(self, busy_right_image: Path) -> None:
        with PillowRaster(busy_right_image) as image:
            by_entropy = SmartCropper(image).get_focal_point(weight=0.0)
        with PillowRaster(busy_right_image) as image:
            by_color = SmartCropper(image).get_focal_point(weight=1.0)

        assert by_entropy.x > 0.75
        assert by_color.x > 0.75
