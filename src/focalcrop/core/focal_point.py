"""Focal point detection.

Runs one slicing pass per axis over a smoothed image: strips side by side
give the x position and strips stacked top to bottom give the y position.
Both passes compare against the same whole-image average color.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from focalcrop.color import rgb_to_lab
from focalcrop.core.slices import SliceAnalyzer, SliceAxis
from focalcrop.geometry import Region
from focalcrop.raster.types import RasterImageProtocol

# Smoothing applied once before sampling, to damp pixel noise
SMOOTHNESS = 7

DEFAULT_SLICE_COUNT = 20
DEFAULT_WEIGHT = 0.5


@dataclass(frozen=True)
class FocalPoint:
    """Most interesting location of an image.

    Attributes:
        x: Horizontal position as a fraction of the image width.
        y: Vertical position as a fraction of the image height.
        x_weight: 1 if content to the right matters more, -1 if content to
            the left does, 0 if balanced.
        y_weight: 1 if content below matters more, -1 if content above
            does, 0 if balanced.
    """

    x: float
    y: float
    x_weight: int
    y_weight: int

    def __iter__(self) -> Iterator[float]:
        """Unpack as (x, y, x_weight, y_weight)."""
        return iter((self.x, self.y, self.x_weight, self.y_weight))


class FocalPointLocator:
    """Locates the focal point of an image through its sampling primitives.

    Note that ``locate`` smooths the image it is given; the smoothing is
    applied to the host's working copy, not to the pixels that get cropped.
    """

    __slots__ = ("_analyzer", "_image")

    def __init__(
        self,
        image: RasterImageProtocol,
        analyzer: SliceAnalyzer | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            image: Image host implementing RasterImageProtocol.
            analyzer: Optional strip analyzer. Defaults to a SliceAnalyzer
                over the same image.
        """
        self._image = image
        self._analyzer = analyzer or SliceAnalyzer(image)

    def locate(
        self,
        slice_count: int = DEFAULT_SLICE_COUNT,
        weight: float = DEFAULT_WEIGHT,
    ) -> FocalPoint:
        """Find the focal point.

        Args:
            slice_count: Strips per axis. More is slower but more accurate.
            weight: Balance between entropy (0) and color (1) scoring.

        Returns:
            FocalPoint with fractional coordinates and per-axis bias.

        Raises:
            ValueError: If slice_count or weight is out of range.
        """
        if slice_count <= 0:
            raise ValueError(f"slice_count must be > 0, got {slice_count}")
        if not 0 <= weight <= 1:
            raise ValueError(f"weight must be in [0, 1], got {weight}")

        self._image.smooth(SMOOTHNESS)

        size = self._image.get_size()
        average_color = rgb_to_lab(self._image.average_color(Region.full(size)))

        x, x_weight = self._analyzer.find_best_slice(
            slice_count, weight, average_color, SliceAxis.vertical
        )
        y, y_weight = self._analyzer.find_best_slice(
            slice_count, weight, average_color, SliceAxis.horizontal
        )

        return FocalPoint(x=x, y=y, x_weight=x_weight, y_weight=y_weight)
