"""Capability interface between the focal point search and an image host.

The search never touches pixels itself. Everything it needs from an image
is the four operations below, so any imaging library can be plugged in by
implementing this protocol.
"""

from typing import Protocol

from focalcrop.color.conversion import RGBColor
from focalcrop.geometry.primitives import Region, Size


class RasterImageProtocol(Protocol):
    """Protocol defining the image operations used by the focal point search.

    This protocol allows for dependency injection and testing with
    mock implementations.
    """

    def get_size(self) -> Size:
        """Return the current image dimensions."""
        ...

    def smooth(self, amount: int) -> None:
        """Apply a noise-reduction filter to the working image in place.

        Args:
            amount: Smoothing strength (small positive integer).
        """
        ...

    def average_color(self, region: Region) -> RGBColor:
        """Return the mean color over a region.

        Args:
            region: Rectangle to sample, within image bounds.

        Returns:
            RGBColor with channels in [0, 255].
        """
        ...

    def entropy(self, region: Region) -> float:
        """Return the visual complexity of a region (>= 0).

        Args:
            region: Rectangle to sample, within image bounds.

        Returns:
            Higher values mean more visual information in the region.
        """
        ...
