"""Bounds checks for regions read from an image.

Pillow pads out-of-range crops with black pixels instead of failing, which
would quietly skew strip statistics. Regions are checked here first.
"""

from __future__ import annotations

from focalcrop.geometry.primitives import Region, Size


class ValidationError(Exception):
    """A region does not fit inside the image it was checked against."""

    def __init__(self, message: str, *, region: Region, bounds: Size) -> None:
        self.region = region
        self.bounds = bounds
        super().__init__(
            f"{message} (region={region.to_tuple()}, bounds={bounds.to_tuple()})"
        )


class GeometryValidator:
    """Checks regions against image dimensions. Holds no state."""

    @staticmethod
    def overflows(region: Region, bounds: Size) -> list[str]:
        """Describe each edge of ``region`` that lies past ``bounds``.

        An empty list means the region fits. Origins are never negative
        (Region enforces that), so only the right and bottom edges can spill.
        """
        problems: list[str] = []
        if region.right > bounds.width:
            problems.append(
                f"right edge ({region.right}) exceeds width ({bounds.width})"
            )
        if region.bottom > bounds.height:
            problems.append(
                f"bottom edge ({region.bottom}) exceeds height ({bounds.height})"
            )
        return problems

    def check(self, region: Region, bounds: Size) -> None:
        """Raise ValidationError unless ``region`` lies inside ``bounds``."""
        problems = self.overflows(region, bounds)
        if problems:
            raise ValidationError(
                f"Region out of bounds: {'; '.join(problems)}",
                region=region,
                bounds=bounds,
            )

    def contains(self, region: Region, bounds: Size) -> bool:
        """Return True if ``region`` lies inside ``bounds``."""
        return not self.overflows(region, bounds)
