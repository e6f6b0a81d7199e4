"""Pixel geometry shared by the image adapter and the crop calculator.

Coordinates start at the top-left corner of the image, x grows to the right
and y grows downward.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field


class Size(BaseModel, frozen=True):
    """Width and height of an image, both at least one pixel."""

    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def to_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[int, int]) -> Self:
        """Build from a Pillow ``image.size`` pair."""
        return cls(width=size[0], height=size[1])


class Region(BaseModel, frozen=True):
    """Axis-aligned rectangle inside an image.

    Strips sampled during the focal point search and the final crop are both
    Regions. The right and bottom edges are exclusive, so a Region with
    ``x=0, width=10`` covers columns 0 through 9.
    """

    x: int = Field(..., ge=0, description="Left edge")
    y: int = Field(..., ge=0, description="Top edge")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def to_tuple(self) -> tuple[int, int, int, int]:
        """(x, y, width, height), used in error messages."""
        return (self.x, self.y, self.width, self.height)

    def to_box(self) -> tuple[int, int, int, int]:
        """(left, upper, right, lower) as ``Image.crop`` expects."""
        return (self.x, self.y, self.right, self.bottom)

    @classmethod
    def full(cls, size: Size) -> Self:
        """The rectangle covering a whole image of ``size``."""
        return cls(x=0, y=0, width=size.width, height=size.height)
