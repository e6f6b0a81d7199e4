"""Raster image adapter wrapping Pillow.

This module provides the PillowRaster class, the host-side implementation
of RasterImageProtocol. It keeps two copies of the pixels: a working copy
that smoothing mutates and sampling reads, and the untouched original used
when the final crop is cut.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Self

import numpy as np
from PIL import Image, ImageFilter, UnidentifiedImageError

from focalcrop.color.conversion import RGBColor
from focalcrop.geometry import GeometryValidator, Region, Size, ValidationError
from focalcrop.raster.exceptions import RasterOpenError, RasterReadError

if TYPE_CHECKING:
    from types import TracebackType

# Supported image file extensions (case-insensitive)
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".webp",
        ".bmp",
        ".tif",
        ".tiff",
    }
)

# Number of neighbours in a 3x3 smoothing kernel
_NEIGHBOURS = 8


class PillowRaster:
    """Image handle implementing RasterImageProtocol with Pillow.

    Usage:
        with PillowRaster("/path/to/photo.jpg") as image:
            size = image.get_size()
            color = image.average_color(Region(x=0, y=0, width=10, height=10))

    Attributes:
        path: Path to the opened image file, or None for in-memory images.
    """

    __slots__ = ("_original", "_path", "_validator", "_working")

    def __init__(self, path: str | Path) -> None:
        """Open an image file.

        Args:
            path: Path to the image file.

        Raises:
            RasterOpenError: If the file doesn't exist, has an unsupported
                extension, or cannot be decoded by Pillow.
        """
        self._path: Path | None = Path(path).resolve()
        self._validator = GeometryValidator()

        if not self._path.exists():
            raise RasterOpenError("File not found", path=self._path)

        suffix = self._path.suffix.lower()
        if suffix not in SUPPORTED_EXTENSIONS:
            raise RasterOpenError(
                f"Unsupported file extension '{suffix}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}",
                path=self._path,
            )

        try:
            with Image.open(self._path) as source:
                image = source.convert("RGB")
        except (UnidentifiedImageError, OSError) as e:
            raise RasterOpenError(f"Failed to open image: {e}", path=self._path) from e

        self._original: Image.Image | None = image
        self._working: Image.Image | None = image.copy()

    @classmethod
    def from_image(cls, image: Image.Image) -> Self:
        """Wrap an in-memory Pillow image.

        Args:
            image: Any Pillow image; it is converted to RGB and copied.

        Returns:
            A PillowRaster with no backing file.
        """
        raster = cls.__new__(cls)
        raster._path = None
        raster._validator = GeometryValidator()
        raster._original = image.convert("RGB")
        raster._working = raster._original.copy()
        return raster

    @property
    def path(self) -> Path | None:
        """Return the path to the image file."""
        return self._path

    def _ensure_open(self) -> tuple[Image.Image, Image.Image]:
        original = self._original
        working = self._working
        if original is None or working is None:
            raise RasterReadError("Image is closed", path=self._path)
        return original, working

    def get_size(self) -> Size:
        """Return the current image dimensions."""
        original, _ = self._ensure_open()
        return Size.from_tuple(original.size)

    def smooth(self, amount: int) -> None:
        """Smooth the working image in place.

        Uses a 3x3 kernel of ones with ``amount`` at the center, normalised
        by ``amount + 8``. Larger amounts keep more of each pixel, so the
        blur gets weaker as ``amount`` grows.

        Args:
            amount: Weight of the center pixel (positive).

        Raises:
            RasterReadError: If amount is not positive or the image is closed.
        """
        _, working = self._ensure_open()
        if amount <= 0:
            raise RasterReadError(
                f"Invalid smoothing amount {amount}. Must be positive.",
                path=self._path,
            )

        weights = [1.0] * 9
        weights[4] = float(amount)
        kernel = ImageFilter.Kernel((3, 3), weights, scale=amount + _NEIGHBOURS)
        self._working = working.filter(kernel)

    def average_color(self, region: Region) -> RGBColor:
        """Return the per-channel mean color of a region of the working image.

        Args:
            region: Rectangle to sample.

        Returns:
            RGBColor with float channels in [0, 255].

        Raises:
            RasterReadError: If the region is outside the image.
        """
        pixels = self._sample(region)
        red, green, blue = np.asarray(pixels, dtype=np.float64).reshape(-1, 3).mean(
            axis=0
        )
        return RGBColor(float(red), float(green), float(blue))

    def entropy(self, region: Region) -> float:
        """Return the Shannon entropy of the region's grayscale histogram.

        Args:
            region: Rectangle to sample.

        Returns:
            Entropy in bits, between 0 (flat region) and 8.

        Raises:
            RasterReadError: If the region is outside the image.
        """
        pixels = self._sample(region)
        return float(pixels.convert("L").entropy())

    def _sample(self, region: Region) -> Image.Image:
        _, working = self._ensure_open()
        size = Size.from_tuple(working.size)
        try:
            self._validator.check(region, size)
        except ValidationError as e:
            raise RasterReadError(
                f"Failed to sample region: {e}",
                path=self._path,
                region=region,
                size=size,
            ) from e
        return working.crop(region.to_box())

    def crop(self, region: Region) -> Image.Image:
        """Cut a region from the original (unsmoothed) image.

        Args:
            region: Crop rectangle, e.g. from SmartCropper.get_crop_region().

        Returns:
            New RGB Pillow image of the region's size.

        Raises:
            RasterReadError: If the region is outside the image.
        """
        original, _ = self._ensure_open()
        size = Size.from_tuple(original.size)
        if not self._validator.contains(region, size):
            raise RasterReadError(
                "Crop region out of bounds",
                path=self._path,
                region=region,
                size=size,
            )
        return original.crop(region.to_box())

    def resize_to_cover(self, dest_width: int, dest_height: int) -> Size:
        """Scale the image so it covers a target size, keeping aspect ratio.

        After this call one side matches the target and the other is at
        least as large, so a ``dest_width x dest_height`` crop always fits.
        Both the original and the working copy are replaced; any earlier
        smoothing is discarded.

        Args:
            dest_width: Target width in pixels.
            dest_height: Target height in pixels.

        Returns:
            The new image size.

        Raises:
            ValueError: If a target dimension is not positive.
        """
        if dest_width <= 0 or dest_height <= 0:
            raise ValueError(
                f"Target size must be positive, got {dest_width}x{dest_height}"
            )
        original, _ = self._ensure_open()
        width, height = original.size

        scale = max(dest_width / width, dest_height / height)
        new_size = (
            max(dest_width, round(width * scale)),
            max(dest_height, round(height * scale)),
        )
        if new_size != original.size:
            original = original.resize(new_size, resample=Image.Resampling.LANCZOS)

        self._original = original
        self._working = original.copy()
        return Size.from_tuple(new_size)

    def close(self) -> None:
        """Release the pixel buffers.

        After calling close(), the image should not be used.
        """
        self._original = None
        self._working = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._original is None else "open"
        return f"PillowRaster(path={self._path!r}, {state})"
