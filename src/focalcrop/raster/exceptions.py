"""Custom exceptions for raster image operations.

These exceptions provide context-rich error handling for image file
operations, wrapping low-level Pillow errors with meaningful messages.
"""

from pathlib import Path

from focalcrop.geometry.primitives import Region, Size


class RasterError(Exception):
    """Base exception for all raster-related errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize raster error with optional path context.

        Args:
            message: Human-readable error description.
            path: Path to the image file that caused the error.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with path context if available."""
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class RasterOpenError(RasterError):
    """Raised when an image file cannot be opened.

    This error is raised when:
    - The file does not exist
    - The file extension is not supported
    - Pillow cannot decode the file
    """

    pass


class RasterReadError(RasterError):
    """Raised when sampling or transforming an open image fails.

    This error is raised when:
    - A sampled region lies outside the image
    - A smoothing amount is not positive
    - The image has been closed
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        *,
        region: Region | None = None,
        size: Size | None = None,
    ) -> None:
        """Initialize read error with operation context.

        Args:
            message: Human-readable error description.
            path: Path to the image file.
            region: Region being sampled.
            size: Image dimensions at the time of the request.
        """
        self.region = region
        self.size = size
        super().__init__(message, path)

    def _format_message(self) -> str:
        """Format error message with full operation context."""
        parts = [self.message]
        if self.path:
            parts.append(f"path={self.path}")
        if self.region is not None:
            parts.append(f"region={self.region.to_tuple()}")
        if self.size is not None:
            parts.append(f"size={self.size.to_tuple()}")

        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} ({', '.join(parts[1:])})"
