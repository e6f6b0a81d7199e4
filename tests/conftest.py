"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from focalcrop.color import RGBColor
from focalcrop.config import Settings
from focalcrop.geometry import Region, Size
from focalcrop.utils.logging import clear_correlation_context, configure_logging

_GRAY = RGBColor(128.0, 128.0, 128.0)


class FakeRaster:
    """In-memory stand-in for RasterImageProtocol.

    Region statistics come from the callables passed in, and every call is
    recorded so tests can assert on sampling order and counts.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        color: Callable[[Region], RGBColor] | None = None,
        entropy: Callable[[Region], float] | None = None,
    ) -> None:
        self.size = Size(width=width, height=height)
        self._color = color or (lambda region: _GRAY)
        self._entropy = entropy or (lambda region: 0.0)
        self.calls: list[str] = []
        self.smooth_amounts: list[int] = []
        self.color_regions: list[Region] = []
        self.entropy_regions: list[Region] = []

    def get_size(self) -> Size:
        return self.size

    def smooth(self, amount: int) -> None:
        self.calls.append("smooth")
        self.smooth_amounts.append(amount)

    def average_color(self, region: Region) -> RGBColor:
        self.calls.append("average_color")
        self.color_regions.append(region)
        return self._color(region)

    def entropy(self, region: Region) -> float:
        self.calls.append("entropy")
        self.entropy_regions.append(region)
        return self._entropy(region)


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def make_raster() -> Callable[..., FakeRaster]:
    """Factory for FakeRaster images."""
    return FakeRaster
