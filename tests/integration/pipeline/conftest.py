"""Fixtures for pipeline integration tests.

Images are generated on the fly with Pillow and numpy, so these tests need
no downloaded data.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

pytestmark = pytest.mark.integration

_BACKGROUND = (20, 20, 20)


def _noise(width: int, height: int, seed: int = 0) -> Image.Image:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def solid_image(tmp_path: Path) -> Path:
    """Flat 300x100 image."""
    path = tmp_path / "solid.png"
    Image.new("RGB", (300, 100), color=(90, 160, 60)).save(path)
    return path


@pytest.fixture
def busy_right_image(tmp_path: Path) -> Path:
    """600x200 dark image with a noisy block over the rightmost quarter."""
    image = Image.new("RGB", (600, 200), color=_BACKGROUND)
    image.paste(_noise(150, 200), (450, 0))
    path = tmp_path / "busy_right.png"
    image.save(path)
    return path


@pytest.fixture
def busy_top_image(tmp_path: Path) -> Path:
    """200x600 dark image with a noisy block over the top quarter."""
    image = Image.new("RGB", (200, 600), color=_BACKGROUND)
    image.paste(_noise(200, 150, seed=1), (0, 0))
    path = tmp_path / "busy_top.png"
    image.save(path)
    return path
