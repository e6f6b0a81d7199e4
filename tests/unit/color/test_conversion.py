"""Unit tests for rgb_to_lab."""

from __future__ import annotations

import math

import pytest

from focalcrop.color import LabColor, RGBColor, rgb_to_lab


def _expected_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    sqrt_y = math.sqrt(y)
    return (
        10 * sqrt_y,
        17.5 * (1.02 * x - y) / sqrt_y,
        7 * (y - 0.847 * z) / sqrt_y,
    )


class TestRgbToLab:
    """Tests for the Lab-like conversion."""

    def test_black_is_zero(self) -> None:
        """Test pure black hits the Y == 0 branch instead of dividing by zero."""
        assert rgb_to_lab(RGBColor(0, 0, 0)) == LabColor(0.0, 0.0, 0.0)

    def test_white_matches_formula(self) -> None:
        """Test white uses the full-intensity XYZ values of the matrix."""
        lab = rgb_to_lab(RGBColor(255, 255, 255))

        expected = _expected_lab(95.05, 100.0, 108.9)
        assert lab.l == pytest.approx(100.0)
        assert lab.l == pytest.approx(expected[0])
        assert lab.a == pytest.approx(expected[1])
        assert lab.b == pytest.approx(expected[2])

    def test_white_is_near_neutral(self) -> None:
        """Test white has small chroma components compared to its lightness."""
        lab = rgb_to_lab(RGBColor(255, 255, 255))
        assert abs(lab.a) < 6
        assert abs(lab.b) < 6

    def test_pure_red_matches_formula(self) -> None:
        """Test a saturated primary goes through the matrix column for red."""
        lab = rgb_to_lab(RGBColor(255, 0, 0))

        expected = _expected_lab(41.24, 21.26, 1.93)
        assert tuple(lab) == pytest.approx(expected)
        assert lab.a > 0  # red is on the positive a side

    def test_dark_channel_uses_linear_segment(self) -> None:
        """Test channels at or below the sRGB threshold are divided by 12.92."""
        lab = rgb_to_lab(RGBColor(10, 10, 10))

        linear = 10 / 255 / 12.92 * 100
        assert lab.l == pytest.approx(10 * math.sqrt(linear))

    def test_accepts_plain_tuple(self) -> None:
        """Test any three-item sequence is accepted."""
        assert rgb_to_lab((255, 0, 0)) == rgb_to_lab(RGBColor(255, 0, 0))

    def test_accepts_float_channels(self) -> None:
        """Test averaged (fractional) channels are converted."""
        lab = rgb_to_lab(RGBColor(127.5, 64.25, 3.0))
        assert lab.l > 0

    def test_lightness_increases_with_gray_level(self) -> None:
        """Test lightness is monotonic along the gray axis."""
        lightness = [rgb_to_lab((v, v, v)).l for v in (1, 50, 128, 200, 255)]
        assert lightness == sorted(lightness)

    def test_result_is_named(self) -> None:
        """Test the result exposes l, a and b by name."""
        lab = rgb_to_lab(RGBColor(20, 40, 60))
        assert (lab.l, lab.a, lab.b) == tuple(lab)
