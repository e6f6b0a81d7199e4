"""Unit tests for color_distance."""

from __future__ import annotations

import pytest

from focalcrop.color import DISTANCE_SCALE, LabColor, color_distance


def test_identical_colors_have_zero_distance() -> None:
    color = LabColor(53.2, 80.1, 67.2)
    assert color_distance(color, color) == 0.0


def test_distance_is_euclidean_divided_by_ten() -> None:
    assert DISTANCE_SCALE == 10
    distance = color_distance(LabColor(0.0, 0.0, 0.0), LabColor(30.0, 40.0, 0.0))
    assert distance == pytest.approx(5.0)


def test_distance_uses_all_components() -> None:
    distance = color_distance(LabColor(1.0, 2.0, 3.0), LabColor(3.0, 5.0, 9.0))
    assert distance == pytest.approx(7.0 / 10)


def test_distance_is_symmetric() -> None:
    first = LabColor(10.0, -20.0, 5.5)
    second = LabColor(-3.0, 7.0, 12.0)
    assert color_distance(first, second) == color_distance(second, first)
