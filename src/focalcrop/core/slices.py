"""Strip scoring along one axis of an image.

The image is cut into ``slice_count`` equal strips. Each strip is scored by
a weighted average of two signals:

- color: how far the strip's average color is from the whole image's
  average color (``color_distance`` of the Lab values)
- entropy: the visual complexity of the strip, supplied by the image host

The highest scoring strip locates the focal point along that axis, and the
scores on either side of it decide which rule-of-thirds line the crop
should favour.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple

from focalcrop.color import LabColor, color_distance, rgb_to_lab
from focalcrop.geometry import Region
from focalcrop.raster.types import RasterImageProtocol


class SliceAxis(str, Enum):
    """Direction in which strips are cut."""

    vertical = "vertical"  # Strips side by side; locates x
    horizontal = "horizontal"  # Strips stacked; locates y


class BestSlice(NamedTuple):
    """Result of one axis pass.

    Attributes:
        center: Center of the winning strip as a fraction of the axis length.
        bias: +1 if the content after the strip (right/bottom) matters more,
            -1 if the content before it (left/top) matters more, 0 if balanced.
    """

    center: float
    bias: int


def select_best_index(scores: Sequence[float]) -> int:
    """Return the index of the highest score, preferring the lowest index on ties.

    SliceAnalyzer.find_best_slice handles all-equal scores before calling this,
    so a flat axis never reaches the tie-break.

    Raises:
        ValueError: If scores is empty.
    """
    if not scores:
        raise ValueError("scores must not be empty")

    best_index = 0
    best_score = scores[0]
    for index, score in enumerate(scores):
        if score > best_score:
            best_index = index
            best_score = score
    return best_index


def evaluate_bias(scores: Sequence[float], best_index: int) -> int:
    """Decide which side of the best strip carries more interest.

    A winning first strip counts as leaning toward the end of the axis and a
    winning last strip as leaning toward the start. Otherwise the mean score
    of the strips before the winner is compared with the mean of those after.

    Args:
        scores: Per-strip scores from one axis pass.
        best_index: Index of the winning strip.

    Returns:
        1, -1 or 0 (only the sign is meaningful).

    Raises:
        ValueError: If scores is empty or best_index is out of range.
    """
    if not scores:
        raise ValueError("scores must not be empty")
    last_index = len(scores) - 1
    if not 0 <= best_index <= last_index:
        raise ValueError(f"best_index must be in [0, {last_index}], got {best_index}")

    if best_index == 0:
        return 1
    if best_index == last_index:
        return -1

    before = sum(scores[:best_index]) / best_index
    after = sum(scores[best_index + 1 :]) / (last_index - best_index)

    if before > after:
        return 1
    if before < after:
        return -1
    return 0


def _validate_parameters(slice_count: int, weight: float) -> None:
    if slice_count <= 0:
        raise ValueError(f"slice_count must be > 0, got {slice_count}")
    if not 0 <= weight <= 1:
        raise ValueError(f"weight must be in [0, 1], got {weight}")


class SliceAnalyzer:
    """Scores strips of an image and picks the most interesting one.

    The analyzer holds no state besides the image handle; the image size is
    read once per pass.

    Example:
        >>> analyzer = SliceAnalyzer(image)
        >>> average = rgb_to_lab(image.average_color(Region.full(image.get_size())))
        >>> center, bias = analyzer.find_best_slice(20, 0.5, average, SliceAxis.vertical)
    """

    __slots__ = ("_image",)

    def __init__(self, image: RasterImageProtocol) -> None:
        """Initialize the analyzer.

        Args:
            image: Image host implementing RasterImageProtocol.
        """
        self._image = image

    def slice_regions(self, slice_count: int, axis: SliceAxis) -> list[Region]:
        """Return the strip rectangles for one axis pass.

        Strips are ``floor(length / slice_count)`` pixels wide, so any
        remainder at the far edge is never sampled.

        Raises:
            ValueError: If slice_count is not positive or exceeds the number
                of pixels along the axis.
        """
        if slice_count <= 0:
            raise ValueError(f"slice_count must be > 0, got {slice_count}")

        size = self._image.get_size()
        length = size.width if axis is SliceAxis.vertical else size.height
        strip = length // slice_count
        if strip == 0:
            raise ValueError(
                f"slice_count {slice_count} exceeds the {axis.value} pass length "
                f"of {length}px"
            )

        if axis is SliceAxis.vertical:
            return [
                Region(x=i * strip, y=0, width=strip, height=size.height)
                for i in range(slice_count)
            ]
        return [
            Region(x=0, y=i * strip, width=size.width, height=strip)
            for i in range(slice_count)
        ]

    def score_slices(
        self,
        slice_count: int,
        weight: float,
        average_color: LabColor,
        axis: SliceAxis,
    ) -> list[float]:
        """Score every strip along an axis.

        Args:
            slice_count: Number of strips.
            weight: Balance between entropy (0) and color (1). At exactly 0
                no colors are sampled; at exactly 1 no entropy is sampled.
            average_color: Whole-image average color in Lab.
            axis: Direction of the strips.

        Returns:
            One score per strip, higher is more interesting.

        Raises:
            ValueError: If slice_count or weight is out of range.
        """
        _validate_parameters(slice_count, weight)

        scores: list[float] = []
        for region in self.slice_regions(slice_count, axis):
            if weight == 0:
                color_score = 0.0
            else:
                strip_color = rgb_to_lab(self._image.average_color(region))
                color_score = color_distance(average_color, strip_color)

            if weight == 1:
                entropy_score = 0.0
            else:
                entropy_score = self._image.entropy(region)

            scores.append(color_score * weight + entropy_score * (1 - weight))
        return scores

    def find_best_slice(
        self,
        slice_count: int,
        weight: float,
        average_color: LabColor,
        axis: SliceAxis,
    ) -> BestSlice:
        """Find the most interesting strip along an axis.

        All-equal scores are checked first and report the middle of the axis
        with no bias. Only otherwise does the first-max tie-break of
        select_best_index (and its edge bias) apply.

        Args:
            slice_count: Number of strips. More is slower but more accurate.
            weight: Balance between entropy (0) and color (1).
            average_color: Whole-image average color in Lab.
            axis: Direction of the strips.

        Returns:
            BestSlice with the strip center (fraction of the axis) and bias.

        Raises:
            ValueError: If slice_count or weight is out of range.
        """
        scores = self.score_slices(slice_count, weight, average_color, axis)

        if max(scores) == min(scores):
            return BestSlice(center=0.5, bias=0)

        size = self._image.get_size()
        secondary = size.width if axis is SliceAxis.vertical else size.height
        primary = secondary // slice_count

        best_index = select_best_index(scores)
        center = (best_index + 0.5) * primary / secondary
        return BestSlice(center=center, bias=evaluate_bias(scores, best_index))
