"""PolylineResampler - Reduce a route to a bounded number of samples.

Samples are spaced by distance traveled along the route (arc length), not by
index, so long straight stretches and dense switchbacks receive samples in
proportion to their length.

Algorithm:
1. Routes already within budget are returned unchanged.
2. Segment lengths are measured with the haversine formula.
3. Interior samples sit at multiples of step = total / (max_points - 1).
4. Each sample is a planar lat/lon blend inside the segment that contains it.
5. The first and last source points are copied exactly.
"""

import logging
from typing import Sequence

from route_profiler.constants import ResampleConfig
from route_profiler.core.geo_calculator import GeoCalculator
from route_profiler.model.coordinate import Coordinate
from route_profiler.model.errors import EmptyInputError, InvalidSampleBudgetError

logger = logging.getLogger(__name__)


class PolylineResampler:
    """Arc-length resampler for coordinate sequences.

    Example:
        resampler = PolylineResampler(max_points=120)
        samples = resampler.resample(source=route_points)
    """

    def __init__(self, max_points: int = ResampleConfig.MAX_SAMPLES) -> None:
        """Initialize resampler.

        Args:
            max_points: Default sample budget, at least 2

        Raises:
            InvalidSampleBudgetError: If max_points is not an integer >= 2.
        """
        self.max_points = self.validate_budget(max_points=max_points)

    @staticmethod
    def validate_budget(max_points: int) -> int:
        """Return max_points if it is a usable budget, raise otherwise."""
        if isinstance(max_points, bool) or not isinstance(max_points, int):
            raise InvalidSampleBudgetError(max_points)
        if max_points < ResampleConfig.MIN_SAMPLES:
            raise InvalidSampleBudgetError(max_points)
        return max_points

    def resample(
        self,
        source: Sequence[Coordinate],
        max_points: int | None = None,
    ) -> list[Coordinate]:
        """Resample source to at most max_points with uniform arc-length spacing.

        Args:
            source: Non-empty ordered coordinates; consecutive duplicates allowed
            max_points: Sample budget (uses the instance default when None)

        Returns:
            New list whose first and last elements are the source's first and
            last elements. Equal to source when it already fits the budget.

        Raises:
            EmptyInputError: If source is empty.
            InvalidSampleBudgetError: If max_points is not an integer >= 2.
        """
        budget = self.max_points if max_points is None else self.validate_budget(max_points=max_points)
        points = list(source)
        if not points:
            raise EmptyInputError()

        if len(points) <= budget:
            return points

        cumulative = GeoCalculator.cumulative_distances_m(points)
        total_m = cumulative[-1]
        if total_m <= 0:
            # Every point coincides; nothing to space out
            return [points[0], points[-1]]

        step_m = total_m / (budget - 1)
        sampled = [points[0]]
        seg_end = 1

        for k in range(1, budget - 1):
            target_m = k * step_m
            # Advance to the segment whose far end reaches the target.
            # Zero-length segments are passed over here: their end equals their
            # start, which already lies behind the target.
            while seg_end < len(points) and cumulative[seg_end] < target_m:
                seg_end += 1
            if seg_end == len(points):
                logger.debug(f"Resampling stopped early at {len(sampled)} samples (target {target_m:.3f}m)")
                break

            seg_start_m = cumulative[seg_end - 1]
            seg_len_m = cumulative[seg_end] - seg_start_m
            t = (target_m - seg_start_m) / seg_len_m
            sampled.append(points[seg_end - 1].interpolate(points[seg_end], t))

        sampled.append(points[-1])
        return sampled


def resample(source: Sequence[Coordinate], max_points: int = ResampleConfig.MAX_SAMPLES) -> list[Coordinate]:
    """Resample source with a one-off PolylineResampler."""
    return PolylineResampler(max_points=max_points).resample(source=source)
