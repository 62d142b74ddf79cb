"""ElevationProfileAssembler - Resample a route and attach elevations.

Pipeline:
1. Resample the route to the sample budget (PolylineResampler)
2. Compute cumulative distances locally (GeoCalculator)
3. Await the elevation lookup for the resampled points
4. Pair everything into an ElevationProfile

Distances never depend on the network, so only elevations degrade: when the
lookup fails the assembler returns a zero-elevation fallback profile instead
of raising.
"""

import logging
import math
from typing import Sequence

from route_profiler.constants import ResampleConfig
from route_profiler.core.elevation_service import ElevationLookupFn
from route_profiler.core.geo_calculator import GeoCalculator
from route_profiler.core.polyline_resampler import PolylineResampler
from route_profiler.model.coordinate import Coordinate
from route_profiler.model.elevation_profile import ElevationProfile
from route_profiler.model.errors import EmptyInputError, LookupFailure

logger = logging.getLogger(__name__)


class ElevationProfileAssembler:
    """Builds ElevationProfiles from route polylines.

    Example:
        assembler = ElevationProfileAssembler(lookup=OpenElevationClient())
        profile = await assembler.build_profile(source=route_points)
    """

    def __init__(
        self,
        lookup: ElevationLookupFn,
        max_points: int = ResampleConfig.MAX_SAMPLES,
    ) -> None:
        """Initialize assembler.

        Args:
            lookup: Async callable returning one elevation per coordinate
            max_points: Sample budget for the resampler
        """
        self.lookup = lookup
        self.resampler = PolylineResampler(max_points=max_points)

    async def build_profile(
        self,
        source: Sequence[Coordinate],
        max_points: int | None = None,
    ) -> ElevationProfile:
        """Build the elevation profile for a route.

        Args:
            source: Route coordinates
            max_points: Optional override of the sample budget

        Returns:
            ElevationProfile; a fallback profile if the lookup failed.

        Raises:
            EmptyInputError: If source is empty.
            InvalidSampleBudgetError: If max_points is invalid.
        """
        snapshot = list(source)
        if not snapshot:
            raise EmptyInputError()

        points = self.resampler.resample(source=snapshot, max_points=max_points)
        distances = GeoCalculator.cumulative_distances_m(points)
        logger.info(f"Resampled route from {len(snapshot)} to {len(points)} points ({distances[-1]:.0f}m)")

        try:
            elevations = self._validate_elevations(
                elevations=await self.lookup(points),
                expected=len(points),
            )
        except Exception as e:
            logger.warning(f"Elevation lookup failed, returning fallback profile: {e}")
            return ElevationProfile.create_fallback(
                points=tuple(points),
                distances=tuple(distances),
                error=str(e) or type(e).__name__,
            )

        return ElevationProfile(
            points=tuple(points),
            distances=tuple(distances),
            elevations=tuple(elevations),
        )

    @staticmethod
    def _validate_elevations(elevations: Sequence[float], expected: int) -> list[float]:
        """Require exactly one finite elevation per point."""
        values = [float(e) for e in elevations]
        if len(values) != expected:
            raise LookupFailure(f"Expected {expected} elevations, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise LookupFailure("Elevation lookup returned non-finite values")
        return values


async def build_profile(
    source: Sequence[Coordinate],
    max_points: int,
    lookup: ElevationLookupFn,
) -> ElevationProfile:
    """Build a profile with a one-off ElevationProfileAssembler."""
    if not source:
        raise EmptyInputError()
    return await ElevationProfileAssembler(lookup=lookup, max_points=max_points).build_profile(source=source)
