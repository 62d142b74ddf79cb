"""Data model classes for route profiling.

- Coordinate: Geometry atom (lat, lon)
- ElevationProfile: Parallel points/distances/elevations of a resampled route
- errors: Error taxonomy (EmptyInputError, LookupFailure, ...)
"""

from route_profiler.model.coordinate import Coordinate
from route_profiler.model.elevation_profile import ElevationProfile
from route_profiler.model.errors import (
    EmptyInputError,
    InvalidSampleBudgetError,
    LookupFailure,
    RouteFormatError,
    RouteProfilerError,
    ShadeSimulationError,
    ShadeSimulatorNotConfiguredError,
)

__all__ = [
    "Coordinate",
    "ElevationProfile",
    "RouteProfilerError",
    "EmptyInputError",
    "InvalidSampleBudgetError",
    "LookupFailure",
    "RouteFormatError",
    "ShadeSimulationError",
    "ShadeSimulatorNotConfiguredError",
]
