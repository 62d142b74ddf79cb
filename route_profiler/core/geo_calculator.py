"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for route profiling:
- Distance calculation (Haversine formula)
- Per-segment and cumulative distances along a polyline

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, radians, sin, sqrt
from typing import TYPE_CHECKING, Sequence

import numpy as np

from route_profiler.constants import GeoConfig

if TYPE_CHECKING:
    from route_profiler.model.coordinate import Coordinate

# Earth's mean radius in meters (spherical approximation)
EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use a spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters. Exactly 0.0 for identical points.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Rounding can push a a hair above 1 for antipodal points
        a = min(a, 1.0)
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def distance_m(a: "Coordinate", b: "Coordinate") -> float:
        """Surface distance between two coordinates in meters."""
        return GeoCalculator.haversine_distance_m(lat1=a.lat, lon1=a.lon, lat2=b.lat, lon2=b.lon)

    @staticmethod
    def segment_distances_m(points: Sequence["Coordinate"]) -> list[float]:
        """Distance of each consecutive segment (len(points) - 1 entries)."""
        return [GeoCalculator.distance_m(points[i - 1], points[i]) for i in range(1, len(points))]

    @staticmethod
    def cumulative_distances_m(points: Sequence["Coordinate"]) -> list[float]:
        """Cumulative distance from the first point for every point.

        Args:
            points: Ordered coordinates

        Returns:
            List of len(points) distances in meters, starting at 0.0.
            Empty list for empty input.
        """
        if not points:
            return []
        segments = np.asarray(GeoCalculator.segment_distances_m(points), dtype=float)
        return [0.0] + np.cumsum(segments).tolist()
