"""ElevationProfile - Paired distance/elevation samples along a route.

Three parallel sequences of equal length:
- points: resampled route coordinates
- distances: cumulative haversine distance in meters (first entry 0)
- elevations: meters above sea level, all zero on a fallback profile

A fallback profile is structurally valid so that charts can always render;
it carries fallback=True and the lookup error message.
"""

from dataclasses import dataclass
from typing import Any, Optional

from route_profiler.model.coordinate import Coordinate


@dataclass(frozen=True)
class ElevationProfile:
    """Elevation profile of a resampled route.

    Attributes:
        points: Resampled coordinates
        distances: Cumulative distance from the first point in meters
        elevations: Elevation per point in meters
        fallback: True when elevations are placeholders (lookup failed)
        error: Lookup error message, set on fallback profiles
    """

    points: tuple[Coordinate, ...]
    distances: tuple[float, ...]
    elevations: tuple[float, ...]
    fallback: bool = False
    error: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        n = len(self.points)
        if len(self.distances) != n or len(self.elevations) != n:
            raise ValueError(
                f"ElevationProfile sequences must have equal length "
                f"(points={n}, distances={len(self.distances)}, elevations={len(self.elevations)})"
            )
        if self.fallback and not self.error:
            raise ValueError("Fallback ElevationProfile requires an error message")

    @classmethod
    def create_fallback(
        cls,
        points: tuple[Coordinate, ...],
        distances: tuple[float, ...],
        error: str,
    ) -> "ElevationProfile":
        """Build a zero-elevation profile for a failed lookup."""
        return cls(
            points=points,
            distances=distances,
            elevations=tuple(0.0 for _ in points),
            fallback=True,
            error=error,
        )

    def __len__(self) -> int:
        return len(self.points)

    @property
    def total_distance_m(self) -> float:
        """Route length in meters."""
        return self.distances[-1] if self.distances else 0.0

    @property
    def distances_km(self) -> list[float]:
        """Cumulative distances in kilometers (chart x-axis)."""
        return [d / 1000 for d in self.distances]

    @property
    def total_ascent_m(self) -> float:
        """Sum of positive elevation changes between consecutive samples."""
        return sum(max(b - a, 0.0) for a, b in zip(self.elevations, self.elevations[1:]))

    @property
    def total_descent_m(self) -> float:
        """Sum of negative elevation changes, reported as a positive number."""
        return sum(max(a - b, 0.0) for a, b in zip(self.elevations, self.elevations[1:]))

    @property
    def min_elevation_m(self) -> float:
        return min(self.elevations) if self.elevations else 0.0

    @property
    def max_elevation_m(self) -> float:
        return max(self.elevations) if self.elevations else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dict. fallback and error appear only on fallback profiles."""
        data: dict[str, Any] = {
            "points": [[p.lat, p.lon] for p in self.points],
            "distances": list(self.distances),
            "elevations": list(self.elevations),
        }
        if self.fallback:
            data["fallback"] = True
            data["error"] = self.error
        return data
