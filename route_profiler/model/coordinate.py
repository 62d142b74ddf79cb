"""Coordinate - The fundamental geometry atom for route profiling.

A Coordinate represents a single WGS84 latitude/longitude pair.
Routes, resampled polylines and profiles are all sequences of Coordinates.
"""

from dataclasses import dataclass

from route_profiler.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class Coordinate:
    """A point on a route in decimal degrees.

    Attributes:
        lat: Latitude in decimal degrees, [-90, 90]
        lon: Longitude in decimal degrees, [-180, 180]

    Example:
        point = Coordinate(lat=40.7128, lon=-74.006)
    """

    lat: float
    lon: float

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    def distance_to(self, other: "Coordinate") -> float:
        """Calculate haversine distance to another coordinate in meters."""
        return GeoCalculator.haversine_distance_m(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def interpolate(self, other: "Coordinate", t: float) -> "Coordinate":
        """Linearly blend raw latitude and longitude toward another coordinate.

        This is a planar approximation, not great-circle interpolation.

        Args:
            other: Target coordinate (reached at t=1)
            t: Fraction along the segment, 0-1

        Returns:
            The blended Coordinate.
        """
        return Coordinate(
            lat=self.lat + (other.lat - self.lat) * t,
            lon=self.lon + (other.lon - self.lon) * t,
        )

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.lat:.6f}, lon={self.lon:.6f})"
