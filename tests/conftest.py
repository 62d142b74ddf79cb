"""Shared pytest fixtures for route_profiler tests.

Provides synthetic routes, fake elevation lookups and a fake HTTP session.

COORDINATE SYSTEM:
    Straight test routes run north along the prime meridian (lon=0). Along a
    meridian the haversine distance is exactly proportional to the latitude
    difference, so expected distances follow from simple arithmetic:
    1 degree = EARTH_RADIUS_M * pi / 180 ≈ 111,195 meters.
"""

from math import pi
from typing import Any, Optional, Sequence
from unittest.mock import MagicMock

import pytest
import requests

from route_profiler.constants import GeoConfig
from route_profiler.model.coordinate import Coordinate

METERS_PER_DEGREE = GeoConfig.EARTH_RADIUS_M * pi / 180


def make_meridian_route(n_points: int, length_m: float, start_lat: float = 0.0) -> list[Coordinate]:
    """Evenly spaced points heading north along lon=0, total length length_m."""
    span_deg = length_m / METERS_PER_DEGREE
    return [Coordinate(lat=start_lat + span_deg * i / (n_points - 1), lon=0.0) for i in range(n_points)]


# =============================================================================
# ELEVATION LOOKUPS
# =============================================================================


class FakeLookup:
    """Async elevation lookup returning base + 10m per sample index.

    Records every call so tests can check what was requested.
    """

    def __init__(self, base_elevation: float = 100.0) -> None:
        self.base_elevation = base_elevation
        self.calls: list[list[Coordinate]] = []

    async def __call__(self, points: Sequence[Coordinate]) -> list[float]:
        self.calls.append(list(points))
        return [self.base_elevation + 10.0 * i for i in range(len(points))]


class FailingLookup:
    """Async elevation lookup that always raises the given exception."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    async def __call__(self, points: Sequence[Coordinate]) -> list[float]:
        self.calls += 1
        raise self.error


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


@pytest.fixture
def straight_route_10km() -> list[Coordinate]:
    """200 evenly spaced points along a 10,000m straight path."""
    return make_meridian_route(n_points=200, length_m=10_000.0)


@pytest.fixture
def short_route() -> list[Coordinate]:
    """5 points, 100m apart (fits any default budget)."""
    return make_meridian_route(n_points=5, length_m=400.0)


# =============================================================================
# HTTP
# =============================================================================


def make_response(
    status_code: int = 200,
    body: Any = None,
    json_error: Optional[Exception] = None,
) -> MagicMock:
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


def make_session(response: Optional[MagicMock] = None, error: Optional[Exception] = None) -> MagicMock:
    """Build a fake requests.Session whose get/post return response or raise error."""
    session = MagicMock(spec=requests.Session)
    for method in (session.get, session.post):
        if error is not None:
            method.side_effect = error
        else:
            method.return_value = response
    return session


def open_elevation_body(points: Sequence[Coordinate], elevations: Sequence[float]) -> dict[str, Any]:
    """Open-Elevation style JSON body for points."""
    return {
        "results": [
            {"latitude": p.lat, "longitude": p.lon, "elevation": e} for p, e in zip(points, elevations)
        ]
    }
