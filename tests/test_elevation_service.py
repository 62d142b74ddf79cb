"""Tests for OpenElevationClient - the reference elevation lookup.

All HTTP traffic goes through a fake requests.Session (see conftest.py);
no network access is needed.
"""

import asyncio

import pytest
import requests

from conftest import make_meridian_route, make_response, make_session, open_elevation_body
from route_profiler.constants import ElevationConfig
from route_profiler.core.elevation_service import OpenElevationClient, encode_locations
from route_profiler.core.profile_assembler import ElevationProfileAssembler
from route_profiler.model.coordinate import Coordinate
from route_profiler.model.errors import LookupFailure


@pytest.fixture
def points() -> list[Coordinate]:
    return [Coordinate(lat=40.7128, lon=-74.006), Coordinate(lat=40.72, lon=-74.0)]


class TestRequestEncoding:
    """Coordinates are sent as lat,lng pairs joined by |."""

    def test_encode_locations(self, points: list[Coordinate]) -> None:
        assert encode_locations(points) == "40.7128,-74.006|40.72,-74.0"

    def test_single_get_with_locations_param(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body=open_elevation_body(points, [10.0, 12.5])))
        client = OpenElevationClient(url="https://elevation.test/lookup", timeout_s=5, session=session)

        client.fetch_elevations(points)

        session.get.assert_called_once_with(
            "https://elevation.test/lookup",
            params={"locations": "40.7128,-74.006|40.72,-74.0"},
            timeout=5,
        )

    def test_defaults_to_open_elevation(self) -> None:
        client = OpenElevationClient(session=make_session())
        assert client.url == ElevationConfig.API_URL


class TestResponseParsing:
    """Successful and failed responses."""

    def test_returns_elevations_in_order(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body=open_elevation_body(points, [10.0, 12.5])))
        client = OpenElevationClient(session=session)
        assert client.fetch_elevations(points) == [10.0, 12.5]

    def test_integer_elevations_become_floats(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body=open_elevation_body(points, [10, 12])))
        result = OpenElevationClient(session=session).fetch_elevations(points)
        assert result == [10.0, 12.0]
        assert all(isinstance(e, float) for e in result)

    def test_http_error_status(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(status_code=503))
        with pytest.raises(LookupFailure, match="Open-Elevation HTTP 503"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_missing_results(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body={"error": "quota"}))
        with pytest.raises(LookupFailure, match="Unexpected elevation response"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_non_json_body(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(json_error=ValueError("Expecting value")))
        with pytest.raises(LookupFailure, match="non-JSON"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_result_count_mismatch(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body=open_elevation_body(points[:1], [10.0])))
        with pytest.raises(LookupFailure, match="Expected 2 elevations, got 1"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_malformed_result_entry(self, points: list[Coordinate]) -> None:
        body = {"results": [{"latitude": 1.0, "longitude": 2.0}, {"elevation": "high"}]}
        session = make_session(make_response(body=body))
        with pytest.raises(LookupFailure, match="index 0"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_transport_error(self, points: list[Coordinate]) -> None:
        session = make_session(error=requests.ConnectionError("connection refused"))
        with pytest.raises(LookupFailure, match="connection refused"):
            OpenElevationClient(session=session).fetch_elevations(points)

    def test_empty_points_skip_request(self) -> None:
        session = make_session()
        assert OpenElevationClient(session=session).fetch_elevations([]) == []
        session.get.assert_not_called()


class TestAsyncLookup:
    """The client instance is an async ElevationLookupFn."""

    def test_await_client(self, points: list[Coordinate]) -> None:
        session = make_session(make_response(body=open_elevation_body(points, [1.0, 2.0])))
        client = OpenElevationClient(session=session)
        assert asyncio.run(client(points)) == [1.0, 2.0]

    def test_assembler_with_unreachable_service(self) -> None:
        route = make_meridian_route(n_points=5, length_m=400.0)
        session = make_session(make_response(status_code=500))
        assembler = ElevationProfileAssembler(lookup=OpenElevationClient(session=session))

        profile = asyncio.run(assembler.build_profile(source=route))

        assert profile.fallback is True
        assert profile.error == "Open-Elevation HTTP 500"
        assert profile.elevations == (0.0,) * 5

    def test_assembler_with_working_service(self) -> None:
        route = make_meridian_route(n_points=5, length_m=400.0)
        session = make_session(make_response(body=open_elevation_body(route, [5.0, 6.0, 7.0, 8.0, 9.0])))
        assembler = ElevationProfileAssembler(lookup=OpenElevationClient(session=session))

        profile = asyncio.run(assembler.build_profile(source=route))

        assert profile.fallback is False
        assert profile.elevations == (5.0, 6.0, 7.0, 8.0, 9.0)
