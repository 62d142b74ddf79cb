"""Remote elevation lookup against an Open-Elevation compatible API.

Request contract:
- Single GET to the lookup endpoint
- Query parameter locations="lat,lng|lat,lng|..."

Response contract:
- JSON body {"results": [{"latitude", "longitude", "elevation"}, ...]}
- Results in the same order as the request, one per location

Any transport error, non-success status, unparsable body, missing results
or count mismatch raises LookupFailure.

Public API: https://api.open-elevation.com/api/v1/lookup
"""

import asyncio
import logging
import math
from typing import Awaitable, Callable, Optional, Sequence

import requests

from route_profiler.constants import ElevationConfig
from route_profiler.model.coordinate import Coordinate
from route_profiler.model.errors import LookupFailure

logger = logging.getLogger(__name__)

# Consumed capability: coordinates in, one elevation (meters) per coordinate out
ElevationLookupFn = Callable[[Sequence[Coordinate]], Awaitable[Sequence[float]]]


def encode_locations(points: Sequence[Coordinate]) -> str:
    """Encode coordinates as "lat,lng|lat,lng|..."."""
    return ElevationConfig.LOCATION_SEPARATOR.join(f"{p.lat},{p.lon}" for p in points)


class OpenElevationClient:
    """Elevation lookup client for Open-Elevation style APIs.

    The instance is itself an ElevationLookupFn: awaiting client(points)
    runs the blocking HTTP request in a worker thread.

    Example:
        client = OpenElevationClient()
        elevations = await client(points)
    """

    def __init__(
        self,
        url: str = ElevationConfig.API_URL,
        timeout_s: float = ElevationConfig.TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize client.

        Args:
            url: Lookup endpoint
            timeout_s: HTTP timeout in seconds
            session: Optional requests session (connection reuse, testing)
        """
        self.url = url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def fetch_elevations(self, points: Sequence[Coordinate]) -> list[float]:
        """Look up elevations for points with a single blocking GET.

        Args:
            points: Coordinates to look up

        Returns:
            Elevations in meters, same length and order as points.

        Raises:
            LookupFailure: If the source is unreachable or the response unusable.
        """
        if not points:
            return []

        logger.info(f"Requesting {len(points)} elevations from {self.url}")
        try:
            response = self.session.get(
                self.url,
                params={ElevationConfig.QUERY_PARAM: encode_locations(points=points)},
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise LookupFailure(f"Open-Elevation request failed: {e}") from e

        if not response.ok:
            raise LookupFailure(f"Open-Elevation HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise LookupFailure("Open-Elevation returned a non-JSON body") from e

        results = body.get("results") if isinstance(body, dict) else None
        if not isinstance(results, list):
            raise LookupFailure("Unexpected elevation response")
        if len(results) != len(points):
            raise LookupFailure(f"Expected {len(points)} elevations, got {len(results)}")

        return [self._parse_elevation(result=r, index=i) for i, r in enumerate(results)]

    @staticmethod
    def _parse_elevation(result: object, index: int) -> float:
        """Extract a finite elevation from one result entry."""
        try:
            elevation = float(result["elevation"])  # type: ignore[index]
        except (KeyError, TypeError, ValueError) as e:
            raise LookupFailure(f"Malformed elevation result at index {index}: {result!r}") from e
        if not math.isfinite(elevation):
            raise LookupFailure(f"Non-finite elevation at index {index}: {elevation}")
        return elevation

    async def lookup(self, points: Sequence[Coordinate]) -> list[float]:
        """Async lookup; the HTTP call runs in a worker thread."""
        return await asyncio.to_thread(self.fetch_elevations, list(points))

    async def __call__(self, points: Sequence[Coordinate]) -> list[float]:
        return await self.lookup(points=points)
