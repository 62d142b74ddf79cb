"""Route adapter - Normalize routing-engine geometry into Coordinates.

Routing engines return route geometry in different shapes. Each shape is a
tagged variant; normalize_route() is the single conversion into
list[Coordinate]:

- PairListGeometry: [[lat, lng], ...] (or [lng, lat] when lon_first=True)
- ObjectListGeometry: [{"lat": .., "lng": ..}, ...] ("lon" also accepted)
- EncodedGeometry: Google encoded polyline string, decoded by the polyline package

parse_route_geometry() picks the variant for a raw routing response,
unwrapping common envelopes (OSRM "routes", GeoJSON Feature/FeatureCollection).
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

import polyline

from route_profiler.model.coordinate import Coordinate
from route_profiler.model.errors import EmptyInputError, RouteFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairListGeometry:
    """Array of coordinate pairs.

    Attributes:
        pairs: Two-element sequences
        lon_first: True for GeoJSON [lon, lat] order
    """

    pairs: Sequence[Sequence[float]]
    lon_first: bool = False
    kind: str = "pairs"


@dataclass(frozen=True)
class ObjectListGeometry:
    """Array of objects with lat and lng/lon keys."""

    objects: Sequence[Mapping[str, float]]
    kind: str = "objects"


@dataclass(frozen=True)
class EncodedGeometry:
    """Encoded polyline string (precision 5 for Google/OSRM, 6 for Valhalla)."""

    encoded: str
    precision: int = 5
    kind: str = "encoded"


RouteGeometry = Union[PairListGeometry, ObjectListGeometry, EncodedGeometry]


def normalize_route(geometry: RouteGeometry) -> list[Coordinate]:
    """Convert a tagged route geometry into coordinates.

    Args:
        geometry: One of the RouteGeometry variants

    Returns:
        Non-empty list of Coordinates in route order.

    Raises:
        RouteFormatError: If an entry cannot be read as a coordinate.
        EmptyInputError: If the geometry holds no points.
    """
    if isinstance(geometry, PairListGeometry):
        points = [_from_pair(pair=p, lon_first=geometry.lon_first) for p in geometry.pairs]
    elif isinstance(geometry, ObjectListGeometry):
        points = [_from_object(obj=o) for o in geometry.objects]
    elif isinstance(geometry, EncodedGeometry):
        try:
            decoded = polyline.decode(geometry.encoded, geometry.precision)
        except (IndexError, TypeError, ValueError) as e:
            raise RouteFormatError(f"Cannot decode encoded polyline: {e}") from e
        points = [Coordinate(lat=lat, lon=lon) for lat, lon in decoded]
    else:
        raise RouteFormatError(f"Unsupported route geometry: {type(geometry).__name__}")

    if not points:
        raise EmptyInputError("Route geometry contains no coordinates")
    return points


def _from_pair(pair: Sequence[float], lon_first: bool) -> Coordinate:
    if not isinstance(pair, Sequence) or isinstance(pair, (str, bytes)) or len(pair) < 2:
        raise RouteFormatError(f"Expected coordinate pair, got {pair!r}")
    try:
        first, second = float(pair[0]), float(pair[1])
    except (TypeError, ValueError) as e:
        raise RouteFormatError(f"Non-numeric coordinate pair {pair!r}") from e
    if lon_first:
        return Coordinate(lat=second, lon=first)
    return Coordinate(lat=first, lon=second)


def _from_object(obj: Mapping[str, Any]) -> Coordinate:
    if not isinstance(obj, Mapping) or "lat" not in obj:
        raise RouteFormatError(f"Expected object with lat/lng, got {obj!r}")
    lon = obj.get("lng", obj.get("lon"))
    if lon is None:
        raise RouteFormatError(f"Object has no lng/lon: {obj!r}")
    try:
        return Coordinate(lat=float(obj["lat"]), lon=float(lon))
    except (TypeError, ValueError) as e:
        raise RouteFormatError(f"Non-numeric coordinate object {obj!r}") from e


def parse_route_geometry(raw: Any) -> RouteGeometry:
    """Detect the geometry variant of a raw routing response.

    Accepts a bare geometry (pairs, objects, encoded string), a GeoJSON
    LineString/Feature/FeatureCollection, or an OSRM-style {"routes": [...]}
    envelope. The first route/feature is used.

    Raises:
        RouteFormatError: If the shape is not recognized.
    """
    if isinstance(raw, str):
        return EncodedGeometry(encoded=raw)

    if isinstance(raw, Mapping):
        if "routes" in raw:
            return parse_route_geometry(_first(raw["routes"], name="routes").get("geometry"))
        if "features" in raw:
            return parse_route_geometry(_first(raw["features"], name="features"))
        if raw.get("type") == "Feature":
            return parse_route_geometry(raw.get("geometry"))
        if raw.get("type") == "LineString":
            return PairListGeometry(pairs=raw.get("coordinates") or [], lon_first=True)
        raise RouteFormatError(f"Unrecognized route object with keys {sorted(raw)}")

    if isinstance(raw, Sequence) and raw:
        head = raw[0]
        if isinstance(head, Mapping):
            return ObjectListGeometry(objects=raw)
        if isinstance(head, Sequence) and not isinstance(head, str):
            return PairListGeometry(pairs=raw)

    raise RouteFormatError(f"Unrecognized route geometry: {type(raw).__name__}")


def _first(items: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(items, Sequence) or not items or not isinstance(items[0], Mapping):
        raise RouteFormatError(f"Routing response has no {name}")
    if len(items) > 1:
        logger.info(f"Routing response has {len(items)} {name}, using the first")
    return items[0]
