"""Core foundation classes for route profiling.

- GeoCalculator: Geodesic calculations (haversine, cumulative distances)
- PolylineResampler: Arc-length resampling to a sample budget
- ElevationProfileAssembler: Resample + distances + elevation lookup
- OpenElevationClient: Reference elevation lookup over HTTP
- route_adapter: Routing-engine geometry normalization
- ShadeSimulator: Shade plugin/API pass-through

Only GeoCalculator is re-exported here: model.coordinate depends on it, and
the other core modules depend on model. Import them from their modules:
    from route_profiler.core.profile_assembler import ElevationProfileAssembler
"""

from route_profiler.core.geo_calculator import GeoCalculator

__all__ = [
    "GeoCalculator",
]
