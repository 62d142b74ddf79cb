"""Route Profiler - Elevation profiles for routing-engine polylines.

Prepares a route for elevation lookup and charting:
- Haversine distances on a spherical Earth
- Arc-length resampling of long polylines to a bounded sample budget
- Elevation profile assembly with a zero-elevation fallback when the
  elevation service is unavailable

Modules:
    core: Geo calculations, resampler, profile assembler, elevation client,
          route adapter, shade simulator
    model: Data structures (Coordinate, ElevationProfile, errors)
    ui: Streamlit session context and Plotly profile charts

Example:
    from route_profiler.core.elevation_service import OpenElevationClient
    from route_profiler.core.profile_assembler import ElevationProfileAssembler

    assembler = ElevationProfileAssembler(lookup=OpenElevationClient())
    profile = asyncio.run(assembler.build_profile(source=points))
"""
