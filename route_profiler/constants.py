"""Configuration constants for Route Profiler.

All configurable parameters are centralized here for easy tuning.
Components take these values as constructor defaults and accept overrides.

Classes:
    AppConfig: UI application settings
    GeoConfig: Earth model parameters
    ResampleConfig: Polyline sample budget
    ElevationConfig: Remote elevation lookup endpoint
    ShadeConfig: Shade simulation API settings
    ChartConfig: Chart rendering dimensions and colors
"""


class AppConfig:
    """UI application settings."""

    TITLE = "Route Profiler - Elevation Along Your Route"
    ICON = "⛰️"
    LAYOUT = "wide"

    # Chart surface used by the main panel
    PROFILE_SURFACE_ID = "elevation"


class GeoConfig:
    """Earth model parameters."""

    # Mean Earth radius in meters (spherical approximation)
    EARTH_RADIUS_M = 6_371_000


class ResampleConfig:
    """Polyline sample budget."""

    # Default upper bound on samples sent to the elevation API (URL length limits)
    MAX_SAMPLES = 120

    # Start and end must always be representable
    MIN_SAMPLES = 2

    # Upper limit offered by the UI slider
    UI_MAX_SAMPLES = 500


class ElevationConfig:
    """Remote elevation lookup endpoint (Open-Elevation compatible)."""

    API_URL = "https://api.open-elevation.com/api/v1/lookup"
    TIMEOUT_S = 30

    # Query encoding: "lat,lng|lat,lng|..."
    LOCATION_SEPARATOR = "|"
    QUERY_PARAM = "locations"


class ShadeConfig:
    """Shade simulation API settings."""

    TIMEOUT_S = 30


class ChartConfig:
    """Chart rendering dimensions and settings."""

    DEFAULT_WIDTH = 800
    PROFILE_HEIGHT = 320

    # Y-axis padding settings
    ELEVATION_PADDING_FACTOR = 0.1  # 10% padding above/below
    ELEVATION_PADDING_MIN_M = 20  # Minimum padding in meters

    LINE_COLOR = "#ff7f0e"
    FILL_ALPHA = 0.15
    FALLBACK_COLOR = "#9e9e9e"
