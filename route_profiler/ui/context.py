"""RouteContext - Explicit per-session state for route profiling.

Holds what the UI needs between reruns: the current route, its profile, the
figures drawn per chart surface, and the last shade simulation result.
A new route replaces all derived state; nothing is updated incrementally.

Architecture:
- Pure data holder, no business logic
- Owned by the caller (Streamlit session state), passed into render calls
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import plotly.graph_objects as go

    from route_profiler.model import Coordinate, ElevationProfile


@dataclass
class RouteContext:
    """Current route and everything derived from it."""

    route: list[Coordinate] = field(default_factory=list)
    profile: ElevationProfile | None = None
    charts: dict[str, go.Figure] = field(default_factory=dict)
    shade_result: Any = None

    def clear(self) -> None:
        """Reset context to initial state."""
        self.route = []
        self.profile = None
        self.charts = {}
        self.shade_result = None

    def set_route(self, points: list[Coordinate]) -> None:
        """Start a new route event, discarding the previous route's derived state."""
        self.clear()
        self.route = list(points)

    def set_profile(self, profile: ElevationProfile) -> None:
        self.profile = profile

    def has_route(self) -> bool:
        return bool(self.route)
