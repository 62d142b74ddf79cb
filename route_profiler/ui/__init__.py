"""User interface components for route profiler.

- context.py: RouteContext session state
- profile_chart.py: Plotly elevation profile charts (ProfileChart, ChartRenderer)
"""

from route_profiler.ui.context import RouteContext
from route_profiler.ui.profile_chart import ChartRenderer, ProfileChart

__all__ = [
    "RouteContext",
    "ProfileChart",
    "ChartRenderer",
]
