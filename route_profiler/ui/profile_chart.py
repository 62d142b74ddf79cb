"""ProfileChart - Plotly elevation profile rendering.

Renders elevation profiles showing:
- Terrain elevation along the route (filled area)
- Distance in kilometers on the x-axis
- Length / ascent / descent stats annotation
- A notice when elevations are fallback placeholders

ChartRenderer keeps one figure per target surface in the RouteContext, so
re-drawing a surface replaces its figure instead of stacking a second one.
"""

import logging
from typing import Optional

import plotly.graph_objects as go

from route_profiler.constants import ChartConfig
from route_profiler.model.elevation_profile import ElevationProfile
from route_profiler.ui.context import RouteContext

logger = logging.getLogger(__name__)


class ProfileChart:
    """Renders elevation profiles using Plotly.

    Example:
        chart = ProfileChart(width=800, height=320)
        fig = chart.render(profile=profile)
        st.plotly_chart(fig)
    """

    def __init__(
        self,
        width: int = ChartConfig.DEFAULT_WIDTH,
        height: int = ChartConfig.PROFILE_HEIGHT,
    ) -> None:
        """Initialize profile chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    def render(
        self,
        profile: ElevationProfile,
        title: Optional[str] = None,
    ) -> go.Figure:
        """Render elevation profile for a route.

        Args:
            profile: Assembled elevation profile
            title: Optional chart title

        Returns:
            Plotly Figure object.
        """
        if not profile.points:
            raise ValueError("Profile must have points to render")

        distances_km = profile.distances_km
        elevations = list(profile.elevations)

        # Calculate Y-axis range (not starting from 0)
        min_elev = profile.min_elevation_m
        max_elev = profile.max_elevation_m
        padding = max(
            (max_elev - min_elev) * ChartConfig.ELEVATION_PADDING_FACTOR,
            ChartConfig.ELEVATION_PADDING_MIN_M,
        )

        color = ChartConfig.FALLBACK_COLOR if profile.fallback else ChartConfig.LINE_COLOR

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=distances_km,
                y=elevations,
                fill="tozeroy",
                fillcolor=f"rgba{self._hex_to_rgba(hex_color=color, alpha=ChartConfig.FILL_ALPHA)}",
                line=dict(color=color, width=2, shape="spline", smoothing=0.15),
                mode="lines",
                name="Elevation (m)",
                hovertemplate="Distance: %{x:.2f} km<br>Elevation: %{y:.0f}m<extra></extra>",
            )
        )

        fig.update_layout(
            title=dict(text=title or "Elevation profile", x=0.5),
            xaxis=dict(
                title="Distance (km)",
                showgrid=True,
                gridcolor="rgba(200, 200, 200, 0.3)",
            ),
            yaxis=dict(
                title="Meters",
                showgrid=True,
                gridcolor="rgba(200, 200, 200, 0.3)",
                range=[min_elev - padding, max_elev + padding],
            ),
            showlegend=False,
            width=self.width,
            height=self.height,
            margin=dict(l=50, r=30, t=50, b=50),
            plot_bgcolor="white",
        )

        if profile.fallback:
            stats_text = f"Elevation unavailable: {profile.error}"
        else:
            stats_text = (
                f"Length: {profile.total_distance_m / 1000:.2f} km | "
                f"Ascent: {profile.total_ascent_m:.0f}m | "
                f"Descent: {profile.total_descent_m:.0f}m"
            )

        fig.add_annotation(
            xref="paper",
            yref="paper",
            x=0.5,
            y=-0.15,
            text=stats_text,
            showarrow=False,
            font=dict(size=11),
        )

        return fig

    def _hex_to_rgba(self, hex_color: str, alpha: float) -> tuple:
        """Convert hex color to RGBA tuple."""
        hex_color = hex_color.lstrip("#")
        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)
        return (r, g, b, alpha)


class ChartRenderer:
    """Draws profiles onto named surfaces owned by a RouteContext."""

    def __init__(self, chart: Optional[ProfileChart] = None) -> None:
        self.chart = chart or ProfileChart()

    def draw(
        self,
        profile: ElevationProfile,
        surface_id: str,
        context: RouteContext,
        title: Optional[str] = None,
    ) -> go.Figure:
        """Render profile onto surface_id, replacing any figure already there.

        Returns:
            The new figure (also stored in context.charts[surface_id]).
        """
        fig = self.chart.render(profile=profile, title=title)
        if surface_id in context.charts:
            logger.debug(f"Replacing chart on surface '{surface_id}'")
        context.charts[surface_id] = fig
        return fig
