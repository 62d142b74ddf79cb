"""Route Profiler - Elevation profile for routing-engine output.

Paste a routing response (coordinate pairs, lat/lng objects, an encoded
polyline, GeoJSON, or an OSRM "routes" envelope), choose a sample budget,
and get the elevation profile along the route.

Run: streamlit run route_profiler/app.py
"""

import asyncio
import json
import logging
import traceback
from datetime import datetime

import streamlit as st

from route_profiler.constants import AppConfig, ElevationConfig, ResampleConfig
from route_profiler.core.elevation_service import OpenElevationClient
from route_profiler.core.profile_assembler import ElevationProfileAssembler
from route_profiler.core.route_adapter import normalize_route, parse_route_geometry
from route_profiler.core.shade_simulator import ShadeOptions, ShadeSimulator
from route_profiler.model.errors import RouteProfilerError, ShadeSimulationError
from route_profiler.ui.context import RouteContext
from route_profiler.ui.profile_chart import ChartRenderer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def init_session_state() -> None:
    """Initialize session state with route context and renderers."""
    if "context" not in st.session_state:
        st.session_state.context = RouteContext()

    if "chart_renderer" not in st.session_state:
        st.session_state.chart_renderer = ChartRenderer()


# =============================================================================
# ACTIONS
# =============================================================================


def build_route_profile(raw_route: str, max_points: int, elevation_url: str) -> None:
    """Parse the pasted route, assemble its profile and draw the chart."""
    ctx: RouteContext = st.session_state.context
    renderer: ChartRenderer = st.session_state.chart_renderer

    try:
        raw = json.loads(raw_route)
    except json.JSONDecodeError:
        # Not JSON: treat the text as an encoded polyline
        raw = raw_route.strip()

    points = normalize_route(parse_route_geometry(raw))
    ctx.set_route(points)

    assembler = ElevationProfileAssembler(lookup=OpenElevationClient(url=elevation_url), max_points=max_points)
    with st.spinner(f"Looking up elevation for up to {max_points} samples..."):
        profile = asyncio.run(assembler.build_profile(source=points))
    ctx.set_profile(profile)
    renderer.draw(profile=profile, surface_id=AppConfig.PROFILE_SURFACE_ID, context=ctx)
    logger.info(f"Built profile: {len(profile)} points, fallback={profile.fallback}")


def simulate_shade(api_url: str) -> None:
    """Forward the current route to the configured shade API."""
    ctx: RouteContext = st.session_state.context
    simulator = ShadeSimulator(api_url=api_url or None)
    try:
        ctx.shade_result = asyncio.run(
            simulator.simulate(coords=ctx.route, options=ShadeOptions(timestamp=datetime.now()))
        )
    except ShadeSimulationError as e:
        logger.warning(f"Shade simulation failed: {e}")
        st.warning(str(e))


# =============================================================================
# LAYOUT
# =============================================================================


def _run_app_ui() -> None:
    ctx: RouteContext = st.session_state.context

    with st.sidebar:
        max_points = st.slider(
            "Maximum samples",
            min_value=ResampleConfig.MIN_SAMPLES,
            max_value=ResampleConfig.UI_MAX_SAMPLES,
            value=ResampleConfig.MAX_SAMPLES,
        )
        elevation_url = st.text_input("Elevation API", value=ElevationConfig.API_URL)
        shade_api_url = st.text_input("Shade API (optional)", value="")

    raw_route = st.text_area("Route geometry (JSON or encoded polyline)", height=160, key="raw_route")

    col_build, col_shade = st.columns(2)
    with col_build:
        if st.button("Build profile", type="primary", disabled=not raw_route.strip()):
            try:
                build_route_profile(raw_route=raw_route, max_points=max_points, elevation_url=elevation_url)
            except RouteProfilerError as e:
                st.error(str(e))
    with col_shade:
        if st.button("Simulate shade", disabled=not ctx.has_route()):
            simulate_shade(api_url=shade_api_url)

    profile = ctx.profile
    if profile is None:
        st.info("Paste a route and press Build profile.")
        return

    if profile.fallback:
        st.warning(f"Elevation service unavailable, showing flat profile: {profile.error}")

    fig = ctx.charts.get(AppConfig.PROFILE_SURFACE_ID)
    if fig is not None:
        st.plotly_chart(fig, key="route_profile")

    if ctx.shade_result is not None:
        st.json(ctx.shade_result)


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(AppConfig.TITLE)

    try:
        _run_app_ui()
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        logger.error(f"[UI] UI error caught: {error_msg}\n{traceback.format_exc()}")
        st.error(f"⚠️ [UI] Something went wrong: {error_msg}")
        st.session_state.context = RouteContext()


if __name__ == "__main__":
    main()
