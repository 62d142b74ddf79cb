"""Shade simulation adapter.

Pass-through to whichever shade source is configured, in priority order:
1. A registered plugin object exposing simulate(coords, options), or a
   plain callable plugin(coords, options)
2. An HTTP shade API (POST {"route": [[lat, lng], ...], "date": iso8601})
3. Nothing configured: ShadeSimulatorNotConfiguredError
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence

import requests

from route_profiler.constants import ShadeConfig
from route_profiler.model.coordinate import Coordinate
from route_profiler.model.errors import ShadeSimulationError, ShadeSimulatorNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShadeOptions:
    """Options bag for a shade simulation.

    Attributes:
        timestamp: Moment to simulate sun position for
        plugin_options: Free-form options forwarded to the plugin
    """

    timestamp: datetime
    plugin_options: dict[str, Any] = field(default_factory=dict)


class ShadeSimulator:
    """Forwards shade simulation requests to a plugin or HTTP API."""

    def __init__(
        self,
        plugin: Optional[Any] = None,
        api_url: Optional[str] = None,
        timeout_s: float = ShadeConfig.TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.plugin = plugin
        self.api_url = api_url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return self.plugin is not None or bool(self.api_url)

    async def simulate(self, coords: Sequence[Coordinate], options: ShadeOptions) -> Any:
        """Run the shade simulation for a route.

        Returns:
            Whatever the plugin or API produced (API: decoded JSON).

        Raises:
            ShadeSimulationError: If the plugin or API fails.
            ShadeSimulatorNotConfiguredError: If neither is configured.
        """
        if self.plugin is not None:
            return await self._run_plugin(coords=coords, options=options)
        if self.api_url:
            return await asyncio.to_thread(self._post_to_api, list(coords), options)
        raise ShadeSimulatorNotConfiguredError()

    async def _run_plugin(self, coords: Sequence[Coordinate], options: ShadeOptions) -> Any:
        simulate = getattr(self.plugin, "simulate", None)
        if not callable(simulate):
            if not callable(self.plugin):
                raise ShadeSimulationError(f"Shade plugin {self.plugin!r} is neither callable nor has simulate()")
            simulate = self.plugin

        try:
            result = simulate(coords, options)
            if inspect.isawaitable(result):
                result = await result
        except ShadeSimulationError:
            raise
        except Exception as e:
            raise ShadeSimulationError(f"Shade plugin failed: {e}") from e
        return result

    def _post_to_api(self, coords: list[Coordinate], options: ShadeOptions) -> Any:
        payload = {
            "route": [[c.lat, c.lon] for c in coords],
            "date": options.timestamp.isoformat(),
        }
        logger.info(f"Requesting shade simulation for {len(coords)} points from {self.api_url}")
        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise ShadeSimulationError(f"Shade API request failed: {e}") from e

        if not response.ok:
            raise ShadeSimulationError(f"Shade API HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise ShadeSimulationError("Shade API returned a non-JSON body") from e
