"""Mini README: Keep the map viewport on the selected route.

Structure:
    * MapViewSynchronizer - observer reacting to selection and route-set
      changes by fitting the map to the selected route.

The bounds themselves come from the pure ``route_bounds`` helper; the only
side effect is the ``fit_bounds`` call on the injected ``MapWidget``.
"""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

from ..logging_utils import get_logger
from ..routes import Route
from .bounds import LatLngBounds, route_bounds
from .widget import MapWidget

LOGGER = get_logger(__name__)

DEFAULT_PADDING: Tuple[int, int] = (50, 50)


class MapViewSynchronizer:
    """Fit the map to the selected route whenever selection or routes change."""

    def __init__(self, map_widget: MapWidget, *, padding: Tuple[int, int] = DEFAULT_PADDING) -> None:
        self.map_widget = map_widget
        self.padding = padding
        self._selected = ""
        self._routes: Mapping[str, Route] = {}

    def on_selection_changed(self, selected_route: str) -> Optional[LatLngBounds]:
        self._selected = selected_route
        return self.sync()

    def on_routes_changed(self, routes: Mapping[str, Route]) -> Optional[LatLngBounds]:
        self._routes = routes
        return self.sync()

    def sync(self) -> Optional[LatLngBounds]:
        """Fit the viewport if the selection resolves; return the fitted bounds."""

        if not self._selected:
            return None
        route = self._routes.get(self._selected)
        if route is None:
            LOGGER.debug("Selection '%s' does not resolve to a route", self._selected)
            return None
        bounds = route_bounds(route)
        LOGGER.debug("Fitting map to route '%s' bounds %s", route.name, bounds)
        self.map_widget.fit_bounds(bounds, self.padding)
        return bounds
