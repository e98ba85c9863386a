"""Mini README: Planning session tying the planner's state together.

Structure:
    * PlanningSession - owns the route store, the panel records, the current
      selection, the basemap choice, the map synchronizer and the drawing
      overlay controller.

Every operator action funnels through a session method. Panel records are
immutable; each update swaps in a new record. Selection changes are
published to observers, the map synchronizer being the first of them.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .certification import SailCategory, available_sail_categories
from .errors import RouteSelectionRequired, UnknownRouteError
from .logging_utils import get_logger
from .mapping import (
    CommandQueueMapWidget,
    DrawEvent,
    DrawingOverlayController,
    DrawnArea,
    MapLayer,
    MapView,
    MapViewSynchronizer,
    MapWidget,
    tile_layer_payload,
)
from .mapping.synchronizer import DEFAULT_PADDING
from .panels import (
    CertSettings,
    FlightParams,
    TrajectorySettings,
    select_sail,
    set_parachute,
    set_relaxation,
    update_flight_params,
    update_trajectory_settings,
)
from .routes import Route, RouteStore

LOGGER = get_logger(__name__)

SelectionListener = Callable[[str], None]


class PlanningSession:
    """In-memory state of one operator's planning session."""

    def __init__(
        self,
        *,
        store: Optional[RouteStore] = None,
        map_widget: Optional[MapWidget] = None,
        map_view: Optional[MapView] = None,
        map_layer: MapLayer = MapLayer.SATELLITE,
        padding: Tuple[int, int] = DEFAULT_PADDING,
    ) -> None:
        self.store = store if store is not None else RouteStore()
        self.map_widget = map_widget if map_widget is not None else CommandQueueMapWidget()
        self.map_view = map_view or MapView()
        self.map_layer = map_layer
        self.flight_params = FlightParams()
        self.cert_settings = CertSettings()
        self.trajectory_settings = TrajectorySettings()
        self.selected_route = ""
        self._selection_listeners: List[SelectionListener] = []

        self.synchronizer = MapViewSynchronizer(self.map_widget, padding=padding)
        self.synchronizer.on_routes_changed(self.store.routes)
        self.store.subscribe(self.synchronizer.on_routes_changed)
        self.subscribe_selection(self.synchronizer.on_selection_changed)

        self.overlay = DrawingOverlayController(self.map_widget)
        LOGGER.debug("Planning session ready with %s routes", len(self.store))

    # Selection -----------------------------------------------------------
    @property
    def routes(self) -> Mapping[str, Route]:
        return self.store.routes

    @property
    def current_route(self) -> Optional[Route]:
        return self.store.get(self.selected_route) if self.selected_route else None

    @property
    def is_analyzing(self) -> bool:
        return self.overlay.is_analyzing

    def subscribe_selection(self, listener: SelectionListener) -> None:
        self._selection_listeners.append(listener)

    def select_route(self, name: str) -> Optional[Route]:
        """Select ``name``; an empty name clears the selection."""

        name = (name or "").strip()
        if name and name not in self.store:
            raise UnknownRouteError(name)
        self.selected_route = name
        LOGGER.info("Selected route '%s'", name or "-")
        for listener in list(self._selection_listeners):
            listener(name)
        return self.current_route

    def add_route(self, name: str, source: Sequence[float], destination: Sequence[float]) -> Route:
        """Store a route and make it the current selection."""

        route = self.store.add(name, source, destination)
        self.select_route(route.name)
        return route

    def delete_selected_route(self) -> bool:
        """Delete the selected route and clear the selection."""

        if not self.selected_route:
            return False
        removed = self.store.delete(self.selected_route)
        self.overlay.cancel()
        self.select_route("")
        return removed

    # Map -----------------------------------------------------------------
    def set_map_layer(self, layer: str) -> MapLayer:
        self.map_layer = MapLayer.from_str(layer)
        LOGGER.debug("Basemap switched to %s", self.map_layer.value)
        return self.map_layer

    def analyze_populations(self) -> None:
        """Enter drawing mode, or notify the operator that a route is needed."""

        try:
            self.overlay.request_analysis(self.selected_route)
        except RouteSelectionRequired as error:
            self.map_widget.notify(error.notice)
            raise

    def complete_drawing(self, event: DrawEvent) -> Optional[DrawnArea]:
        return self.overlay.handle_draw_complete(event)

    def cancel_drawing(self) -> None:
        self.overlay.cancel()

    # Panels --------------------------------------------------------------
    def update_flight_params(self, **changes: Any) -> FlightParams:
        self.flight_params = update_flight_params(self.flight_params, **changes)
        return self.flight_params

    def update_trajectory_settings(self, **changes: Any) -> TrajectorySettings:
        self.trajectory_settings = update_trajectory_settings(self.trajectory_settings, **changes)
        return self.trajectory_settings

    def select_sail(self, sail: str) -> CertSettings:
        self.cert_settings = select_sail(self.cert_settings, sail)
        return self.cert_settings

    def set_parachute(self, has_parachute: bool) -> CertSettings:
        self.cert_settings = set_parachute(self.cert_settings, has_parachute)
        return self.cert_settings

    def set_relaxation(self, relaxation: float) -> CertSettings:
        self.cert_settings = set_relaxation(self.cert_settings, relaxation)
        return self.cert_settings

    def available_sails(self) -> List[SailCategory]:
        return available_sail_categories(self.cert_settings.has_parachute)

    # Serialisation -------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        """Return the full UI state as JSON-ready primitives."""

        current = self.current_route
        last_area = self.overlay.last_area
        return {
            "routes": [route.as_dict() for route in self.store],
            "selected_route": self.selected_route,
            "current_route": current.as_dict() if current else None,
            "flight_params": self.flight_params.as_dict(),
            "cert_settings": self.cert_settings.as_dict(),
            "available_sails": [category.value for category in self.available_sails()],
            "trajectory_settings": self.trajectory_settings.as_dict(),
            "map_layer": self.map_layer.value,
            "tile_layers": tile_layer_payload(),
            "map_view": self.map_view.as_dict(),
            "is_analyzing": self.is_analyzing,
            "last_area": last_area.as_dict() if last_area else None,
        }
