"""Mini README: Drawing overlay used to delineate population analysis areas.

Structure:
    * DrawEvent - draw-completion payload posted by the Leaflet.Draw plugin.
    * DrawnArea - outer-ring vertices of a completed polygon or rectangle.
    * extract_vertices - normalise Leaflet or GeoJSON coordinates.
    * DrawingOverlayController - idle/drawing toggle around the toolbar.

Population analysis is not implemented yet. Completed areas are logged and
handed to any registered area handlers, which is where analysis will plug in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..errors import RouteSelectionRequired
from ..logging_utils import get_logger
from ..routes import LatLng
from .widget import MapWidget

LOGGER = get_logger(__name__)

AREA_LAYER_TYPES = frozenset({"polygon", "rectangle"})

AreaHandler = Callable[["DrawnArea"], None]


@dataclass(slots=True)
class DrawEvent:
    """Draw completion reported by the map widget."""

    layer_type: str
    latlngs: Any = None
    geometry: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DrawEvent":
        layer_type = str(payload.get("layer_type") or payload.get("layerType") or "").lower()
        return cls(
            layer_type=layer_type,
            latlngs=payload.get("latlngs"),
            geometry=payload.get("geometry"),
        )


@dataclass(slots=True)
class DrawnArea:
    """Area of interest drawn while analysing a route."""

    layer_type: str
    vertices: List[LatLng] = field(default_factory=list)
    route_name: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "layer_type": self.layer_type,
            "route_name": self.route_name,
            "vertices": [list(vertex) for vertex in self.vertices],
        }


def _as_point(value: Any) -> Optional[LatLng]:
    if isinstance(value, Mapping) and "lat" in value and ("lng" in value or "lon" in value):
        return (float(value["lat"]), float(value.get("lng", value.get("lon"))))
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str)
        and len(value) in (2, 3)
        and all(isinstance(item, (int, float)) for item in value)
    ):
        return (float(value[0]), float(value[1]))
    return None


def _outer_ring(nested: Any) -> Sequence[Any]:
    ring = nested
    while (
        isinstance(ring, Sequence)
        and ring
        and isinstance(ring[0], Sequence)
        and not isinstance(ring[0], str)
        and _as_point(ring[0]) is None
    ):
        ring = ring[0]
    return ring or []


def extract_vertices(event: DrawEvent) -> List[LatLng]:
    """Return the outer ring of the drawn shape as ``(lat, lon)`` tuples.

    Malformed payloads raise ``ValueError`` whatever the underlying failure.
    """

    try:
        if event.geometry:
            # GeoJSON positions are [lon, lat].
            ring = _outer_ring(event.geometry.get("coordinates", []))
            vertices = [(float(position[1]), float(position[0])) for position in ring]
        else:
            vertices = []
            for item in _outer_ring(event.latlngs):
                point = _as_point(item)
                if point is None:
                    raise ValueError(f"Unrecognised vertex in draw event: {item!r}")
                vertices.append(point)
    except (TypeError, AttributeError, IndexError, KeyError) as error:
        raise ValueError(f"Malformed draw event coordinates: {error}") from error
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices = vertices[:-1]
    return vertices


class DrawingOverlayController:
    """Toggle the drawing toolbar for the "Analyze Populations" action."""

    def __init__(self, map_widget: MapWidget) -> None:
        self.map_widget = map_widget
        self.is_analyzing = False
        self._route_name = ""
        self._area_handlers: List[AreaHandler] = []
        self.last_area: Optional[DrawnArea] = None

    def add_area_handler(self, handler: AreaHandler) -> None:
        self._area_handlers.append(handler)

    def request_analysis(self, selected_route: str) -> None:
        """Enter drawing mode; requires a selected route."""

        if not selected_route:
            LOGGER.info("Population analysis requested without a selected route")
            raise RouteSelectionRequired()
        self._route_name = selected_route
        if not self.is_analyzing:
            self.is_analyzing = True
            self.map_widget.show_drawing_tools()
        LOGGER.info("Drawing tools enabled for route '%s'", selected_route)

    def handle_draw_complete(self, event: DrawEvent) -> Optional[DrawnArea]:
        """Extract polygon/rectangle vertices and return to idle."""

        if not self.is_analyzing:
            LOGGER.debug("Ignoring draw completion while idle")
            return None
        area: Optional[DrawnArea] = None
        try:
            if event.layer_type in AREA_LAYER_TYPES:
                area = DrawnArea(
                    layer_type=event.layer_type,
                    vertices=extract_vertices(event),
                    route_name=self._route_name,
                )
                LOGGER.info("Drawn shape coordinates: %s", area.vertices)
                self.last_area = area
                for handler in list(self._area_handlers):
                    handler(area)
            else:
                LOGGER.debug("Ignoring draw completion for layer type '%s'", event.layer_type)
        finally:
            self._stop()
        return area

    def cancel(self) -> None:
        """Leave drawing mode without a shape."""

        if self.is_analyzing:
            LOGGER.info("Drawing cancelled")
        self._stop()

    def _stop(self) -> None:
        if self.is_analyzing:
            self.is_analyzing = False
            self.map_widget.hide_drawing_tools()
        self._route_name = ""
