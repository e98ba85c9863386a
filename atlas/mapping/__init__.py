"""Mini README: Map widget integration for the Atlas planner.

Groups the pure bounds helpers, basemap definitions, the ``MapWidget``
effect boundary, the selection-driven viewport synchronizer and the drawing
overlay controller.
"""

from .bounds import LatLngBounds, bounds_from_points, route_bounds
from .drawing import DrawEvent, DrawingOverlayController, DrawnArea, extract_vertices
from .layers import MapLayer, MapView, TILE_LAYERS, tile_layer_payload
from .synchronizer import MapViewSynchronizer
from .widget import CommandQueueMapWidget, MapCommand, MapWidget

__all__ = [
    "CommandQueueMapWidget",
    "DrawEvent",
    "DrawingOverlayController",
    "DrawnArea",
    "LatLngBounds",
    "MapCommand",
    "MapLayer",
    "MapView",
    "MapViewSynchronizer",
    "MapWidget",
    "TILE_LAYERS",
    "bounds_from_points",
    "extract_vertices",
    "route_bounds",
    "tile_layer_payload",
]
