"""Mini README: Basemap definitions and the initial map view.

Structure:
    * MapLayer - enum of the three selectable basemaps.
    * TileLayerSpec - tile URL template plus attribution.
    * MapView - initial centre and zoom handed to the map widget.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from ..errors import UnknownMapLayerError
from ..routes import LatLng


@dataclass(frozen=True, slots=True)
class TileLayerSpec:
    url: str
    attribution: str


class MapLayer(str, Enum):
    """Basemaps offered by the layer selector."""

    SATELLITE = "satellite"
    STREETS = "streets"
    HYBRID = "hybrid"

    @classmethod
    def from_str(cls, value: str) -> "MapLayer":
        """Coerce arbitrary casing into a known basemap."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise UnknownMapLayerError(f"Unsupported map layer: {value}") from error

    @property
    def tiles(self) -> TileLayerSpec:
        return TILE_LAYERS[self]


TILE_LAYERS: Dict[MapLayer, TileLayerSpec] = {
    MapLayer.SATELLITE: TileLayerSpec(
        url="https://mt1.google.com/vt/lyrs=s&x={x}&y={y}&z={z}",
        attribution="Google Satellite",
    ),
    MapLayer.STREETS: TileLayerSpec(
        url="https://mt1.google.com/vt/lyrs=m&x={x}&y={y}&z={z}",
        attribution="Google Streets",
    ),
    MapLayer.HYBRID: TileLayerSpec(
        url="https://mt1.google.com/vt/lyrs=y&x={x}&y={y}&z={z}",
        attribution="Google Hybrid",
    ),
}


def tile_layer_payload() -> List[Dict[str, str]]:
    """Serialise every basemap for the browser's layer control."""

    return [
        {"id": layer.value, "url": spec.url, "attribution": spec.attribution}
        for layer, spec in TILE_LAYERS.items()
    ]


@dataclass(frozen=True, slots=True)
class MapView:
    """Initial viewport of the map widget."""

    center: LatLng = (51.505, -0.09)
    zoom: int = 13

    def as_dict(self) -> Dict[str, object]:
        return {"center": list(self.center), "zoom": self.zoom}
