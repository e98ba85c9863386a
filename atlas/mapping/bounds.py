"""Mini README: Bounding box helpers for map viewport fitting.

Structure:
    * LatLngBounds - south-west / north-east corner pair.
    * bounds_from_points - smallest box containing the given points.
    * route_bounds - box covering a route's take-off and landing points.

Kept free of web framework imports so the helpers can be unit tested and
reused by scripts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..routes import LatLng, Route


@dataclass(frozen=True, slots=True)
class LatLngBounds:
    """Axis-aligned box in (latitude, longitude) space."""

    south: float
    west: float
    north: float
    east: float

    @property
    def south_west(self) -> LatLng:
        return (self.south, self.west)

    @property
    def north_east(self) -> LatLng:
        return (self.north, self.east)

    def contains(self, point: LatLng) -> bool:
        latitude, longitude = point
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def as_leaflet(self) -> List[List[float]]:
        """Return ``[[south, west], [north, east]]`` as ``L.latLngBounds`` accepts."""

        return [list(self.south_west), list(self.north_east)]

    def as_dict(self) -> Dict[str, float]:
        return {"south": self.south, "west": self.west, "north": self.north, "east": self.east}


def bounds_from_points(points: Iterable[Tuple[float, float]]) -> LatLngBounds:
    """Return the smallest bounds containing every ``(lat, lon)`` point."""

    collected = [(float(lat), float(lon)) for lat, lon in points]
    if not collected:
        raise ValueError("At least one point is required to compute bounds")
    lats = [lat for lat, _ in collected]
    lons = [lon for _, lon in collected]
    return LatLngBounds(south=min(lats), west=min(lons), north=max(lats), east=max(lons))


def route_bounds(route: Route) -> LatLngBounds:
    """Bounds covering both endpoints of ``route``."""

    return bounds_from_points((route.source, route.destination))
