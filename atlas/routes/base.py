"""Mini README: Route record and the abstract route storage hook.

Structure:
    * Route - frozen dataclass pairing a name with take-off and landing points.
    * RouteStorage - abstract interface (routes / add_route / delete_route).

Coordinates are ``(latitude, longitude)`` tuples in decimal degrees, the same
order Leaflet uses for ``LatLng`` arrays.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple

from ..errors import RouteValidationError

LatLng = Tuple[float, float]


def coerce_lat_lng(point: Sequence[float], *, label: str = "point") -> LatLng:
    """Validate a coordinate pair and return it as a float tuple."""

    if len(point) != 2:
        raise RouteValidationError(f"{label} must be a (latitude, longitude) pair")
    try:
        latitude, longitude = float(point[0]), float(point[1])
    except (TypeError, ValueError) as error:
        raise RouteValidationError(f"{label} coordinates must be numeric") from error
    if not -90.0 <= latitude <= 90.0:
        raise RouteValidationError(f"{label} latitude {latitude} is outside [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise RouteValidationError(f"{label} longitude {longitude} is outside [-180, 180]")
    return (latitude, longitude)


@dataclass(frozen=True, slots=True)
class Route:
    """Named source/destination coordinate pair for a planned flight."""

    name: str
    source: LatLng
    destination: LatLng

    @classmethod
    def create(cls, name: str, source: Sequence[float], destination: Sequence[float]) -> "Route":
        """Build a route, validating the name and both coordinate pairs."""

        cleaned = (name or "").strip()
        if not cleaned:
            raise RouteValidationError("Route name must not be blank")
        return cls(
            name=cleaned,
            source=coerce_lat_lng(source, label="source"),
            destination=coerce_lat_lng(destination, label="destination"),
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "source": list(self.source),
            "destination": list(self.destination),
        }


class RouteStorage(ABC):
    """Storage hook consumed by the planning session."""

    @property
    @abstractmethod
    def routes(self) -> Mapping[str, Route]:
        """Current mapping of route name to route record."""

    @abstractmethod
    def add_route(self, name: str, source: Sequence[float], destination: Sequence[float]) -> Route:
        """Insert (or replace) the route keyed by ``name``."""

    @abstractmethod
    def delete_route(self, name: str) -> bool:
        """Remove ``name`` if present and report whether anything was removed."""
