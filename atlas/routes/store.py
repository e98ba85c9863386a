"""Mini README: In-memory route store.

Structure:
    * RouteStore - ``RouteStorage`` implementation keyed by route name.

Adding a route under an existing name replaces the previous record; the
replacement is logged so operators can spot accidental overwrites. Change
listeners are notified after every mutation so map views can follow the
route set.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence

from ..logging_utils import get_logger
from .base import Route, RouteStorage

LOGGER = get_logger(__name__)

RouteListener = Callable[[Mapping[str, Route]], None]


class RouteStore(RouteStorage):
    """Own every route record for the lifetime of the process."""

    def __init__(self, routes: Optional[Sequence[Route]] = None) -> None:
        self._routes: Dict[str, Route] = {route.name: route for route in routes or []}
        self._listeners: List[RouteListener] = []
        LOGGER.debug("Initialised RouteStore with %s routes", len(self._routes))

    @property
    def routes(self) -> Mapping[str, Route]:
        return MappingProxyType(dict(self._routes))

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes.values()))

    def get(self, name: str) -> Optional[Route]:
        return self._routes.get(name)

    def subscribe(self, listener: RouteListener) -> None:
        """Register a callback invoked with the new mapping after each change."""

        self._listeners.append(listener)

    def add(self, name: str, source: Sequence[float], destination: Sequence[float]) -> Route:
        """Insert or overwrite the route keyed by ``name``."""

        route = Route.create(name, source, destination)
        if route.name in self._routes:
            LOGGER.warning("Overwriting existing route '%s'", route.name)
        self._routes[route.name] = route
        LOGGER.info(
            "Stored route '%s' from %s to %s", route.name, route.source, route.destination
        )
        self._notify()
        return route

    def delete(self, name: str) -> bool:
        """Remove ``name`` if present; unknown names are a no-op."""

        if self._routes.pop(name, None) is None:
            LOGGER.debug("Delete ignored for unknown route '%s'", name)
            return False
        LOGGER.info("Deleted route '%s'", name)
        self._notify()
        return True

    # RouteStorage hook names
    def add_route(self, name: str, source: Sequence[float], destination: Sequence[float]) -> Route:
        return self.add(name, source, destination)

    def delete_route(self, name: str) -> bool:
        return self.delete(name)

    def _notify(self) -> None:
        snapshot = self.routes
        for listener in list(self._listeners):
            listener(snapshot)
