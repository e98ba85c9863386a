"""Mini README: Route storage subsystem for the Atlas planner.

Exports the ``Route`` record, the abstract ``RouteStorage`` hook and the
in-memory ``RouteStore`` used by the planning session. Durable storage
backends can subclass ``RouteStorage`` without touching the session.
"""

from .base import LatLng, Route, RouteStorage
from .store import RouteStore

__all__ = ["LatLng", "Route", "RouteStorage", "RouteStore"]
