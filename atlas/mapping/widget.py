"""Mini README: Effect boundary between planner state and the map widget.

Structure:
    * MapCommand - one imperative instruction for the browser map.
    * MapWidget - abstract interface the synchronizer and overlay drive.
    * CommandQueueMapWidget - queues commands until the browser drains them.

Planner code never talks to Leaflet directly. It issues commands against a
``MapWidget``; the web interface hands the queued commands to the page,
which replays them on the real map.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..logging_utils import get_logger
from .bounds import LatLngBounds

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class MapCommand:
    """Instruction replayed by the browser against the Leaflet map."""

    action: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"action": self.action, **self.parameters}


class MapWidget(ABC):
    """Imperative operations the planner needs from the map."""

    @abstractmethod
    def fit_bounds(self, bounds: LatLngBounds, padding: Tuple[int, int]) -> None:
        """Animate the viewport so ``bounds`` is visible with pixel padding."""

    @abstractmethod
    def show_drawing_tools(self) -> None:
        """Mount the polygon/rectangle drawing toolbar."""

    @abstractmethod
    def hide_drawing_tools(self) -> None:
        """Remove the drawing toolbar."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a blocking notice to the operator."""


class CommandQueueMapWidget(MapWidget):
    """Record commands until the page collects them."""

    def __init__(self) -> None:
        self._pending: List[MapCommand] = []

    @property
    def pending(self) -> List[MapCommand]:
        return list(self._pending)

    def fit_bounds(self, bounds: LatLngBounds, padding: Tuple[int, int]) -> None:
        LOGGER.debug("Queueing fit_bounds %s padding=%s", bounds, padding)
        self._pending.append(
            MapCommand("fit_bounds", {"bounds": bounds.as_leaflet(), "padding": list(padding)})
        )

    def show_drawing_tools(self) -> None:
        self._pending.append(MapCommand("show_drawing_tools"))

    def hide_drawing_tools(self) -> None:
        self._pending.append(MapCommand("hide_drawing_tools"))

    def notify(self, message: str) -> None:
        LOGGER.debug("Queueing operator notice: %s", message)
        self._pending.append(MapCommand("notify", {"message": message}))

    def drain(self) -> List[Dict[str, Any]]:
        """Return queued commands as dictionaries and clear the queue."""

        drained = [command.as_dict() for command in self._pending]
        self._pending.clear()
        return drained
