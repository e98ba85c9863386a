"""Mini README: Domain exceptions raised by the Atlas planner.

The web layer maps these onto HTTP status codes; library callers can catch
``AtlasError`` to handle every planner failure in one place.
"""

from __future__ import annotations


class AtlasError(Exception):
    """Base class for planner errors."""


class RouteSelectionRequired(AtlasError):
    """Raised when an action needs a selected route and none is selected."""

    def __init__(self, message: str = "Please select a route first") -> None:
        super().__init__(message)
        self.notice = message


class RouteValidationError(AtlasError, ValueError):
    """Raised when a route name or coordinate pair is malformed."""


class UnknownRouteError(AtlasError, LookupError):
    """Raised when a route name does not resolve in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Route '{name}' is not registered")
        self.name = name


class UnknownFieldError(AtlasError, KeyError):
    """Raised when a form update names a field the panel does not have."""

    def __init__(self, panel: str, field_name: str) -> None:
        super().__init__(f"{panel} has no field '{field_name}'")
        self.panel = panel
        self.field_name = field_name

    def __str__(self) -> str:
        return str(self.args[0])


class CertificationConstraintError(AtlasError, ValueError):
    """Raised when a SAIL/parachute combination is not selectable."""


class UnknownMapLayerError(AtlasError, ValueError):
    """Raised when a basemap identifier is not one of the known layers."""
