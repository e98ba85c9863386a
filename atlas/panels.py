"""Mini README: Immutable form state for the planner side panels.

Structure:
    * FlightParams - altitude, velocity, flight geography, contingency.
    * CertSettings - SAIL category, parachute fit, derived density, relaxation.
    * TrajectorySettings - transition distances, turning radius, waypoint
      spacing and lateral drift limits.
    * update_* / select_sail / set_parachute / set_relaxation - pure update
      functions returning new records.

Numeric fields are coerced to floats but deliberately not range checked; the
operator may enter zero or negative values. The only cross-field rule is
the SAIL 6 / parachute exclusion, and ``density_suppression`` is always
derived from the lookup table rather than set directly.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Dict, List, Mapping, Tuple, Union

from .certification import SailCategory, density_suppression, is_selectable
from .errors import CertificationConstraintError, UnknownFieldError
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

Number = Union[int, float, str]


@dataclass(frozen=True, slots=True)
class FlightParams:
    """Flight envelope entered in the "Flight Parameters" panel."""

    altitude: float = 2500.0
    velocity: float = 55.0
    geography: float = 125.0
    contingency: float = 300.0

    def as_dict(self) -> Dict[str, float]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True, slots=True)
class TrajectorySettings:
    """Trajectory generation limits entered in the "Trajectory Settings" panel."""

    distance_fwd: float = 200.0
    distance_back: float = 150.0
    min_turning_radius: float = 50.0
    max_waypoint_distance: float = 500.0
    max_lateral_drift: float = 30.0

    def as_dict(self) -> Dict[str, float]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True, slots=True)
class CertSettings:
    """Certification inputs; ``density_suppression`` is derived."""

    sail: SailCategory = SailCategory.SAIL_2
    has_parachute: bool = False
    density_suppression: int = 0
    relaxation: float = 750.0

    def as_dict(self) -> Dict[str, object]:
        return {
            "sail": self.sail.value,
            "has_parachute": self.has_parachute,
            "density_suppression": self.density_suppression,
            "relaxation": self.relaxation,
        }


# Labels and units rendered next to each input.
FLIGHT_PARAM_LABELS: List[Tuple[str, str]] = [
    ("altitude", "Flight Altitude (ft)"),
    ("velocity", "Aircraft Velocity (m/s)"),
    ("geography", "Flight Geography (m)"),
    ("contingency", "Contingency Volume (m)"),
]

TRAJECTORY_LABELS: List[Tuple[str, str]] = [
    ("distance_fwd", "Distance Fwd Transition (m)"),
    ("distance_back", "Distance Back Transition (m)"),
    ("min_turning_radius", "Min Turning Radius (m)"),
    ("max_waypoint_distance", "Max Distance Between Waypoints (m)"),
    ("max_lateral_drift", "Max Lateral Drift (m)"),
]


def _coerce_numeric_changes(
    record: Union[FlightParams, TrajectorySettings], changes: Mapping[str, Number]
) -> Dict[str, float]:
    """Validate field names and coerce values to floats."""

    known = {item.name for item in fields(record)}
    coerced: Dict[str, float] = {}
    for key, value in changes.items():
        if key not in known:
            raise UnknownFieldError(type(record).__name__, key)
        try:
            coerced[key] = float(value)
        except (TypeError, ValueError) as error:
            raise ValueError(f"Field '{key}' expects a number, got {value!r}") from error
    return coerced


def update_flight_params(params: FlightParams, **changes: Number) -> FlightParams:
    """Return ``params`` with the given fields replaced."""

    updated = replace(params, **_coerce_numeric_changes(params, changes))
    LOGGER.debug("Flight parameters updated: %s", changes)
    return updated


def update_trajectory_settings(settings: TrajectorySettings, **changes: Number) -> TrajectorySettings:
    """Return ``settings`` with the given fields replaced."""

    updated = replace(settings, **_coerce_numeric_changes(settings, changes))
    LOGGER.debug("Trajectory settings updated: %s", changes)
    return updated


def _with_derived_density(cert: CertSettings, sail: SailCategory, has_parachute: bool) -> CertSettings:
    if not is_selectable(sail, has_parachute):
        raise CertificationConstraintError(
            f"{sail.value} is not available {'with' if has_parachute else 'without'} a parachute"
        )
    density = density_suppression(sail, has_parachute)
    LOGGER.debug(
        "Density suppression for %s (parachute=%s) -> %s", sail.value, has_parachute, density
    )
    return replace(cert, sail=sail, has_parachute=has_parachute, density_suppression=density)


def select_sail(cert: CertSettings, sail: Union[SailCategory, str]) -> CertSettings:
    """Change the SAIL category and recompute the density suppression."""

    try:
        category = SailCategory(sail)
    except ValueError as error:
        raise CertificationConstraintError(f"Unknown SAIL category: {sail}") from error
    return _with_derived_density(cert, category, cert.has_parachute)


def set_parachute(cert: CertSettings, has_parachute: bool) -> CertSettings:
    """Toggle the parachute and recompute the density suppression."""

    return _with_derived_density(cert, cert.sail, bool(has_parachute))


def set_relaxation(cert: CertSettings, relaxation: Number) -> CertSettings:
    """Change the controlled-area relaxation distance."""

    try:
        value = float(relaxation)
    except (TypeError, ValueError) as error:
        raise ValueError(f"Relaxation expects a number, got {relaxation!r}") from error
    return replace(cert, relaxation=value)
