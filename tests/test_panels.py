"""Mini README: Tests for the immutable panel records and update functions."""

from __future__ import annotations

import dataclasses

import pytest

from atlas.certification import SailCategory
from atlas.errors import CertificationConstraintError, UnknownFieldError
from atlas.panels import (
    CertSettings,
    FlightParams,
    TrajectorySettings,
    select_sail,
    set_parachute,
    set_relaxation,
    update_flight_params,
    update_trajectory_settings,
)


def test_defaults_match_planner_form() -> None:
    assert FlightParams().as_dict() == {
        "altitude": 2500.0,
        "velocity": 55.0,
        "geography": 125.0,
        "contingency": 300.0,
    }
    assert CertSettings().as_dict() == {
        "sail": "SAIL 2",
        "has_parachute": False,
        "density_suppression": 0,
        "relaxation": 750.0,
    }
    assert TrajectorySettings().max_lateral_drift == 30.0


def test_update_returns_new_record() -> None:
    original = FlightParams()
    updated = update_flight_params(original, altitude="-10", velocity=0)

    assert original.altitude == 2500.0
    assert updated.altitude == -10.0
    assert updated.velocity == 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        updated.altitude = 1.0  # type: ignore[misc]


def test_update_rejects_unknown_field() -> None:
    with pytest.raises(UnknownFieldError):
        update_trajectory_settings(TrajectorySettings(), wingspan=12)


def test_update_rejects_non_numeric_value() -> None:
    with pytest.raises(ValueError):
        update_trajectory_settings(TrajectorySettings(), distance_fwd="far")


def test_sail_and_parachute_recompute_density() -> None:
    cert = select_sail(CertSettings(), "SAIL 4")
    assert cert.density_suppression == 50

    cert = set_parachute(select_sail(cert, "SAIL 3"), True)
    assert cert.sail is SailCategory.SAIL_3
    assert cert.density_suppression == 50


def test_parachute_blocked_while_sail_six_selected() -> None:
    cert = select_sail(CertSettings(), SailCategory.SAIL_6)
    assert cert.density_suppression == 5000

    with pytest.raises(CertificationConstraintError):
        set_parachute(cert, True)


def test_sail_six_blocked_with_parachute() -> None:
    cert = set_parachute(CertSettings(), True)
    with pytest.raises(CertificationConstraintError):
        select_sail(cert, "SAIL 6")


def test_relaxation_does_not_touch_density() -> None:
    cert = set_relaxation(select_sail(CertSettings(), "SAIL 3"), "900")
    assert cert.relaxation == 900.0
    assert cert.density_suppression == 5
