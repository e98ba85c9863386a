"""Mini README: Tests for the planning session glue.

Exercises the operator flows end to end against the command-queue map
widget: adding and selecting routes, deleting the selection, requesting
population analysis and completing a drawing.
"""

from __future__ import annotations

import pytest

from atlas.errors import CertificationConstraintError, RouteSelectionRequired, UnknownRouteError
from atlas.mapping import DrawEvent, MapLayer
from atlas.session import PlanningSession


def _fits(session: PlanningSession):
    return [command for command in session.map_widget.drain() if command["action"] == "fit_bounds"]


def test_add_route_selects_and_fits_bounds() -> None:
    session = PlanningSession()
    session.add_route("Thames", (51.5, -0.2), (51.45, 0.05))

    assert session.selected_route == "Thames"
    fits = _fits(session)
    assert fits[-1]["bounds"] == [[51.45, -0.2], [51.5, 0.05]]
    assert fits[-1]["padding"] == [50, 50]


def test_reselecting_existing_route_fits_again() -> None:
    session = PlanningSession()
    session.add_route("One", (0.0, 0.0), (1.0, 1.0))
    session.add_route("Two", (5.0, 5.0), (6.0, 7.0))
    session.map_widget.drain()

    session.select_route("One")

    assert _fits(session)[-1]["bounds"] == [[0.0, 0.0], [1.0, 1.0]]


def test_selecting_unknown_route_raises() -> None:
    session = PlanningSession()
    with pytest.raises(UnknownRouteError):
        session.select_route("Nowhere")
    assert session.selected_route == ""


def test_delete_selected_route_clears_selection() -> None:
    session = PlanningSession()
    session.add_route("Temp", (0.0, 0.0), (1.0, 1.0))
    session.map_widget.drain()

    assert session.delete_selected_route() is True
    assert session.selected_route == ""
    assert "Temp" not in session.routes
    assert _fits(session) == []


def test_delete_without_selection_is_noop() -> None:
    session = PlanningSession()
    assert session.delete_selected_route() is False


def test_analyze_without_route_notifies_and_keeps_flag() -> None:
    session = PlanningSession()

    with pytest.raises(RouteSelectionRequired):
        session.analyze_populations()

    assert session.is_analyzing is False
    assert session.map_widget.drain() == [
        {"action": "notify", "message": "Please select a route first"}
    ]


def test_rectangle_draw_clears_analyzing_flag() -> None:
    session = PlanningSession()
    session.add_route("Leg", (0.0, 0.0), (1.0, 1.0))
    session.analyze_populations()
    assert session.is_analyzing is True

    area = session.complete_drawing(
        DrawEvent(layer_type="rectangle", latlngs=[[[0.1, 0.1], [0.2, 0.1], [0.2, 0.2], [0.1, 0.2]]])
    )

    assert session.is_analyzing is False
    assert area.route_name == "Leg"
    assert session.snapshot()["last_area"]["layer_type"] == "rectangle"


def test_deleting_route_while_drawing_hides_tools() -> None:
    session = PlanningSession()
    session.add_route("Leg", (0.0, 0.0), (1.0, 1.0))
    session.analyze_populations()

    session.delete_selected_route()

    assert session.is_analyzing is False


def test_certification_flow_and_available_options() -> None:
    session = PlanningSession()
    session.select_sail("SAIL 6")
    assert "SAIL 6" in session.snapshot()["available_sails"]

    with pytest.raises(CertificationConstraintError):
        session.set_parachute(True)
    assert session.cert_settings.has_parachute is False

    session.select_sail("SAIL 3")
    session.set_parachute(True)
    snapshot = session.snapshot()
    assert snapshot["cert_settings"]["density_suppression"] == 50
    assert "SAIL 6" not in snapshot["available_sails"]


def test_snapshot_reflects_panels_and_layer() -> None:
    session = PlanningSession()
    session.update_flight_params(altitude=3000)
    session.update_trajectory_settings(min_turning_radius=75)
    session.set_map_layer("Hybrid")

    snapshot = session.snapshot()
    assert snapshot["flight_params"]["altitude"] == 3000.0
    assert snapshot["trajectory_settings"]["min_turning_radius"] == 75.0
    assert snapshot["map_layer"] == MapLayer.HYBRID.value
    assert snapshot["map_view"] == {"center": [51.505, -0.09], "zoom": 13}
    assert {layer["id"] for layer in snapshot["tile_layers"]} == {"satellite", "streets", "hybrid"}
