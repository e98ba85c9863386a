"""Mini README: Tests for bounds computation and the map view synchronizer.

Uses the command-queue map widget so fitted viewports can be inspected
without a browser.
"""

from __future__ import annotations

import pytest

from atlas.mapping import (
    CommandQueueMapWidget,
    LatLngBounds,
    MapViewSynchronizer,
    bounds_from_points,
    route_bounds,
)
from atlas.routes import Route, RouteStore


def test_route_bounds_cover_both_endpoints() -> None:
    route = Route.create("Cross", (51.6, -0.2), (51.4, 0.1))
    bounds = route_bounds(route)

    assert bounds == LatLngBounds(south=51.4, west=-0.2, north=51.6, east=0.1)
    assert bounds.contains(route.source)
    assert bounds.contains(route.destination)
    assert bounds.as_leaflet() == [[51.4, -0.2], [51.6, 0.1]]


def test_bounds_need_points() -> None:
    with pytest.raises(ValueError):
        bounds_from_points([])


def test_selection_fits_route_with_padding() -> None:
    widget = CommandQueueMapWidget()
    store = RouteStore()
    store.add("Leg", (10.0, 20.0), (11.0, 19.0))
    sync = MapViewSynchronizer(widget)
    sync.on_routes_changed(store.routes)

    fitted = sync.on_selection_changed("Leg")

    assert fitted == LatLngBounds(south=10.0, west=19.0, north=11.0, east=20.0)
    assert widget.drain() == [
        {"action": "fit_bounds", "bounds": [[10.0, 19.0], [11.0, 20.0]], "padding": [50, 50]}
    ]


def test_empty_or_unresolved_selection_is_noop() -> None:
    widget = CommandQueueMapWidget()
    sync = MapViewSynchronizer(widget)
    sync.on_routes_changed({})

    assert sync.on_selection_changed("") is None
    assert sync.on_selection_changed("Ghost") is None
    assert widget.drain() == []


def test_route_set_change_refits_selected_route() -> None:
    widget = CommandQueueMapWidget()
    store = RouteStore()
    sync = MapViewSynchronizer(widget, padding=(20, 20))
    store.subscribe(sync.on_routes_changed)
    sync.on_selection_changed("Late")
    assert widget.drain() == []

    store.add("Late", (1.0, 1.0), (2.0, 2.0))

    commands = widget.drain()
    assert [command["action"] for command in commands] == ["fit_bounds"]
    assert commands[0]["padding"] == [20, 20]
