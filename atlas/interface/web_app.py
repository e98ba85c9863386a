"""Mini README: FastAPI-powered planner interface for Atlas.

Structure:
    * create_application - application factory wiring routes and templates.
    * Planning session - one in-memory session per application instance.

The page hosts a Leaflet map plus the Leaflet.Draw plugin. Every form
control posts to a JSON endpoint; responses carry the new session state and
the map commands queued while handling the request, which the page replays
on the map (bounds fitting, drawing toolbar, operator notices).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..certification import SailCategory
from ..configuration import AtlasSettings, get_settings
from ..errors import (
    CertificationConstraintError,
    RouteSelectionRequired,
    RouteValidationError,
    UnknownFieldError,
    UnknownMapLayerError,
    UnknownRouteError,
)
from ..logging_utils import configure_root_logger, get_logger
from ..mapping import CommandQueueMapWidget, DrawEvent, MapLayer, MapView
from ..panels import FLIGHT_PARAM_LABELS, TRAJECTORY_LABELS
from ..session import PlanningSession

LOGGER = get_logger(__name__)


def build_session(settings: AtlasSettings) -> PlanningSession:
    """Create a planning session configured from ``settings``."""

    return PlanningSession(
        map_widget=CommandQueueMapWidget(),
        map_view=MapView(center=settings.map_center, zoom=settings.map_zoom),
        map_layer=MapLayer.from_str(settings.default_map_layer),
        padding=settings.padding,
    )


def create_application(
    session: Optional[PlanningSession] = None,
    settings: Optional[AtlasSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Atlas Route Planner", version=__version__)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    session = session or build_session(settings)
    app.state.session = session
    LOGGER.info(
        "Atlas planner ready (environment=%s, basemap=%s)",
        settings.environment,
        session.map_layer.value,
    )
    map_widget = session.map_widget

    def _drain() -> list:
        if isinstance(map_widget, CommandQueueMapWidget):
            return map_widget.drain()
        return []

    def state_response(status_code: int = 200, **extra: Any) -> JSONResponse:
        payload: Dict[str, Any] = {"state": session.snapshot(), "commands": _drain()}
        payload.update(extra)
        return JSONResponse(payload, status_code=status_code)

    @app.get("/", response_class=HTMLResponse)
    async def planner(request: Request) -> HTMLResponse:
        """Render the planner page with the sidebar panels and map."""

        LOGGER.debug("Rendering planner with %s routes", len(session.store))
        return templates.TemplateResponse(
            request,
            "planner.html",
            {
                "version": __version__,
                "state": session.snapshot(),
                "flight_labels": FLIGHT_PARAM_LABELS,
                "trajectory_labels": TRAJECTORY_LABELS,
                "sail_categories": [category.value for category in SailCategory],
            },
        )

    @app.get("/api/state")
    async def state() -> JSONResponse:
        """Return the session state and drain pending map commands."""

        return state_response()

    @app.post("/api/routes")
    async def add_route(
        name: str = Form(...),
        source_lat: float = Form(...),
        source_lon: float = Form(...),
        destination_lat: float = Form(...),
        destination_lon: float = Form(...),
    ) -> JSONResponse:
        """Create a route and select it."""

        try:
            route = session.add_route(
                name, (source_lat, source_lon), (destination_lat, destination_lon)
            )
        except RouteValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Route '%s' added via interface", route.name)
        return state_response()

    @app.delete("/api/routes/selected")
    async def delete_selected_route() -> JSONResponse:
        """Delete the selected route and clear the selection."""

        removed = session.delete_selected_route()
        return state_response(removed=removed)

    @app.post("/api/selection")
    async def select_route(route_name: str = Form("")) -> JSONResponse:
        """Change the selected route; an empty name clears it."""

        try:
            session.select_route(route_name)
        except UnknownRouteError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return state_response()

    @app.post("/api/flight-params")
    async def flight_params(field: str = Form(...), value: float = Form(...)) -> JSONResponse:
        try:
            session.update_flight_params(**{field: value})
        except UnknownFieldError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response()

    @app.post("/api/trajectory")
    async def trajectory(field: str = Form(...), value: float = Form(...)) -> JSONResponse:
        try:
            session.update_trajectory_settings(**{field: value})
        except UnknownFieldError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response()

    @app.post("/api/certification/sail")
    async def certification_sail(sail: str = Form(...)) -> JSONResponse:
        try:
            session.select_sail(sail)
        except CertificationConstraintError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response()

    @app.post("/api/certification/parachute")
    async def certification_parachute(has_parachute: bool = Form(...)) -> JSONResponse:
        try:
            session.set_parachute(has_parachute)
        except CertificationConstraintError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response()

    @app.post("/api/certification/relaxation")
    async def certification_relaxation(relaxation: float = Form(...)) -> JSONResponse:
        session.set_relaxation(relaxation)
        return state_response()

    @app.post("/api/map-layer")
    async def map_layer(layer: str = Form(...)) -> JSONResponse:
        try:
            session.set_map_layer(layer)
        except UnknownMapLayerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response()

    @app.post("/api/analyze-populations")
    async def analyze_populations() -> JSONResponse:
        """Switch on the drawing tools for the selected route."""

        try:
            session.analyze_populations()
        except RouteSelectionRequired as error:
            return state_response(status_code=409, detail=error.notice)
        return state_response()

    @app.post("/api/draw-complete")
    async def draw_complete(payload: Dict[str, Any] = Body(...)) -> JSONResponse:
        """Receive a finished polygon or rectangle from Leaflet.Draw."""

        try:
            area = session.complete_drawing(DrawEvent.from_payload(payload))
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return state_response(area=area.as_dict() if area else None)

    @app.post("/api/draw-cancel")
    async def draw_cancel() -> JSONResponse:
        session.cancel_drawing()
        return state_response()

    return app
