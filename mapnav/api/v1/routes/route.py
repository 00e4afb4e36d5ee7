"""Route API - thin layer delegating to the show-route use case.
Only handles HTTP concerns: query parsing and turning errors into an alert."""
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from mapnav.api.v1.schemas.route_schemas import AlertSchema, RouteResponseSchema
from mapnav.application.use_cases.show_route import ShowRouteUseCase
from mapnav.constants import ALERT_TITLE_ERROR
from mapnav.core.dependencies import get_map_surface, get_show_route_use_case
from mapnav.domain.errors import ErrorKind, NavigationError
from mapnav.infrastructure.rendering.in_memory_map_surface import InMemoryMapSurface

logger = logging.getLogger(__name__)

router = APIRouter(tags=["route"])

ERROR_STATUS_CODES = {
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NO_ROUTE: 404,
}
DEFAULT_ERROR_STATUS = 502


def alert_response(error: NavigationError) -> JSONResponse:
    """Turn a navigation error into the single modal message the client shows."""
    alert = AlertSchema(title=ALERT_TITLE_ERROR, message=error.message, kind=error.kind.value)
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(error.kind, DEFAULT_ERROR_STATUS),
        content=alert.model_dump(),
    )


@router.get(
    "/route",
    response_model=RouteResponseSchema,
    responses={400: {"model": AlertSchema}, 404: {"model": AlertSchema}, 502: {"model": AlertSchema}},
)
async def show_route(
    start: str = Query("", description="Starting address"),
    destination: str = Query("", description="Destination address"),
    use_case: ShowRouteUseCase = Depends(get_show_route_use_case),
    surface: InMemoryMapSurface = Depends(get_map_surface),
):
    """
    Geocode both addresses, fetch the walking route and render it.

    Returns the route overlay, the start/destination markers and the camera
    frame, or a single alert message if anything fails.
    """
    try:
        route = await use_case.execute(start, destination, surface)
    except NavigationError as e:
        logger.info(f"Route request failed ({e.kind.value}): {e.message}")
        return alert_response(e)

    snapshot = surface.snapshot()
    polyline = snapshot["polylines"][0]

    return RouteResponseSchema(
        start_address=route.start_address,
        destination_address=route.destination_address,
        start=route.start.to_dict(),
        destination=route.destination.to_dict(),
        polyline={
            "points": polyline["points"],
            "encoded": route.path.encode(),
            "stroke_color": polyline["stroke_color"],
            "stroke_width": polyline["stroke_width"],
        },
        markers=snapshot["markers"],
        camera=snapshot["camera"],
        static_map_url=route.static_map_url,
    )
