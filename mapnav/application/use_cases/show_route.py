"""Use case: Show the walking route between two addresses.

Geocodes both addresses concurrently, joins on both results, then fetches
directions and draws the route with start/destination markers.
"""
import asyncio
import logging
from typing import List, Optional, Tuple

from mapnav.application.dto.route_dto import RouteDTO
from mapnav.application.ports.map_surface import DirectionsProvider, Geocoder, MapSurface
from mapnav.config import settings
from mapnav.constants import DESTINATION_MARKER_LABEL, START_MARKER_LABEL
from mapnav.domain.errors import EmptyInputError
from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.marker import CameraUpdate, Marker, MarkerColor, PolylineStyle
from mapnav.domain.value_objects.path import Path
from mapnav.infrastructure.rendering.static_map import build_static_map_url

logger = logging.getLogger(__name__)


class ShowRouteUseCase:
    """Use case to geocode, route and render a start/destination pair.

    Depends on the Geocoder / DirectionsProvider / MapSurface ports only.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        directions: DirectionsProvider,
        camera_padding: Optional[int] = None,
        stroke_width: Optional[float] = None,
        include_static_map: bool = True,
    ):
        self._geocoder = geocoder
        self._directions = directions
        self._camera_padding = settings.CAMERA_PADDING if camera_padding is None else camera_padding
        self._stroke_width = settings.ROUTE_STROKE_WIDTH if stroke_width is None else stroke_width
        self._include_static_map = include_static_map

    async def execute(
        self,
        start_address: Optional[str],
        destination_address: Optional[str],
        surface: MapSurface,
    ) -> RouteDTO:
        """Execute use case.

        Args:
            start_address: Free-text starting address
            destination_address: Free-text destination address
            surface: Map surface to draw on

        Returns:
            RouteDTO describing what was drawn

        Raises:
            NavigationError: the first failure of the action; nothing is drawn
        """
        if not start_address or not start_address.strip() \
                or not destination_address or not destination_address.strip():
            raise EmptyInputError()

        start_address = start_address.strip()
        destination_address = destination_address.strip()

        start, destination = await self._geocode_both(start_address, destination_address)
        path = await self._directions.get_route(start, destination)

        markers, camera = self._render(surface, path, start, destination)

        static_map_url = None
        if self._include_static_map:
            static_map_url = build_static_map_url(
                path,
                markers,
                style=PolylineStyle(stroke_width=self._stroke_width),
            )

        return RouteDTO(
            start_address=start_address,
            destination_address=destination_address,
            start=start,
            destination=destination,
            path=path,
            markers=markers,
            camera=camera,
            static_map_url=static_map_url,
        )

    async def _geocode_both(
        self,
        start_address: str,
        destination_address: str,
    ) -> Tuple[Coordinates, Coordinates]:
        """Geocode both addresses concurrently and wait for both to finish.

        If either fails, the error that completed first is raised once both
        lookups are done.
        """
        start_task = asyncio.ensure_future(self._geocoder.geocode(start_address))
        destination_task = asyncio.ensure_future(self._geocoder.geocode(destination_address))

        first_error: Optional[Exception] = None
        for finished in asyncio.as_completed([start_task, destination_task]):
            try:
                await finished
            except Exception as e:
                logger.warning(f"Geocoding failed: {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

        return start_task.result(), destination_task.result()

    def _render(
        self,
        surface: MapSurface,
        path: Path,
        start: Coordinates,
        destination: Coordinates,
    ) -> Tuple[List[Marker], CameraUpdate]:
        surface.clear()
        surface.add_polyline(path, PolylineStyle(stroke_color=MarkerColor.BLUE, stroke_width=self._stroke_width))

        markers = [
            Marker(position=start, label=START_MARKER_LABEL, color=MarkerColor.GREEN),
            Marker(position=destination, label=DESTINATION_MARKER_LABEL, color=MarkerColor.RED),
        ]
        for marker in markers:
            surface.add_marker(marker)

        camera = CameraUpdate(bounds=path.bounds(), padding=self._camera_padding)
        surface.move_camera(camera)

        logger.info(f"Rendered route with {len(path)} points and {len(markers)} markers")
        return markers, camera
