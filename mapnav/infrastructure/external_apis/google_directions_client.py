"""Google Directions API client: two coordinates to a decoded route path."""
import logging
from typing import Optional

import httpx

from mapnav.config import settings
from mapnav.constants import STATUS_NOT_FOUND, STATUS_OK, STATUS_ZERO_RESULTS, TRAVEL_MODES
from mapnav.domain.errors import MalformedResponseError, NoRouteError, ServiceError
from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.path import Path
from mapnav.infrastructure.external_apis.google_maps_client import GoogleMapsClient

logger = logging.getLogger(__name__)


class GoogleDirectionsClient(GoogleMapsClient):
    """Client for the Google Directions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        mode: Optional[str] = None,
    ):
        super().__init__(api_key=api_key, base_url=base_url, client=client)
        self.mode = mode or settings.DIRECTIONS_TRAVEL_MODE
        if self.mode not in TRAVEL_MODES:
            raise ValueError(f"Unsupported travel mode '{self.mode}', expected one of {TRAVEL_MODES}")

    async def get_route(self, origin: Coordinates, destination: Coordinates) -> Path:
        """Fetch the first route's overview polyline and decode it.

        Returns:
            Path with at least one point

        Raises:
            NoRouteError: the API returned no routes
            MalformedResponseError: missing ``routes``/polyline or undecodable polyline
            ServiceError: the API rejected the request
            TransportError, InvalidURLError, EmptyResponseError: see GoogleMapsClient
        """
        data = await self._get_json(
            "directions/json",
            {
                "origin": origin.to_query(),
                "destination": destination.to_query(),
                "mode": self.mode,
            },
        )

        status = data.get("status")
        if status in (STATUS_ZERO_RESULTS, STATUS_NOT_FOUND):
            raise NoRouteError()
        if status is not None and status != STATUS_OK:
            logger.error(f"Directions API error: {status} - {data.get('error_message')}")
            raise ServiceError(status, data.get("error_message"))

        routes = data.get("routes")
        if not isinstance(routes, list):
            raise MalformedResponseError()
        if not routes:
            raise NoRouteError()

        try:
            points = routes[0]["overview_polyline"]["points"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError() from e
        if not isinstance(points, str):
            raise MalformedResponseError()

        try:
            path = Path.from_encoded(points)
        except ValueError as e:
            logger.error(f"Could not decode overview polyline: {e}")
            raise MalformedResponseError() from e

        if path.is_empty():
            raise MalformedResponseError()

        logger.info(
            f"Route {origin.to_query()} -> {destination.to_query()} ({self.mode}): {len(path)} points"
        )
        return path
