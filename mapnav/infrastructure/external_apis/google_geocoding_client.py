"""Google Geocoding API client: free-text address to coordinates."""
import logging

from mapnav.constants import STATUS_OK, STATUS_ZERO_RESULTS
from mapnav.domain.errors import (
    AddressNotFoundError,
    EmptyInputError,
    MalformedResponseError,
    ServiceError,
)
from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.infrastructure.external_apis.google_maps_client import GoogleMapsClient

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class GoogleGeocodingClient(GoogleMapsClient):
    """Client for the Google Geocoding API."""

    async def geocode(self, address: str) -> Coordinates:
        """Resolve ``address`` to the location of the first geocoding result.

        Args:
            address: Free-text address (e.g., "1600 Amphitheatre Pkwy, Mountain View")

        Returns:
            Coordinates of the best match

        Raises:
            EmptyInputError: address is empty or whitespace; no request is made
            AddressNotFoundError: the API found no match
            MalformedResponseError: the payload is missing the expected fields
            ServiceError: the API rejected the request
            TransportError, InvalidURLError, EmptyResponseError: see GoogleMapsClient
        """
        if not address or not address.strip():
            raise EmptyInputError("Address must not be empty.")

        address = address.strip()
        data = await self._get_json("geocode/json", {"address": address})

        status = data.get("status")
        if status == STATUS_ZERO_RESULTS:
            raise AddressNotFoundError(address)
        if status is not None and status != STATUS_OK:
            logger.error(f"Geocoding API error: {status} - {data.get('error_message')}")
            raise ServiceError(status, data.get("error_message"))

        results = data.get("results")
        if not isinstance(results, list):
            raise MalformedResponseError()
        if not results:
            raise AddressNotFoundError(address)

        try:
            location = results[0]["geometry"]["location"]
            lat, lng = location["lat"], location["lng"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError() from e

        if not (_is_number(lat) and _is_number(lng)):
            raise MalformedResponseError()

        try:
            coordinates = Coordinates.from_location(location)
        except ValueError as e:
            raise MalformedResponseError() from e

        logger.debug(f"Geocoded '{address}' to {coordinates.to_query()}")
        return coordinates
