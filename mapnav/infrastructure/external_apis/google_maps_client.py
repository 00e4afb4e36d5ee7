"""Base client for the Google Maps web service (JSON) APIs."""
import logging
from typing import Any, Dict, Optional

import httpx

from mapnav.config import settings
from mapnav.domain.errors import (
    EmptyResponseError,
    InvalidURLError,
    MalformedResponseError,
    TransportError,
)
from mapnav.infrastructure.external_apis.http_client import get_shared_client

logger = logging.getLogger(__name__)


class GoogleMapsClient:
    """Shared request/parse plumbing for Google Maps JSON endpoints.

    Subclasses call ``_get_json`` and interpret the payload. Every failure is
    raised as a ``NavigationError`` subclass; nothing is retried.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key or settings.GOOGLE_MAPS_API_KEY
        self.base_url = (base_url or settings.GOOGLE_MAPS_BASE_URL).rstrip("/")
        self._client = client
        if not self.api_key:
            logger.warning("GOOGLE_MAPS_API_KEY not set")

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_shared_client()

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET ``{base_url}/{endpoint}`` and return the decoded JSON object.

        Raises:
            InvalidURLError: the request URL could not be built
            TransportError: network failure or non-2xx status
            EmptyResponseError: the response had no body
            MalformedResponseError: the body is not a JSON object
        """
        url = f"{self.base_url}/{endpoint}"
        query = dict(params)
        if self.api_key:
            query["key"] = self.api_key

        try:
            response = await self.client.get(url, params=query)
            response.raise_for_status()
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            logger.error(f"Invalid URL for {endpoint}: {e}")
            raise InvalidURLError() from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Google Maps {endpoint} returned HTTP {e.response.status_code}")
            raise TransportError(
                f"Request failed with status {e.response.status_code}."
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling Google Maps {endpoint}: {e!r}")
            raise TransportError(str(e) or None) from e

        if not response.content:
            logger.error(f"Google Maps {endpoint} returned an empty body")
            raise EmptyResponseError()

        try:
            data = response.json()
        except ValueError as e:
            preview = response.text[:settings.RESPONSE_TEXT_PREVIEW_LENGTH]
            logger.error(f"Invalid JSON from Google Maps {endpoint}: {preview}")
            raise MalformedResponseError() from e

        if not isinstance(data, dict):
            raise MalformedResponseError()

        return data
