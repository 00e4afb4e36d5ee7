"""Navigation errors.

Every failure of the route action is terminal and ends up in front of the
user as a single alert, so each error carries a human-readable ``message``
plus a machine-readable ``kind``.
"""
from enum import Enum
from typing import Optional

from mapnav.constants import (
    MESSAGE_ENTER_BOTH_ADDRESSES,
    MESSAGE_INVALID_URL,
    MESSAGE_NO_DATA,
    MESSAGE_NO_ROUTE,
    MESSAGE_UNEXPECTED_JSON,
)


class ErrorKind(str, Enum):
    """Kinds of failure surfaced by the navigation flow."""
    EMPTY_INPUT = "empty_input"
    INVALID_URL = "invalid_url"
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_FOUND = "not_found"
    NO_ROUTE = "no_route"
    SERVICE_ERROR = "service_error"


class NavigationError(Exception):
    """Base class for all navigation failures."""
    kind: ErrorKind = ErrorKind.SERVICE_ERROR
    default_message: str = "Something went wrong."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(NavigationError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = MESSAGE_ENTER_BOTH_ADDRESSES


class InvalidURLError(NavigationError):
    kind = ErrorKind.INVALID_URL
    default_message = MESSAGE_INVALID_URL


class TransportError(NavigationError):
    """Network failure or non-2xx response; the httpx error is chained."""
    kind = ErrorKind.TRANSPORT
    default_message = "The request could not be completed."


class EmptyResponseError(NavigationError):
    kind = ErrorKind.EMPTY_RESPONSE
    default_message = MESSAGE_NO_DATA


class MalformedResponseError(NavigationError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = MESSAGE_UNEXPECTED_JSON


class AddressNotFoundError(NavigationError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Address '{address}' couldn't be found.")


class NoRouteError(NavigationError):
    kind = ErrorKind.NO_ROUTE
    default_message = MESSAGE_NO_ROUTE


class ServiceError(NavigationError):
    """Google answered with a status such as REQUEST_DENIED or OVER_QUERY_LIMIT."""
    kind = ErrorKind.SERVICE_ERROR

    def __init__(self, status: str, error_message: Optional[str] = None):
        self.status = status
        self.error_message = error_message
        detail = f"Google Maps API error: {status}"
        if error_message:
            detail = f"{detail} - {error_message}"
        super().__init__(detail)
