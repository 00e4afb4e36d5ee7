"""Tests for the Google Directions client."""
import httpx
import pytest

from conftest import TEST_API_KEY, TEST_BASE_URL, directions_payload
from mapnav.domain.errors import (
    EmptyResponseError,
    ErrorKind,
    MalformedResponseError,
    NoRouteError,
    ServiceError,
    TransportError,
)
from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.infrastructure.external_apis.google_directions_client import GoogleDirectionsClient

ORIGIN = Coordinates(latitude=38.5, longitude=-120.2)
DESTINATION = Coordinates(latitude=43.252, longitude=-126.453)


async def test_decodes_overview_polyline(directions_client):
    path = await directions_client.get_route(ORIGIN, DESTINATION)

    assert len(path) == 3
    assert path[0] == ORIGIN
    assert path[-1] == DESTINATION


async def test_requests_walking_mode(directions_client, fake_google):
    await directions_client.get_route(ORIGIN, DESTINATION)

    params = fake_google.requests_to("directions")[0].url.params
    assert params["origin"] == "38.5000000,-120.2000000"
    assert params["destination"] == "43.2520000,-126.4530000"
    assert params["mode"] == "walking"
    assert params["key"] == TEST_API_KEY


async def test_travel_mode_is_configurable(http_client, fake_google):
    client = GoogleDirectionsClient(
        api_key=TEST_API_KEY, base_url=TEST_BASE_URL, client=http_client, mode="bicycling"
    )

    await client.get_route(ORIGIN, DESTINATION)

    assert fake_google.requests_to("directions")[0].url.params["mode"] == "bicycling"


def test_unknown_travel_mode_rejected():
    with pytest.raises(ValueError):
        GoogleDirectionsClient(api_key=TEST_API_KEY, mode="teleport")


async def test_empty_routes_is_no_route(directions_client, fake_google):
    fake_google.directions_reply = {"status": "OK", "routes": []}

    with pytest.raises(NoRouteError) as exc_info:
        await directions_client.get_route(ORIGIN, DESTINATION)

    assert exc_info.value.kind == ErrorKind.NO_ROUTE


async def test_zero_results_status_is_no_route(directions_client, fake_google):
    fake_google.directions_reply = {"status": "ZERO_RESULTS", "routes": []}

    with pytest.raises(NoRouteError):
        await directions_client.get_route(ORIGIN, DESTINATION)


@pytest.mark.parametrize("payload", [
    {"status": "OK"},
    {"status": "OK", "routes": [{}]},
    {"status": "OK", "routes": [{"overview_polyline": {}}]},
    {"status": "OK", "routes": [{"overview_polyline": {"points": 42}}]},
    {"status": "OK", "routes": "none"},
    directions_payload(points="_p~iF~ps|"),
    directions_payload(points=""),
    directions_payload(points="~" * 250 + "?" + "??"),
])
async def test_unusable_payload_is_malformed(directions_client, fake_google, payload):
    fake_google.directions_reply = payload

    with pytest.raises(MalformedResponseError) as exc_info:
        await directions_client.get_route(ORIGIN, DESTINATION)

    assert exc_info.value.kind == ErrorKind.MALFORMED_RESPONSE


async def test_json_array_body_is_malformed(directions_client, fake_google):
    fake_google.directions_reply = httpx.Response(200, json=[1, 2, 3])

    with pytest.raises(MalformedResponseError):
        await directions_client.get_route(ORIGIN, DESTINATION)


async def test_empty_body(directions_client, fake_google):
    fake_google.directions_reply = httpx.Response(200, content=b"")

    with pytest.raises(EmptyResponseError):
        await directions_client.get_route(ORIGIN, DESTINATION)


async def test_over_query_limit_is_service_error(directions_client, fake_google):
    fake_google.directions_reply = {"status": "OVER_QUERY_LIMIT", "routes": []}

    with pytest.raises(ServiceError) as exc_info:
        await directions_client.get_route(ORIGIN, DESTINATION)

    assert exc_info.value.kind == ErrorKind.SERVICE_ERROR
    assert exc_info.value.message == "Google Maps API error: OVER_QUERY_LIMIT"


async def test_timeout_is_transport(directions_client, fake_google):
    def slow(request):
        raise httpx.ReadTimeout("Read timed out", request=request)

    fake_google.directions_reply = slow

    with pytest.raises(TransportError) as exc_info:
        await directions_client.get_route(ORIGIN, DESTINATION)

    assert exc_info.value.kind == ErrorKind.TRANSPORT
