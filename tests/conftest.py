"""
Pytest configuration and shared fixtures for map navigation tests.

This module provides test fixtures for:
- A fake Google Maps web service (httpx.MockTransport)
- Geocoding / directions clients wired to the fake
- FastAPI test client
- Canned API payloads
"""

import os
from typing import AsyncGenerator, Callable, Dict, Generator, List, Optional, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from mapnav.application.use_cases.show_route import ShowRouteUseCase
from mapnav.core.dependencies import get_show_route_use_case
from mapnav.infrastructure.external_apis.google_directions_client import GoogleDirectionsClient
from mapnav.infrastructure.external_apis.google_geocoding_client import GoogleGeocodingClient
from mapnav.main import app

TEST_API_KEY = "test-maps-key"
TEST_BASE_URL = "https://maps.test/maps/api"

# Canonical example from the Google polyline documentation:
# (38.5, -120.2), (40.7, -120.95), (43.252, -126.453)
SAMPLE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"

Reply = Union[dict, httpx.Response, Callable[[httpx.Request], httpx.Response]]


def geocode_payload(lat: float, lng: float) -> dict:
    return {
        "status": "OK",
        "results": [
            {
                "formatted_address": "Test Address",
                "geometry": {"location": {"lat": lat, "lng": lng}},
            }
        ],
    }


def directions_payload(points: str = SAMPLE_POLYLINE) -> dict:
    return {
        "status": "OK",
        "routes": [
            {
                "summary": "Test Route",
                "overview_polyline": {"points": points},
            }
        ],
    }


# ==============================================================================
# FAKE GOOGLE MAPS
# ==============================================================================

class FakeGoogleMaps:
    """In-process stand-in for the Geocoding and Directions endpoints."""

    def __init__(self):
        self.geocode_replies: Dict[str, Reply] = {}
        self.directions_reply: Optional[Reply] = directions_payload()
        self.requests: List[httpx.Request] = []

    def _reply(self, reply: Reply, request: httpx.Request) -> httpx.Response:
        if callable(reply):
            return reply(request)
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/geocode/json"):
            address = request.url.params.get("address")
            reply = self.geocode_replies.get(address, {"status": "ZERO_RESULTS", "results": []})
            return self._reply(reply, request)
        if request.url.path.endswith("/directions/json"):
            return self._reply(self.directions_reply, request)
        return httpx.Response(404)

    def requests_to(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(f"/{endpoint}/json")]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def fake_google() -> FakeGoogleMaps:
    """Fake Google Maps with two known addresses."""
    fake = FakeGoogleMaps()
    fake.geocode_replies["Sydney Opera House"] = geocode_payload(-33.8568, 151.2153)
    fake.geocode_replies["Harbour Bridge"] = geocode_payload(-33.8523, 151.2108)
    return fake


@pytest.fixture
async def http_client(fake_google) -> AsyncGenerator[httpx.AsyncClient, None]:
    """httpx client routed to the fake."""
    client = httpx.AsyncClient(transport=fake_google.transport)
    yield client
    await client.aclose()


@pytest.fixture
def geocoding_client(http_client) -> GoogleGeocodingClient:
    return GoogleGeocodingClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, client=http_client)


@pytest.fixture
def directions_client(http_client) -> GoogleDirectionsClient:
    return GoogleDirectionsClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, client=http_client)


@pytest.fixture
def show_route_use_case(geocoding_client, directions_client) -> ShowRouteUseCase:
    return ShowRouteUseCase(
        geocoder=geocoding_client,
        directions=directions_client,
        camera_padding=50,
        stroke_width=5.0,
    )


@pytest.fixture(scope="function")
def client(show_route_use_case) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by the fake Google Maps."""
    app.dependency_overrides[get_show_route_use_case] = lambda: show_route_use_case

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
