"""Dependency injection for FastAPI routes.
Routes depend on the use case; the use case depends on port abstractions."""
from functools import lru_cache

from mapnav.application.use_cases.show_route import ShowRouteUseCase
from mapnav.infrastructure.external_apis.google_directions_client import GoogleDirectionsClient
from mapnav.infrastructure.external_apis.google_geocoding_client import GoogleGeocodingClient
from mapnav.infrastructure.rendering.in_memory_map_surface import InMemoryMapSurface


@lru_cache()
def get_geocoding_client() -> GoogleGeocodingClient:
    """Get geocoding client (uses the shared HTTP connection pool)."""
    return GoogleGeocodingClient()


@lru_cache()
def get_directions_client() -> GoogleDirectionsClient:
    """Get directions client (mode from DIRECTIONS_TRAVEL_MODE)."""
    return GoogleDirectionsClient()


@lru_cache()
def get_show_route_use_case() -> ShowRouteUseCase:
    """Get show-route use case."""
    return ShowRouteUseCase(
        geocoder=get_geocoding_client(),
        directions=get_directions_client(),
    )


def get_map_surface() -> InMemoryMapSurface:
    """Fresh surface per request; overlays are request-scoped."""
    return InMemoryMapSurface()
