"""Shared HTTP client with connection pooling for the Google Maps APIs."""
import httpx
import logging
from typing import Optional
from mapnav.config import settings

logger = logging.getLogger(__name__)

# Global shared client for connection pooling
_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_client() -> httpx.AsyncClient:
    """Get or create shared HTTP client with connection pooling.

    Both geocode requests and the directions request go to the same host,
    so reusing keep-alive connections saves a TLS handshake per call.

    Connection pool settings from environment:
    - Max connections: HTTP_MAX_CONNECTIONS (default: 100)
    - Max keepalive: HTTP_MAX_KEEPALIVE (default: 50)
    - Timeout: API_TIMEOUT_SECONDS (default: 30)
    """
    global _shared_client

    if _shared_client is None or _shared_client.is_closed:
        limits = httpx.Limits(
            max_connections=settings.HTTP_MAX_CONNECTIONS,
            max_keepalive_connections=settings.HTTP_MAX_KEEPALIVE
        )

        _shared_client = httpx.AsyncClient(
            timeout=settings.API_TIMEOUT_SECONDS,
            limits=limits,
        )

        logger.info(
            f"HTTP client initialized: max_conn={settings.HTTP_MAX_CONNECTIONS}, "
            f"keepalive={settings.HTTP_MAX_KEEPALIVE}, timeout={settings.API_TIMEOUT_SECONDS}s"
        )

    return _shared_client


async def close_shared_client():
    """Close the shared HTTP client. Call this when shutting down."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("HTTP client closed")
