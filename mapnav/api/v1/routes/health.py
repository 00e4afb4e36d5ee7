"""Health check endpoints."""
from fastapi import APIRouter
from typing import Dict

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running. The Google APIs are
    not probed, since every probe would be a billed request.
    """
    return {"status": "ok"}
