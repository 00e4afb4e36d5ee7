"""Route image URLs using the Google Maps Static API."""
import logging
from typing import Iterable, Optional
from urllib.parse import quote

from mapnav.config import settings
from mapnav.domain.value_objects.marker import Marker, PolylineStyle
from mapnav.domain.value_objects.path import Path

logger = logging.getLogger(__name__)

STATIC_MAP_ENDPOINT = "staticmap"


def _marker_param(marker: Marker) -> str:
    # Static Maps labels are a single uppercase character
    label = marker.label[:1].upper()
    return f"markers=color:{marker.color.value}%7Clabel:{label}%7C{marker.position.to_query()}"


def build_static_map_url(
    path: Path,
    markers: Iterable[Marker] = (),
    style: Optional[PolylineStyle] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> str:
    """Generate a Google Maps Static API URL showing the route and its markers.

    The static API frames the image around the path and markers on its own,
    so no center/zoom is sent.
    """
    if width is None:
        width = settings.STATIC_MAP_WIDTH
    if height is None:
        height = settings.STATIC_MAP_HEIGHT
    if style is None:
        style = PolylineStyle(stroke_width=settings.ROUTE_STROKE_WIDTH)
    if api_key is None:
        api_key = settings.GOOGLE_MAPS_API_KEY
    if base_url is None:
        base_url = settings.GOOGLE_MAPS_BASE_URL

    parts = [f"size={width}x{height}"]
    parts.append(
        f"path=color:{style.stroke_color.value}%7Cweight:{int(style.stroke_width)}"
        f"%7Cenc:{quote(path.encode(), safe='')}"
    )
    parts.extend(_marker_param(marker) for marker in markers)

    if api_key:
        parts.append(f"key={api_key}")
    else:
        logger.warning("Building static map URL without GOOGLE_MAPS_API_KEY")

    return f"{base_url.rstrip('/')}/{STATIC_MAP_ENDPOINT}?{'&'.join(parts)}"

