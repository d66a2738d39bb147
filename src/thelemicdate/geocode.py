"""Location lookup — Nominatim forward geocoding plus offline timezone polygons."""

import logging

import httpx
from timezonefinder import TimezoneFinder

from thelemicdate.config import Settings
from thelemicdate.errors import (
    GeocodingTransportError,
    LocationNotFoundError,
    TimezoneLookupError,
)
from thelemicdate.models import GeoResult

logger = logging.getLogger(__name__)

_tf: TimezoneFinder | None = None


def _finder() -> TimezoneFinder:
    """Process-wide TimezoneFinder. Polygon data is loaded on first use only."""
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
    return _tf


def _geocode_nominatim(
    location: str, settings: Settings, client: httpx.Client | None
) -> tuple[float, float, str] | None:
    """Nominatim (OpenStreetMap) geocoder. Returns (lat, lng, display_name) or None."""
    params = {"q": location, "format": "json", "limit": 1}
    headers = {"User-Agent": settings.user_agent}
    try:
        if client is None:
            resp = httpx.get(
                settings.geocoder_url,
                params=params,
                headers=headers,
                timeout=settings.http_timeout,
            )
        else:
            resp = client.get(
                settings.geocoder_url,
                params=params,
                headers=headers,
                timeout=settings.http_timeout,
            )
        resp.raise_for_status()
        results = resp.json()
    except httpx.HTTPError as exc:
        raise GeocodingTransportError(f"Geocoding request failed: {exc}") from exc
    except ValueError as exc:
        raise GeocodingTransportError(f"Geocoder returned malformed JSON: {exc}") from exc

    if not isinstance(results, list):
        raise GeocodingTransportError(f"Geocoder returned an unexpected payload: {results!r}")
    if not results:
        return None
    r = results[0]
    try:
        return float(r["lat"]), float(r["lon"]), r.get("display_name", location)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise GeocodingTransportError(f"Geocoder returned an unexpected match: {r!r}") from exc


def timezone_at(lat: float, lng: float) -> str:
    """Return the IANA timezone name for a coordinate pair.

    Raises:
        TimezoneLookupError: When no timezone polygon covers the point.
    """
    tz_str = _finder().timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise TimezoneLookupError(f"Timezone not found: lat={lat}, lng={lng}")
    return tz_str


def resolve_location(
    location: str,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> GeoResult:
    """Resolve a free-text location to coordinates and a timezone.

    One outbound request, first match wins, no retry.

    Args:
        location: Place name in any form Nominatim accepts ("Las Vegas, NV").
        settings: Geocoder URL, user agent, and timeout. Defaults if None.
        client: httpx client to send the request through. Module-level httpx.get if None.

    Returns:
        GeoResult with lat/lng, timezone id, and the provider's display name.

    Raises:
        LocationNotFoundError: When the provider has no match.
        GeocodingTransportError: On transport, status, or payload failure.
        TimezoneLookupError: When the coordinates fall outside every timezone polygon.
    """
    settings = settings or Settings()
    result = _geocode_nominatim(location, settings, client)
    if result is None:
        raise LocationNotFoundError(f"Location not found: {location}")
    lat, lng, display_name = result
    tz_str = timezone_at(lat, lng)
    logger.debug("geocoded %r -> %s (%.4f, %.4f) %s", location, display_name, lat, lng, tz_str)
    return GeoResult(latitude=lat, longitude=lng, timezone_id=tz_str, display_name=display_name)
