"""Geocoding Client — single GET against an address-to-coordinates provider.

Invariants:
    - Exactly one outbound request per geocode() call: no retry, no cache
    - Timeout is the httpx default
    - Transport failures and error statuses map to GeocodingError (HTTP 500)
    - A body without finite numeric lat and lng maps to EnrichmentError
    - The wrapper closes only the httpx client it created itself
"""

import logging
import math

import httpx

from contact_api.core.domain_types import Coordinates
from contact_api.core.errors import EnrichmentError, GeocodingError

logger = logging.getLogger(__name__)


def _as_coordinate(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        coordinate = float(value)
    except OverflowError:
        return None
    return coordinate if math.isfinite(coordinate) else None


def parse_coordinates(payload: object) -> Coordinates | None:
    """Extract lat/lng from a provider body. None when either is missing."""
    if not isinstance(payload, dict):
        return None
    lat = _as_coordinate(payload.get("lat"))
    lng = _as_coordinate(payload.get("lng"))
    if lat is None or lng is None:
        return None
    return Coordinates(lat=lat, lng=lng)


class GeocodingClient:
    """Wraps httpx.AsyncClient for the geocoding provider."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._headers = {"X-Api-Key": api_key} if api_key else {}
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def geocode(self, encoded_address: str) -> Coordinates:
        """Look up coordinates for an already percent-encoded address."""
        url = f"{self.base_url}?address={encoded_address}"
        try:
            response = await self._client.get(url, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                f"Geocoding provider returned {exc.response.status_code}",
                extra={"status_code": exc.response.status_code},
            )
            raise GeocodingError(str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Geocoding request failed: {exc!r}")
            raise GeocodingError(str(exc) or exc.__class__.__name__) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        coordinates = parse_coordinates(payload)
        if coordinates is None:
            logger.warning("Geocoding response carried no coordinates")
            raise EnrichmentError()
        return coordinates

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
