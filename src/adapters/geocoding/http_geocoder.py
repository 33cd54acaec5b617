from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import httpx

from src.adapters.settings import GeocodingConfig
from src.app.ports.output import IGeocoder
from src.domain.models import (
    BoundingBox,
    GeocodeResult,
    GeoPoint,
    QueryErrorKind,
    is_within_service_area,
)

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found for the given address"
OUT_OF_AREA_MESSAGE = "The requested address is not within Milan city limits"


def _failed(message: str) -> GeocodeResult:
    return GeocodeResult.failure(QueryErrorKind.GEOCODING_FAILED, message)


def _first_position(body: Any) -> tuple[float, float] | None:
    """Extract (lat, lng) of the first candidate, or None when malformed."""

    if not isinstance(body, dict):
        return None
    items = body.get("items")
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    position = items[0].get("position")
    if not isinstance(position, dict):
        return None

    lat = position.get("lat")
    lng = position.get("lng")
    for v in (lat, lng):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if not math.isfinite(v):
            return None
    return float(lat), float(lng)


@dataclass(slots=True)
class HttpGeocoder(IGeocoder):
    """Resolves addresses with a single GET to a HERE-style geocode endpoint.

    Request: GET <url>?q=<address>&apiKey=<key>
    Response: {"items": [{"position": {"lat": ..., "lng": ...}}, ...]}

    Only the first candidate is used. No retries and no caching; the timeout is
    whatever httpx applies by default. Without explicit `bounds` the Milan
    service area applies.
    """

    config: GeocodingConfig
    bounds: BoundingBox | None = None
    transport: httpx.BaseTransport | None = None

    def _in_service_area(self, point: GeoPoint) -> bool:
        if self.bounds is None:
            return is_within_service_area(point.lat, point.lon)
        return self.bounds.contains(point.lat, point.lon)

    def geocode(self, address: str) -> GeocodeResult:
        address = (address or "").strip()
        if not address:
            return GeocodeResult.failure(
                QueryErrorKind.INVALID_INPUT, "Address parameter is required"
            )

        params = {"q": address, "apiKey": self.config.api_key}
        try:
            with httpx.Client(transport=self.transport) as client:
                resp = client.get(self.config.url, params=params)
        except httpx.HTTPError as e:
            logger.error("Error geocoding address: %s", address, exc_info=True)
            return _failed(f"Failed to geocode address: {e}")

        if not resp.is_success:
            logger.error(
                "Geocoding service answered %d for address: %s",
                resp.status_code,
                address,
            )
            return _failed(f"HTTP error code: {resp.status_code}")

        try:
            body = resp.json()
        except ValueError:
            return _failed(NO_RESULTS_MESSAGE)

        if not isinstance(body, dict) or not body.get("items"):
            return _failed(NO_RESULTS_MESSAGE)

        coords = _first_position(body)
        if coords is None:
            return _failed("Malformed geocoding result: missing position")
        lat, lng = coords

        try:
            point = GeoPoint(lat=lat, lon=lng)
        except ValueError as e:
            return _failed(f"Malformed geocoding result: {e}")

        if not self._in_service_area(point):
            return GeocodeResult.failure(
                QueryErrorKind.OUT_OF_SERVICE_AREA, OUT_OF_AREA_MESSAGE
            )

        logger.debug("Address %r geocoded at %s", address, point)
        return GeocodeResult.success(point)
