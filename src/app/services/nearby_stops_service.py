from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IGeocoder
from src.domain.models import (
    MAX_DISTANCE_M,
    MAX_RESULTS,
    GeoPoint,
    NearbyStopsResult,
    QueryError,
    QueryErrorKind,
    Stop,
    StopCatalogue,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NearbyStopsService:
    """Use case: which stops are near this address?

    Geocoder errors come back unchanged in the result; this layer adds none
    beyond rejecting a blank address before any network call.
    """

    geocoder: IGeocoder
    catalogue: StopCatalogue
    max_distance_m: int = MAX_DISTANCE_M
    max_results: int = MAX_RESULTS

    def stops_near_address(self, address: str | None) -> NearbyStopsResult:
        address = (address or "").strip()
        if not address:
            return NearbyStopsResult.failure(
                QueryError(
                    kind=QueryErrorKind.INVALID_INPUT,
                    message="Address parameter is required",
                )
            )

        geocoded = self.geocoder.geocode(address)
        if geocoded.error is not None:
            return NearbyStopsResult.failure(geocoded.error)

        point = geocoded.point
        if point is None:
            raise RuntimeError("Geocoder returned neither a point nor an error")

        logger.debug("Address %r geolocated at %s", address, point)
        return NearbyStopsResult(stops=self.stops_near_point(point), origin=point)

    def stops_near_point(self, point: GeoPoint) -> tuple[Stop, ...]:
        return self.catalogue.find_nearest(
            point,
            max_distance_m=self.max_distance_m,
            max_results=self.max_results,
        )
