from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from src.app.services.nearby_stops_service import NearbyStopsService
from src.domain.models import (
    GeocodeResult,
    GeoPoint,
    QueryErrorKind,
    Stop,
    StopCatalogue,
)

DUOMO = GeoPoint(lat=45.4640, lon=9.1896)


@dataclass(slots=True)
class FakeGeocoder:
    result: GeocodeResult
    calls: list[str] = field(default_factory=list)

    def geocode(self, address: str) -> GeocodeResult:
        self.calls.append(address)
        return self.result


def _stop(code: str, lat: float, lon: float) -> Stop:
    return Stop(
        code=code,
        description=f"Stop {code}",
        lines=("1", "3"),
        position=GeoPoint(lat=lat, lon=lon),
    )


def _catalogue() -> StopCatalogue:
    return StopCatalogue(
        stops=(_stop("D1", 45.4642, 9.1900), _stop("FAR", 45.50, 9.30))
    )


@pytest.mark.unit
def test_duomo_end_to_end_returns_d1_only() -> None:
    geocoder = FakeGeocoder(GeocodeResult.success(DUOMO))
    service = NearbyStopsService(geocoder=geocoder, catalogue=_catalogue())

    result = service.stops_near_address("Piazza del Duomo")

    assert result.ok
    assert result.origin == DUOMO
    assert [s.code for s in result.stops] == ["D1"]
    assert geocoder.calls == ["Piazza del Duomo"]


@pytest.mark.unit
@pytest.mark.parametrize("address", [None, "", "   "])
def test_blank_address_is_invalid_input_and_skips_geocoder(address) -> None:
    geocoder = FakeGeocoder(GeocodeResult.success(DUOMO))
    service = NearbyStopsService(geocoder=geocoder, catalogue=_catalogue())

    result = service.stops_near_address(address)

    assert result.error is not None
    assert result.error.kind is QueryErrorKind.INVALID_INPUT
    assert result.stops == ()
    assert geocoder.calls == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "kind", [QueryErrorKind.GEOCODING_FAILED, QueryErrorKind.OUT_OF_SERVICE_AREA]
)
def test_geocoder_errors_pass_through_unchanged(kind: QueryErrorKind) -> None:
    failure = GeocodeResult.failure(kind, "upstream says no")
    service = NearbyStopsService(geocoder=FakeGeocoder(failure), catalogue=_catalogue())

    result = service.stops_near_address("Via Torino")

    assert result.error == failure.error
    assert result.origin is None


@pytest.mark.unit
def test_address_is_trimmed_before_geocoding() -> None:
    geocoder = FakeGeocoder(GeocodeResult.success(DUOMO))
    service = NearbyStopsService(geocoder=geocoder, catalogue=_catalogue())

    service.stops_near_address("  Piazza del Duomo \n")

    assert geocoder.calls == ["Piazza del Duomo"]


@pytest.mark.unit
def test_no_stops_nearby_is_an_empty_success() -> None:
    point = GeoPoint(lat=45.40, lon=9.10)
    service = NearbyStopsService(
        geocoder=FakeGeocoder(GeocodeResult.success(point)), catalogue=_catalogue()
    )

    result = service.stops_near_address("Somewhere south-west")

    assert result.ok
    assert result.stops == ()
    assert result.origin == point


@pytest.mark.unit
def test_stops_near_point_uses_configured_limits() -> None:
    stops = tuple(_stop(f"S{i}", 45.4640 + i * 0.0001, 9.1896) for i in range(1, 6))
    service = NearbyStopsService(
        geocoder=FakeGeocoder(GeocodeResult.success(DUOMO)),
        catalogue=StopCatalogue(stops=stops),
        max_distance_m=40,
        max_results=2,
    )

    assert [s.code for s in service.stops_near_point(DUOMO)] == ["S1", "S2"]
