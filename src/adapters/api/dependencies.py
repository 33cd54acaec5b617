from __future__ import annotations

from fastapi import Request

from src.adapters.geocoding.http_geocoder import HttpGeocoder
from src.adapters.persistence.json_stop_batch_reader import JsonStopBatchReader
from src.adapters.settings import GeocodingConfig, StopsDataConfig
from src.app.services.nearby_stops_service import NearbyStopsService
from src.app.services.stop_catalogue_loader import load_stop_catalogue


def build_nearby_stops_service() -> NearbyStopsService:
    """Wire config, catalogue and geocoder; called once at startup.

    Raises ValueError when the geocoding configuration is missing or invalid.
    """

    geocoding_config = GeocodingConfig.from_env()
    reader = JsonStopBatchReader(base_path=StopsDataConfig.from_env().base_path)
    catalogue = load_stop_catalogue(reader)
    return NearbyStopsService(
        geocoder=HttpGeocoder(config=geocoding_config),
        catalogue=catalogue,
    )


def get_nearby_stops_service(request: Request) -> NearbyStopsService:
    service = getattr(request.app.state, "nearby_stops_service", None)
    if service is None:
        raise RuntimeError("Nearby stops service not initialised")
    return service
