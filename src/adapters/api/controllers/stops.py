from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.adapters.api.dependencies import get_nearby_stops_service
from src.adapters.api.schemas.stops import (
    ErrorSchema,
    GeoPointSchema,
    NearbyStopsResponseSchema,
    StopSchema,
)
from src.app.services.nearby_stops_service import NearbyStopsService
from src.domain.models import GeoPoint, QueryError, QueryErrorKind, Stop

router = APIRouter(prefix="/atm", tags=["stops"])

NO_STOPS_MESSAGE = "No stops found near the given address"

_STATUS_BY_KIND = {
    QueryErrorKind.INVALID_INPUT: 400,
    QueryErrorKind.GEOCODING_FAILED: 422,
    QueryErrorKind.OUT_OF_SERVICE_AREA: 422,
}


def _error_message(error: QueryError) -> str:
    if error.kind is QueryErrorKind.INVALID_INPUT:
        return f"Invalid address parameter: {error.message}"
    if error.kind is QueryErrorKind.GEOCODING_FAILED:
        return f"Unable to geocode address: {error.message}"
    return error.message


def _error_response(error: QueryError) -> JSONResponse:
    status = _STATUS_BY_KIND[error.kind]
    body = ErrorSchema(error=_error_message(error), status=status)
    return JSONResponse(status_code=status, content=body.model_dump())


def _stop_to_schema(stop: Stop, origin: GeoPoint) -> StopSchema:
    return StopSchema(
        code=stop.code,
        description=stop.description,
        lines=list(stop.lines),
        position=GeoPointSchema(lat=stop.position.lat, lon=stop.position.lon),
        distance_m=stop.position.distance_to(origin),
    )


@router.get(
    "/stops",
    response_model=NearbyStopsResponseSchema,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorSchema}, 422: {"model": ErrorSchema}},
)
def stops_near_address(
    address: str | None = Query(default=None),
    service: NearbyStopsService = Depends(get_nearby_stops_service),
) -> NearbyStopsResponseSchema | JSONResponse:
    result = service.stops_near_address(address)
    if result.error is not None:
        return _error_response(result.error)

    origin = result.origin
    if origin is None:
        raise RuntimeError("Successful lookup without an origin point")

    return NearbyStopsResponseSchema(
        address=(address or "").strip(),
        origin=GeoPointSchema(lat=origin.lat, lon=origin.lon),
        stops=[_stop_to_schema(s, origin) for s in result.stops],
        message=None if result.stops else NO_STOPS_MESSAGE,
    )
