from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeoPointSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0)
    # Wire name follows the geocoding provider and existing clients.
    lon: float = Field(..., ge=-180.0, le=180.0, alias="lng")


class StopSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    description: str
    lines: list[str] = Field(..., alias="availableLines")
    position: GeoPointSchema
    distance_m: int | None = None


class NearbyStopsResponseSchema(BaseModel):
    address: str
    origin: GeoPointSchema
    stops: list[StopSchema] = []
    message: str | None = None


class ErrorSchema(BaseModel):
    error: str
    status: int | None = None
