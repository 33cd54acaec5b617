from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.geo_utils import distance_m


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    def __str__(self) -> str:
        return f"({self.lat}, {self.lon})"

    def distance_to(self, other: GeoPoint) -> int:
        """Geodesic distance to `other`, rounded to whole meters."""

        return distance_m(self, other)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangular lat/lon region; all four edges belong to the box."""

    south: float
    north: float
    west: float
    east: float

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east


MILAN_BOUNDS = BoundingBox(south=45.390, north=45.535, west=9.070, east=9.280)


def is_within_service_area(lat: float, lon: float) -> bool:
    return MILAN_BOUNDS.contains(lat, lon)
