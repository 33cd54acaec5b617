from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .geo import GeoPoint
from .stop import Stop


class QueryErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    GEOCODING_FAILED = "geocoding_failed"
    OUT_OF_SERVICE_AREA = "out_of_service_area"


@dataclass(frozen=True, slots=True)
class QueryError:
    kind: QueryErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    """Outcome of resolving an address: exactly one of `point` / `error` is set."""

    point: GeoPoint | None = None
    error: QueryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, point: GeoPoint) -> GeocodeResult:
        return cls(point=point)

    @classmethod
    def failure(cls, kind: QueryErrorKind, message: str) -> GeocodeResult:
        return cls(error=QueryError(kind=kind, message=message))


@dataclass(frozen=True, slots=True)
class NearbyStopsResult:
    stops: tuple[Stop, ...] = field(default_factory=tuple)
    origin: GeoPoint | None = None
    error: QueryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: QueryError) -> NearbyStopsResult:
        return cls(error=error)
