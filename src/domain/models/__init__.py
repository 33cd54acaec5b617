from .catalogue import MAX_DISTANCE_M, MAX_RESULTS, StopCatalogue
from .geo import MILAN_BOUNDS, BoundingBox, GeoPoint, is_within_service_area
from .results import GeocodeResult, NearbyStopsResult, QueryError, QueryErrorKind
from .stop import Stop

__all__ = [
    "BoundingBox",
    "GeoPoint",
    "GeocodeResult",
    "MAX_DISTANCE_M",
    "MAX_RESULTS",
    "MILAN_BOUNDS",
    "NearbyStopsResult",
    "QueryError",
    "QueryErrorKind",
    "Stop",
    "StopCatalogue",
    "is_within_service_area",
]
