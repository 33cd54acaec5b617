from .geocoder import IGeocoder
from .stop_batch_reader import IStopBatchReader

__all__ = [
    "IGeocoder",
    "IStopBatchReader",
]
