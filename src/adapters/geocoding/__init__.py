from .http_geocoder import HttpGeocoder

__all__ = [
    "HttpGeocoder",
]
