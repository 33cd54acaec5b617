from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeocodeResult


class IGeocoder(ABC):
    """Port for resolving a free-text address to a point inside the service area."""

    @abstractmethod
    def geocode(self, address: str) -> GeocodeResult:
        """Return the first candidate's point, or a classified error."""
