from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint
from .stop import Stop

MAX_DISTANCE_M = 200
MAX_RESULTS = 10


@dataclass(frozen=True, slots=True)
class StopCatalogue:
    """Immutable, ordered collection of stops answering proximity queries.

    Built once at startup; safe for concurrent reads since nothing writes to it.
    """

    stops: tuple[Stop, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.stops)

    def find_nearest(
        self,
        point: GeoPoint,
        *,
        max_distance_m: int = MAX_DISTANCE_M,
        max_results: int = MAX_RESULTS,
    ) -> tuple[Stop, ...]:
        in_range: list[tuple[int, Stop]] = []
        for stop in self.stops:
            d = stop.position.distance_to(point)
            if d <= max_distance_m:
                in_range.append((d, stop))

        # sort() is stable: equidistant stops keep catalogue order.
        in_range.sort(key=lambda item: item[0])
        return tuple(stop for _, stop in in_range[: max(0, max_results)])
