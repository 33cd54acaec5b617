from __future__ import annotations

import pytest

from src.domain.models import MILAN_BOUNDS, BoundingBox, is_within_service_area


@pytest.mark.unit
@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (45.535, 9.20),
        (45.390, 9.20),
        (45.46, 9.280),
        (45.46, 9.070),
        (45.390, 9.070),
        (45.535, 9.280),
        (45.4640, 9.1896),
    ],
)
def test_points_on_or_inside_the_edges_are_in_service_area(
    lat: float, lon: float
) -> None:
    assert is_within_service_area(lat, lon)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (45.536, 9.20),
        (45.389, 9.20),
        (45.46, 9.281),
        (45.46, 9.069),
        (41.9028, 12.4964),  # Rome
    ],
)
def test_points_outside_are_rejected(lat: float, lon: float) -> None:
    assert not is_within_service_area(lat, lon)


@pytest.mark.unit
def test_milan_bounds_values() -> None:
    assert MILAN_BOUNDS == BoundingBox(south=45.390, north=45.535, west=9.070, east=9.280)
