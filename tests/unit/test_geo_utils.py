from __future__ import annotations

import math

from src.domain.algorithms.geo_utils import distance_m, haversine_distance_m
from src.domain.models.geo import GeoPoint


def test_haversine_zero_for_identical_points() -> None:
    p = GeoPoint(lat=45.4642, lon=9.19)
    assert haversine_distance_m(p, p) == 0.0
    assert distance_m(p, p) == 0


def test_haversine_is_symmetric_and_reasonable_scale() -> None:
    # Rough sanity check: 1 degree of latitude is about 111km.
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=1.0, lon=0.0)

    d1 = haversine_distance_m(a, b)
    d2 = haversine_distance_m(b, a)

    assert abs(d1 - d2) < 1e-6
    assert 100_000.0 < d1 < 120_000.0


def test_one_degree_along_equator_uses_mean_earth_radius() -> None:
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=0.0, lon=1.0)

    # 6371000 * pi / 180 = 111194.93 m
    assert distance_m(a, b) == 111195


def test_known_milan_pair_matches_haversine_formula() -> None:
    a = GeoPoint(lat=45.4642, lon=9.1900)
    b = GeoPoint(lat=45.4781, lon=9.2262)

    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    expected = 2 * 6371000 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    d = distance_m(a, b)
    assert abs(d - expected) <= 1
    assert 3_150 < d < 3_300
    assert d == distance_m(b, a)
