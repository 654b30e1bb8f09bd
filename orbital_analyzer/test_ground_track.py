import math

import pytest

from orbital_analyzer.config.settings import R_EARTH_KM
from orbital_analyzer.models.results import Rejection
from orbital_analyzer.models.sample import GeoSample
from orbital_analyzer.physics.ground_track import distance_km, velocity_km_s, track_distances_km


def s(lat, lon, t=0):
    return GeoSample(latitude=lat, longitude=lon, timestamp=t)


@pytest.mark.parametrize("lat,lon", [(0, 0), (51.5, -0.1), (-90, 180), (90, -180), (-33.9, 151.2)])
def test_distance_to_self_is_zero(lat, lon):
    assert distance_km(s(lat, lon), s(lat, lon)) == 0.0


def test_distance_is_symmetric():
    a, b = s(48.85, 2.35), s(-22.9, -43.2)
    assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_one_degree_longitude_at_equator():
    assert distance_km(s(0, 0), s(0, 1)) == pytest.approx(111.19, abs=0.01)


def test_antipodal_points_bounded_by_half_circumference():
    half = math.pi * R_EARTH_KM
    d = distance_km(s(0, 0), s(0, 180))
    assert d == pytest.approx(half)
    assert d <= half + 1e-9
    assert distance_km(s(90, 0), s(-90, 0)) <= half + 1e-9
    assert distance_km(s(45, -180), s(-45, 0)) <= half + 1e-9


def test_velocity_accepted():
    res = velocity_km_s(s(0, 0, 100), s(0, 1, 120))
    assert res.ok
    assert res.interval_s == 20
    assert res.velocity_km_s == pytest.approx(111.19 / 20, rel=1e-3)


@pytest.mark.parametrize("t2", [100, 99])
def test_velocity_non_positive_interval(t2):
    res = velocity_km_s(s(0, 0, 100), s(0, 0.1, t2))
    assert not res.ok
    assert res.rejection is Rejection.NON_POSITIVE_INTERVAL
    assert res.velocity_km_s is None


@pytest.mark.parametrize("dt", [1, 60, 10_000])
def test_velocity_implausible_jump_regardless_of_interval(dt):
    res = velocity_km_s(s(0, 0, 0), s(0, 10, dt))  # ~1112 km
    assert res.rejection is Rejection.IMPLAUSIBLE_JUMP
    assert res.distance_km > 500


def test_track_distances():
    legs = track_distances_km([s(0, 0, 0), s(0, 1, 5), s(0, 2, 10)])
    assert len(legs) == 2
    assert legs[0] == pytest.approx(111.19, abs=0.01)
    assert len(track_distances_km([s(0, 0)])) == 0
