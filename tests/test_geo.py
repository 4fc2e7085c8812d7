import pytest

from hotel_search.core.geo import KM_PER_MILE, distance_between

LISBON = (38.7071, -9.13549)
POINTS = [
    (38.71, -9.14),
    (38.72, -9.12),
    (41.1579, -8.6291),
    (0.0, 0.0),
    (-33.8688, 151.2093),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_is_symmetric(point):
    forward = distance_between(*LISBON, *point, unit="km")
    backward = distance_between(*point, *LISBON, unit="km")
    assert forward == backward


@pytest.mark.parametrize("point", POINTS + [LISBON])
def test_distance_to_self_is_zero(point):
    assert distance_between(*point, *point, unit="km") == 0
    assert distance_between(*point, *point, unit="miles", absolute=False) == 0


@pytest.mark.parametrize("point", POINTS)
def test_km_is_miles_times_conversion(point):
    miles = distance_between(*LISBON, *point, unit="miles")
    km = distance_between(*LISBON, *point, unit="km")
    assert km == pytest.approx(miles * KM_PER_MILE, abs=0.02)


def test_one_degree_of_longitude_at_equator():
    assert distance_between(0, 0, 0, 1) == pytest.approx(69.09)
    assert distance_between(0, 0, 0, 1, unit="km") == pytest.approx(111.19)


def test_absolute_coordinates_drop_hemisphere():
    assert distance_between(10, 20, -10, 20, unit="miles") == 0
    assert distance_between(10, 20, -10, 20, unit="miles", absolute=False) == pytest.approx(1381.8, abs=0.01)


def test_antipodal_points_stay_in_acos_domain():
    assert distance_between(0, 0, 0, 180, absolute=False) == pytest.approx(12436.2, abs=0.01)
