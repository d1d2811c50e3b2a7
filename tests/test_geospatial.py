import math

import pytest

from src.candy_route.models.domain import CandyHouse, Destination, GeoPoint, InvalidArgument
from src.candy_route.services.geospatial import (
    EARTH_RADIUS_MILES,
    distance,
    filter_within_range,
    sort_by_distance,
)
from src.candy_route.services.routing.optimizer import optimize_route


NYC = GeoPoint(40.7128, -74.0060)
BOSTON = GeoPoint(42.3601, -71.0589)
PHILADELPHIA = GeoPoint(39.9526, -75.1652)


def _house(hid: str, lat: float, lon: float, rating: float | None = None) -> CandyHouse:
    return CandyHouse(id=hid, latitude=lat, longitude=lon, address=f"{hid} Elm Street", avg_candy_rating=rating)


def test_distance_is_zero_for_same_point():
    assert distance(NYC, NYC) == 0.0


def test_distance_is_symmetric():
    assert distance(NYC, BOSTON) == distance(BOSTON, NYC)
    assert distance(GeoPoint(-33.86, 151.21), GeoPoint(51.5, -0.12)) == distance(
        GeoPoint(51.5, -0.12), GeoPoint(-33.86, 151.21)
    )


def test_distance_satisfies_triangle_inequality():
    assert distance(BOSTON, PHILADELPHIA) <= distance(BOSTON, NYC) + distance(NYC, PHILADELPHIA) + 1e-9


def test_distance_uses_statute_mile_radius():
    # A quarter of a meridian is a quarter of the circumference.
    assert distance(GeoPoint(0, 0), GeoPoint(90, 0)) == pytest.approx(EARTH_RADIUS_MILES * math.pi / 2)
    assert distance(GeoPoint(0, 0), GeoPoint(0, 180)) == pytest.approx(EARTH_RADIUS_MILES * math.pi)


@pytest.mark.parametrize("lat", [round(0.1 * step, 1) for step in range(1, 900)])
def test_distance_between_antipodes_is_half_circumference(lat):
    assert distance(GeoPoint(lat, 0), GeoPoint(-lat, 180)) == pytest.approx(EARTH_RADIUS_MILES * math.pi)


def test_optimize_route_handles_antipodal_stop():
    result = optimize_route(GeoPoint(2.5, 0), [Destination.at("far", -2.5, 180)])

    assert result.order == ("far",)
    assert result.total_distance == pytest.approx(EARTH_RADIUS_MILES * math.pi)


def test_distance_nyc_to_boston_is_about_190_miles():
    assert distance(NYC, BOSTON) == pytest.approx(190, abs=5)


def test_distance_small_offset_in_new_york():
    assert distance(NYC, GeoPoint(40.7128, -73.9960)) == pytest.approx(0.52, abs=0.05)


def test_distance_rejects_non_geopoint():
    with pytest.raises(InvalidArgument):
        distance((40.7, -74.0), NYC)


def test_filter_within_range_keeps_boundary_and_input_order():
    origin = GeoPoint(0, 0)
    houses = [_house("far", 0, 0.1), _house("near", 0, 0.005), _house("mid", 0.01, 0)]
    limit = distance(origin, houses[2].point)

    kept = filter_within_range(origin, houses, limit)

    assert [house.id for house in kept] == ["near", "mid"]


def test_filter_within_range_rejects_negative_range():
    with pytest.raises(InvalidArgument):
        filter_within_range(GeoPoint(0, 0), [], -1)


def test_sort_by_distance_is_nearest_first_and_stable():
    origin = GeoPoint(0, 0)
    houses = [_house("east", 0, 0.02), _house("north", 0.02, 0), _house("close", 0, 0.01)]

    measured = sort_by_distance(origin, houses)

    assert [house.id for house, _ in measured] == ["close", "east", "north"]
    assert measured[0][1] == pytest.approx(distance(origin, houses[2].point))
