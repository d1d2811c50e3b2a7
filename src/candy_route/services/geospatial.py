"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Iterable

from ..models.domain import CandyHouse, GeoPoint, InvalidArgument

EARTH_RADIUS_MILES = 3959.0


def distance(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """Great-circle distance in statute miles between two points (Haversine)."""

    if not isinstance(point_a, GeoPoint) or not isinstance(point_b, GeoPoint):
        raise InvalidArgument("distance() expects two GeoPoint values")

    d_phi = math.radians(point_b.latitude - point_a.latitude)
    d_lambda = math.radians(point_b.longitude - point_a.longitude)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(math.radians(point_a.latitude))
        * math.cos(math.radians(point_b.latitude))
        * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] for near-antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def filter_within_range(
    origin: GeoPoint, houses: Iterable[CandyHouse], range_miles: float
) -> list[CandyHouse]:
    """Return the houses no further than ``range_miles`` from ``origin``, in input order."""

    if range_miles < 0:
        raise InvalidArgument("range_miles must be >= 0")
    return [house for house in houses if distance(origin, house.point) <= range_miles]


def sort_by_distance(origin: GeoPoint, houses: Iterable[CandyHouse]) -> list[tuple[CandyHouse, float]]:
    """Pair each house with its distance from ``origin``, nearest first."""

    measured = [(house, distance(origin, house.point)) for house in houses]
    measured.sort(key=lambda item: item[1])
    return measured

