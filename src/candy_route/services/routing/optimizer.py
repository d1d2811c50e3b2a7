"""Greedy nearest-neighbor visit ordering over great-circle distances.

Starting from the caller's location, the optimizer repeatedly walks to the
closest destination it has not visited yet. The scan keeps the first candidate
with a strictly smaller distance, so on exact ties the destination that appears
earlier in the input wins and repeated calls give the same order.

The result is an approximation: nearest-neighbor is not an optimal TSP solver
and distances are straight-line, not road-network, miles.
"""

from __future__ import annotations

import math
from typing import Iterable

from ...models.domain import Destination, DestinationId, GeoPoint, InvalidArgument
from ..geospatial import distance
from .models import RouteLeg, RouteResult


def optimize_route(start: GeoPoint, destinations: Iterable[Destination]) -> RouteResult:
    """Order ``destinations`` nearest-first from ``start``.

    Args:
        start: Location the walk begins from. Not part of the returned order.
        destinations: Points to visit. Duplicate identifiers are treated as
            separate waypoints.

    Returns:
        RouteResult with the visiting order, the cumulative distance in miles
        and one leg per visited destination.

    Raises:
        InvalidArgument: if ``start`` is not a GeoPoint or any element of
            ``destinations`` is not a Destination.
    """
    if not isinstance(start, GeoPoint):
        raise InvalidArgument("start must be a GeoPoint")

    unvisited = list(destinations)
    for position, destination in enumerate(unvisited):
        if not isinstance(destination, Destination):
            raise InvalidArgument(
                f"destinations[{position}] is {type(destination).__name__}, expected Destination"
            )

    order: list[DestinationId] = []
    legs: list[RouteLeg] = []
    current = start
    total_distance = 0.0

    while unvisited:
        nearest_index = -1
        shortest = math.inf
        for index, candidate in enumerate(unvisited):
            candidate_distance = distance(current, candidate.point)
            if candidate_distance < shortest:
                shortest = candidate_distance
                nearest_index = index

        nearest = unvisited.pop(nearest_index)
        total_distance += shortest
        order.append(nearest.id)
        legs.append(
            RouteLeg(
                sequence=len(order),
                destination_id=nearest.id,
                point=nearest.point,
                distance_from_prev=shortest,
                cumulative_distance=total_distance,
            )
        )
        current = nearest.point

    return RouteResult(order=tuple(order), total_distance=total_distance, legs=tuple(legs))
