"""Routing orchestration service."""

from __future__ import annotations

import logging

from ...config import settings
from ...data.houses_repository import get_houses
from ...models.domain import Destination, GeoPoint
from ...schemas.routing import RouteLegModel, RouteRequest, RouteResponse
from .models import RouteResult
from .optimizer import optimize_route

logger = logging.getLogger(__name__)


def _resolve_destinations(payload: RouteRequest) -> list[Destination]:
    if payload.destinations is not None and payload.house_ids is not None:
        raise ValueError("Provide either destinations or house_ids, not both.")

    if payload.house_ids is not None:
        return [house.to_destination() for house in get_houses(payload.house_ids)]

    return [
        Destination.at(item.id, item.latitude, item.longitude)
        for item in payload.destinations or []
    ]


def _build_route_overlay(start: GeoPoint, result: RouteResult) -> list[list[float]]:
    """Polyline for the map: the start followed by each stop in visiting order."""

    coordinates = [[start.latitude, start.longitude]]
    coordinates.extend([leg.point.latitude, leg.point.longitude] for leg in result.legs)
    return coordinates


def plan_route(payload: RouteRequest) -> RouteResponse:
    start = GeoPoint(payload.start.latitude, payload.start.longitude)
    destinations = _resolve_destinations(payload)

    if len(destinations) > settings.max_route_destinations:
        raise ValueError(
            f"Too many destinations ({len(destinations)}); the limit is {settings.max_route_destinations}."
        )

    result = optimize_route(start, destinations)
    logger.info(
        f"Planned route over {len(result.order)} stops, {result.total_distance:.2f} mi "
        f"(source={'catalogue' if payload.house_ids is not None else 'request'})"
    )

    return RouteResponse(
        order=list(result.order),
        total_distance_miles=result.total_distance,
        stop_count=len(result.order),
        legs=[
            RouteLegModel(
                sequence=leg.sequence,
                destination_id=leg.destination_id,
                distance_from_prev_miles=leg.distance_from_prev,
                cumulative_distance_miles=leg.cumulative_distance,
            )
            for leg in result.legs
        ],
        coordinates=_build_route_overlay(start, result),
        metadata={
            "algorithm": "nearest_neighbor",
            "distance_unit": "miles",
            "distance_model": "great_circle",
            "source": "catalogue" if payload.house_ids is not None else "request",
        },
    )
