"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass

from ...models.domain import DestinationId, GeoPoint


@dataclass(frozen=True, slots=True)
class RouteLeg:
    sequence: int
    destination_id: DestinationId
    point: GeoPoint
    distance_from_prev: float
    cumulative_distance: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    order: tuple[DestinationId, ...]
    total_distance: float
    legs: tuple[RouteLeg, ...] = ()
