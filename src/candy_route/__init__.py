"""Candy house search and route planning service."""

from .models.domain import CandyHouse, Destination, GeoPoint, InvalidArgument
from .services.geospatial import distance
from .services.routing.models import RouteLeg, RouteResult
from .services.routing.optimizer import optimize_route

__all__ = [
    "CandyHouse",
    "Destination",
    "GeoPoint",
    "InvalidArgument",
    "RouteLeg",
    "RouteResult",
    "distance",
    "optimize_route",
]
