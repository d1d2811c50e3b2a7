"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class GeoPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class DestinationModel(BaseModel):
    """A point to visit, identified by an opaque key echoed back in the order."""
    id: Union[str, int]
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class RouteRequest(BaseModel):
    start: GeoPointModel = Field(..., description="Current location of the visitor.")
    destinations: Optional[List[DestinationModel]] = Field(
        default=None,
        description="Explicit points to visit. Mutually exclusive with house_ids.",
    )
    house_ids: Optional[List[str]] = Field(
        default=None,
        description="Catalogue house ids to visit; coordinates are looked up in the catalogue.",
    )


class RouteLegModel(BaseModel):
    sequence: int
    destination_id: Union[str, int]
    distance_from_prev_miles: float
    cumulative_distance_miles: float


class RouteResponse(BaseModel):
    order: List[Union[str, int]]
    total_distance_miles: float
    stop_count: int
    legs: List[RouteLegModel]
    coordinates: List[List[float]] = Field(
        default_factory=list,
        description="[lat, lng] polyline from the start through every stop, for map display.",
    )
    metadata: dict = Field(default_factory=dict)
