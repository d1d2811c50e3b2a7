"""House search request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .routing import GeoPointModel


class CandyHouseModel(BaseModel):
    id: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str = ""
    candy_types: List[str] = Field(default_factory=list)
    notes: str = ""
    is_active: bool = True
    avg_candy_rating: Optional[float] = Field(default=None, ge=0)


class NearbyHousesRequest(BaseModel):
    origin: GeoPointModel
    range_miles: Optional[float] = Field(
        default=None,
        ge=0,
        description="Search radius in miles. Defaults to the configured default range.",
    )
    sort: Literal["distance", "rating"] = "distance"
    houses: Optional[List[CandyHouseModel]] = Field(
        default=None,
        description="Houses to search. When omitted the active catalogue is used.",
    )


class NearbyHouseModel(CandyHouseModel):
    distance_miles: float


class NearbyHousesResponse(BaseModel):
    origin: GeoPointModel
    range_miles: float
    sort: str
    count: int
    houses: List[NearbyHouseModel]


class RangePresetsResponse(BaseModel):
    default_range_miles: float
    max_range_miles: float
    presets_miles: List[float]
