"""Nearby house search used by the map sidebar."""

from __future__ import annotations

import logging

from ...config import settings
from ...data.houses_repository import list_active_houses
from ...models.domain import CandyHouse, GeoPoint
from ...schemas.houses import (
    CandyHouseModel,
    NearbyHouseModel,
    NearbyHousesRequest,
    NearbyHousesResponse,
    RangePresetsResponse,
)
from ..geospatial import filter_within_range, sort_by_distance

logger = logging.getLogger(__name__)


def _to_house(model: CandyHouseModel) -> CandyHouse:
    return CandyHouse(
        id=model.id,
        latitude=model.latitude,
        longitude=model.longitude,
        address=model.address,
        candy_types=tuple(model.candy_types),
        notes=model.notes,
        is_active=model.is_active,
        avg_candy_rating=model.avg_candy_rating,
    )


def search_nearby(payload: NearbyHousesRequest) -> NearbyHousesResponse:
    range_miles = payload.range_miles if payload.range_miles is not None else settings.default_range_miles
    if range_miles > settings.max_range_miles:
        raise ValueError(f"range_miles must be <= {settings.max_range_miles:g}")

    origin = GeoPoint(payload.origin.latitude, payload.origin.longitude)
    if payload.houses is not None:
        candidates = [_to_house(model) for model in payload.houses if model.is_active]
    else:
        candidates = list_active_houses()

    # Distance order first so rating ties fall back to the nearest house.
    measured = sort_by_distance(origin, filter_within_range(origin, candidates, range_miles))
    if payload.sort == "rating":
        measured.sort(key=lambda item: item[0].avg_candy_rating or 0.0, reverse=True)

    logger.info(f"Found {len(measured)} of {len(candidates)} houses within {range_miles:g} mi")
    return NearbyHousesResponse(
        origin=payload.origin,
        range_miles=range_miles,
        sort=payload.sort,
        count=len(measured),
        houses=[
            NearbyHouseModel(
                id=house.id,
                latitude=house.latitude,
                longitude=house.longitude,
                address=house.address,
                candy_types=list(house.candy_types),
                notes=house.notes,
                is_active=house.is_active,
                avg_candy_rating=house.avg_candy_rating,
                distance_miles=miles,
            )
            for house, miles in measured
        ],
    )


def range_presets() -> RangePresetsResponse:
    return RangePresetsResponse(
        default_range_miles=settings.default_range_miles,
        max_range_miles=settings.max_range_miles,
        presets_miles=list(settings.range_presets_miles),
    )
