"""House search endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...data.houses_repository import CatalogueUnavailable
from ...schemas.houses import NearbyHousesRequest, NearbyHousesResponse, RangePresetsResponse
from ...services.houses.service import range_presets, search_nearby

router = APIRouter(prefix="/houses", tags=["houses"])


@router.post("/nearby", response_model=NearbyHousesResponse, status_code=status.HTTP_200_OK)
def nearby(payload: NearbyHousesRequest) -> NearbyHousesResponse:
    try:
        return search_nearby(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except CatalogueUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error searching nearby houses: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to search houses: {str(exc)}"
        ) from exc


@router.get("/range-presets", response_model=RangePresetsResponse, status_code=status.HTTP_200_OK)
def get_range_presets() -> RangePresetsResponse:
    """Search radii offered as quick picks next to the range slider."""
    return range_presets()
