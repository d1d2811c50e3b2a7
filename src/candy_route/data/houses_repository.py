"""Read-only access to the candy house catalogue stored in Supabase."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import CandyHouse

logger = logging.getLogger(__name__)


class CatalogueUnavailable(RuntimeError):
    """The house catalogue is not configured or could not be queried."""


class HouseNotFound(LookupError):
    """One or more requested house ids are not in the catalogue."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Houses not found: {', '.join(self.missing)}")


def _coerce_rating(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _row_to_house(row: dict) -> CandyHouse:
    candy_types = row.get("candy_types") or ()
    if isinstance(candy_types, str):
        candy_types = [item.strip() for item in candy_types.split(",") if item.strip()]
    return CandyHouse(
        id=str(row["id"]),
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        address=(row.get("address") or "").strip(),
        candy_types=tuple(str(item) for item in candy_types),
        notes=row.get("notes") or "",
        is_active=bool(row.get("is_active", True)),
        avg_candy_rating=_coerce_rating(row.get("avg_candy_rating")),
    )


def _rows_to_houses(rows: Iterable[dict]) -> list[CandyHouse]:
    houses: list[CandyHouse] = []
    for row in rows:
        try:
            houses.append(_row_to_house(row))
        except (KeyError, ValueError, TypeError) as e:
            # Skip invalid rows but continue processing
            logger.warning(f"Skipping invalid house row {row.get('id', '?')}: {e}")
    return houses


def _query(build) -> list[dict]:
    supabase = get_supabase_client()
    if not supabase:
        raise CatalogueUnavailable(
            "Supabase not configured. Set CANDY_SUPABASE_URL and CANDY_SUPABASE_KEY environment variables."
        )
    try:
        response = build(supabase.table(settings.houses_table)).execute()
    except Exception as exc:
        raise CatalogueUnavailable(f"House catalogue query failed: {exc}") from exc
    return list(response.data or [])


def list_active_houses() -> list[CandyHouse]:
    """Load every active house from the catalogue."""

    rows = _query(lambda table: table.select("*").eq("is_active", True))
    houses = _rows_to_houses(rows)
    logger.info(f"Loaded {len(houses)} active houses from '{settings.houses_table}'")
    return houses


def get_houses(house_ids: Sequence[str]) -> list[CandyHouse]:
    """Load the given houses, preserving the caller's order.

    Repeated ids produce repeated entries. Raises HouseNotFound when any id is
    missing or its row could not be parsed.
    """
    if not house_ids:
        return []
    wanted = [str(house_id).strip() for house_id in house_ids]
    rows = _query(lambda table: table.select("*").in_("id", sorted(set(wanted))))
    by_id = {house.id: house for house in _rows_to_houses(rows)}

    missing = [house_id for house_id in dict.fromkeys(wanted) if house_id not in by_id]
    if missing:
        raise HouseNotFound(missing)
    return [by_id[house_id] for house_id in wanted]
