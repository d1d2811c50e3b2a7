"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...db.supabase import get_supabase_client

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check catalogue connection status."""
    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set CANDY_SUPABASE_URL and CANDY_SUPABASE_KEY environment variables.",
        }

    try:
        supabase.table(settings.houses_table).select("id", count="exact").limit(1).execute()
        return {
            "configured": True,
            "connected": True,
            "table": settings.houses_table,
            "message": f"Database connected. Table '{settings.houses_table}' is reachable.",
        }
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "table": settings.houses_table,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
