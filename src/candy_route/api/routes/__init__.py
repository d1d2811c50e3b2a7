"""Route group exports."""

from . import health, houses, routes

__all__ = ["routes", "houses", "health"]
