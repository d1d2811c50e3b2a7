"""Domain models for coordinates, route destinations and catalogue houses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Optional, Union

DestinationId = Union[str, int]


class InvalidArgument(ValueError):
    """Raised when a coordinate or destination violates its contract."""


def _check_degrees(name: str, value: object, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    if value < -limit or value > limit:
        raise InvalidArgument(f"{name} must be between -{limit:g} and {limit:g}, got {value!r}")


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_degrees("latitude", self.latitude, 90.0)
        _check_degrees("longitude", self.longitude, 180.0)


@dataclass(frozen=True, slots=True)
class Destination:
    """A point to visit, tagged with the identifier reported in the route order."""

    id: DestinationId
    point: GeoPoint

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, (str, int)):
            raise InvalidArgument(f"destination id must be a string or integer, got {type(self.id).__name__}")
        if not isinstance(self.point, GeoPoint):
            raise InvalidArgument(f"destination {self.id!r} has no valid coordinate")

    @classmethod
    def at(cls, id: DestinationId, latitude: float, longitude: float) -> "Destination":
        return cls(id=id, point=GeoPoint(latitude, longitude))


@dataclass(frozen=True, slots=True)
class CandyHouse:
    """Represents a catalogued candy house as read from the external store."""

    id: str
    latitude: float
    longitude: float
    address: str = ""
    candy_types: tuple[str, ...] = field(default_factory=tuple)
    notes: str = ""
    is_active: bool = True
    avg_candy_rating: Optional[float] = None

    def __post_init__(self) -> None:
        _check_degrees("latitude", self.latitude, 90.0)
        _check_degrees("longitude", self.longitude, 180.0)

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    def to_destination(self) -> Destination:
        return Destination(id=self.id, point=self.point)
