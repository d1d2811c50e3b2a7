import pytest

from src.candy_route.config import settings
from src.candy_route.data.houses_repository import HouseNotFound
from src.candy_route.models.domain import CandyHouse
from src.candy_route.schemas.routing import RouteRequest
from src.candy_route.services.routing import service as routing_service


def _house(hid: str, lat: float, lon: float) -> CandyHouse:
    return CandyHouse(id=hid, latitude=lat, longitude=lon, address=f"{hid} Maple Ave")


def test_plan_route_with_inline_destinations():
    request = RouteRequest(
        start={"latitude": 0, "longitude": 0},
        destinations=[
            {"id": "A", "latitude": 0, "longitude": 1},
            {"id": "B", "latitude": 0, "longitude": 5},
            {"id": "C", "latitude": 0, "longitude": 3},
        ],
    )

    response = routing_service.plan_route(request)

    assert response.order == ["A", "C", "B"]
    assert response.stop_count == 3
    assert response.coordinates == [[0, 0], [0, 1], [0, 3], [0, 5]]
    assert response.legs[-1].cumulative_distance_miles == pytest.approx(response.total_distance_miles)
    assert response.metadata["source"] == "request"


def test_plan_route_without_destinations_is_empty():
    response = routing_service.plan_route(RouteRequest(start={"latitude": 40.0, "longitude": -74.0}))

    assert response.order == []
    assert response.total_distance_miles == 0
    assert response.coordinates == [[40.0, -74.0]]


def test_plan_route_looks_up_catalogue_houses(monkeypatch: pytest.MonkeyPatch):
    houses = {"far": _house("far", 0.0, 0.02), "near": _house("near", 0.0, 0.01)}
    monkeypatch.setattr(routing_service, "get_houses", lambda ids: [houses[i] for i in ids])

    response = routing_service.plan_route(
        RouteRequest(start={"latitude": 0, "longitude": 0}, house_ids=["far", "near"])
    )

    assert response.order == ["near", "far"]
    assert response.metadata["source"] == "catalogue"


def test_plan_route_propagates_missing_houses(monkeypatch: pytest.MonkeyPatch):
    def _missing(ids):
        raise HouseNotFound(ids)

    monkeypatch.setattr(routing_service, "get_houses", _missing)

    with pytest.raises(HouseNotFound):
        routing_service.plan_route(RouteRequest(start={"latitude": 0, "longitude": 0}, house_ids=["ghost"]))


def test_plan_route_rejects_both_sources():
    request = RouteRequest(
        start={"latitude": 0, "longitude": 0},
        destinations=[{"id": "A", "latitude": 0, "longitude": 1}],
        house_ids=["A"],
    )

    with pytest.raises(ValueError, match="not both"):
        routing_service.plan_route(request)


def test_plan_route_enforces_destination_limit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "max_route_destinations", 2)
    request = RouteRequest(
        start={"latitude": 0, "longitude": 0},
        destinations=[{"id": i, "latitude": 0, "longitude": i * 0.01} for i in range(3)],
    )

    with pytest.raises(ValueError, match="Too many destinations"):
        routing_service.plan_route(request)
