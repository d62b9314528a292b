from __future__ import annotations

from dataclasses import dataclass

import pytest

from roadnav.app.services.routing_service import RoutingService
from roadnav.domain.algorithms.geo_utils import TransverseMercator
from roadnav.domain.exceptions import EmptyIndex, RouteCancelled
from roadnav.domain.models import GeoPoint, MapData, NodeRecord, WayRecord

PROJ = TransverseMercator(origin_lon=0.0, origin_lat=0.0)


@dataclass(slots=True)
class FakeMapDataProvider:
    data: MapData

    def load_map_data(self) -> MapData:
        return self.data


def _map() -> MapData:
    # Chain 1-2-3 plus a separate road 4-5.
    return MapData(
        nodes=(
            NodeRecord(id=1, lon=0.0, lat=0.0, name="Start"),
            NodeRecord(id=2, lon=0.0, lat=0.01),
            NodeRecord(id=3, lon=0.0, lat=0.02, name="End"),
            NodeRecord(id=4, lon=0.5, lat=0.0),
            NodeRecord(id=5, lon=0.5, lat=0.01),
            NodeRecord(id=6, lon=0.2, lat=0.2, name="Not a road"),
        ),
        ways=(
            WayRecord(node_refs=(1, 2, 3), tags={"highway": "residential"}),
            WayRecord(node_refs=(4, 5), tags={"highway": "primary"}),
        ),
    )


def _service(**kwargs) -> RoutingService:
    return RoutingService.from_provider(
        FakeMapDataProvider(_map()), projection=PROJ, **kwargs
    )


def test_calculate_route_returns_path_and_distance() -> None:
    service = _service()

    route = service.calculate_route(
        origin=GeoPoint(lat=0.0, lon=0.0), destination=GeoPoint(lat=0.02, lon=0.0)
    )

    assert route.found
    assert route.vertex_ids == (1, 2, 3)
    assert route.path == (
        GeoPoint(lat=0.0, lon=0.0),
        GeoPoint(lat=0.01, lon=0.0),
        GeoPoint(lat=0.02, lon=0.0),
    )
    # 0.02 degrees of latitude is about 1.38 miles.
    assert route.distance_mi == pytest.approx(1.383, abs=0.01)


def test_unreachable_destination_is_an_empty_route() -> None:
    service = _service()

    route = service.calculate_route(
        origin=GeoPoint(lat=0.0, lon=0.0), destination=GeoPoint(lat=0.01, lon=0.5)
    )

    assert not route.found
    assert route.vertex_ids == ()
    assert route.path == ()
    assert route.distance_mi == 0.0


def test_nearest_intersection_skips_non_road_points() -> None:
    service = _service()

    info = service.nearest_intersection(GeoPoint(lat=0.2, lon=0.2))

    assert info.id != 6
    assert service.vertex_info(1).name == "Start"


def test_route_timeout_cancels_search() -> None:
    service = _service(route_timeout_s=0.0)

    with pytest.raises(RouteCancelled):
        service.calculate_route(
            origin=GeoPoint(lat=0.0, lon=0.0),
            destination=GeoPoint(lat=0.02, lon=0.0),
        )


def test_caller_cancellation_is_honoured_with_timeout_configured() -> None:
    service = _service(route_timeout_s=60.0)

    with pytest.raises(RouteCancelled):
        service.calculate_route(
            origin=GeoPoint(lat=0.0, lon=0.0),
            destination=GeoPoint(lat=0.02, lon=0.0),
            should_cancel=lambda: True,
        )


def test_empty_map_surfaces_empty_index() -> None:
    service = RoutingService.from_provider(FakeMapDataProvider(MapData()))

    with pytest.raises(EmptyIndex):
        service.calculate_route(
            origin=GeoPoint(lat=0.0, lon=0.0),
            destination=GeoPoint(lat=0.02, lon=0.0),
        )
