from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from roadnav.app.ports.output import IMapDataProvider
from roadnav.domain.algorithms.astar import CancelCheck, path_distance_mi
from roadnav.domain.algorithms.geo_utils import TransverseMercator
from roadnav.domain.algorithms.graph_builder import build_graph
from roadnav.domain.models import GeoPoint, RoadGraph, Route, VertexInfo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RoutingService:
    """Application service (use case) for nearest-intersection and route queries.

    The graph is built once and only read afterwards, so one instance can
    serve concurrent requests.
    """

    graph: RoadGraph
    route_timeout_s: float | None = None

    @classmethod
    def from_provider(
        cls,
        provider: IMapDataProvider,
        *,
        projection: TransverseMercator | None = None,
        route_timeout_s: float | None = None,
    ) -> "RoutingService":
        data = provider.load_map_data()
        graph = build_graph(data.nodes, data.ways, projection=projection)
        return cls(graph=graph, route_timeout_s=route_timeout_s)

    def nearest_intersection(self, point: GeoPoint) -> VertexInfo:
        vertex_id = self.graph.nearest_vertex(point.lon, point.lat)
        return self.graph.vertex_info(vertex_id)

    def vertex_info(self, vertex_id: int) -> VertexInfo:
        return self.graph.vertex_info(vertex_id)

    def calculate_route(
        self,
        *,
        origin: GeoPoint,
        destination: GeoPoint,
        should_cancel: CancelCheck | None = None,
    ) -> Route:
        vertex_ids = self.graph.compute_route(
            origin.lon,
            origin.lat,
            destination.lon,
            destination.lat,
            should_cancel=self._cancel_check(should_cancel),
        )

        if not vertex_ids:
            logger.info(
                "No route between (%s, %s) and (%s, %s)",
                origin.lon,
                origin.lat,
                destination.lon,
                destination.lat,
            )
            return Route(origin=origin, destination=destination)

        path = tuple(
            GeoPoint.from_lon_lat(self.graph.lon(v), self.graph.lat(v))
            for v in vertex_ids
        )
        return Route(
            origin=origin,
            destination=destination,
            vertex_ids=tuple(vertex_ids),
            path=path,
            distance_mi=path_distance_mi(self.graph, vertex_ids),
        )

    def _cancel_check(self, should_cancel: CancelCheck | None) -> CancelCheck | None:
        if self.route_timeout_s is None:
            return should_cancel

        deadline = time.monotonic() + float(self.route_timeout_s)

        def _check() -> bool:
            if should_cancel is not None and should_cancel():
                return True
            return time.monotonic() >= deadline

        return _check
