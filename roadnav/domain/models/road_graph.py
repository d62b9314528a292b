from __future__ import annotations

from collections.abc import KeysView

from roadnav.domain.algorithms import astar
from roadnav.domain.algorithms.geo_utils import (
    DEFAULT_PROJECTION,
    TransverseMercator,
    great_circle_distance_mi,
    initial_bearing_deg,
)
from roadnav.domain.algorithms.kdtree import KDTree
from roadnav.domain.exceptions import VertexNotFound

from .vertex import Vertex, VertexInfo


class RoadGraph:
    """Undirected road graph keyed by OSM node id.

    The graph is mutable only until ``finalize()``: that call drops vertices
    without neighbors, builds the spatial index and freezes the graph. After
    that, every method is read-only and safe to call from many threads.

    Edge weights are not stored; the cost between adjacent vertices is the
    great-circle distance between them, computed on demand.
    """

    def __init__(self, projection: TransverseMercator | None = None) -> None:
        self.projection = projection or DEFAULT_PROJECTION
        self._vertices: dict[int, Vertex] = {}
        self._index: KDTree | None = None
        self._frozen = False

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_vertex(
        self, vertex_id: int, lon: float, lat: float, name: str | None = None
    ) -> None:
        self._check_mutable()
        self._vertices[vertex_id] = Vertex(
            id=vertex_id,
            lon=lon,
            lat=lat,
            x=self.projection.x(lon, lat),
            y=self.projection.y(lon, lat),
            name=name,
        )

    def connect(self, a: int, b: int) -> None:
        """Add an undirected edge between two existing vertices."""

        self._check_mutable()
        va = self._get(a)
        vb = self._get(b)
        va.neighbors[b] = None
        vb.neighbors[a] = None

    def finalize(self) -> None:
        self._check_mutable()
        isolated = [vid for vid, v in self._vertices.items() if not v.neighbors]
        for vid in isolated:
            del self._vertices[vid]

        self._index = KDTree(self._vertices.values())
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("RoadGraph is finalized and can no longer be modified")

    def _get(self, vertex_id: int) -> Vertex:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFound(vertex_id) from None

    def lon(self, vertex_id: int) -> float:
        return self._get(vertex_id).lon

    def lat(self, vertex_id: int) -> float:
        return self._get(vertex_id).lat

    def x(self, vertex_id: int) -> float:
        return self._get(vertex_id).x

    def y(self, vertex_id: int) -> float:
        return self._get(vertex_id).y

    def neighbors(self, vertex_id: int) -> KeysView[int]:
        return self._get(vertex_id).neighbors.keys()

    def vertex_ids(self) -> KeysView[int]:
        return self._vertices.keys()

    def vertex_info(self, vertex_id: int) -> VertexInfo:
        v = self._get(vertex_id)
        return VertexInfo(id=v.id, lon=v.lon, lat=v.lat, name=v.name)

    def distance(self, a: int, b: int) -> float:
        """Great-circle distance between two vertices, in miles."""

        va = self._get(a)
        vb = self._get(b)
        return great_circle_distance_mi(va.lon, va.lat, vb.lon, vb.lat)

    def bearing(self, a: int, b: int) -> float:
        va = self._get(a)
        vb = self._get(b)
        return initial_bearing_deg(va.lon, va.lat, vb.lon, vb.lat)

    def nearest_vertex(self, lon: float, lat: float) -> int:
        """Id of the vertex closest to (lon, lat) in the projected plane."""

        if self._index is None:
            raise RuntimeError("RoadGraph must be finalized before spatial queries")

        return self._index.nearest(
            self.projection.x(lon, lat), self.projection.y(lon, lat)
        )

    def compute_route(
        self,
        start_lon: float,
        start_lat: float,
        dest_lon: float,
        dest_lat: float,
        *,
        should_cancel: astar.CancelCheck | None = None,
    ) -> list[int]:
        """Shortest route between two coordinates as an ordered list of vertex ids.

        Both endpoints are snapped to their nearest vertex first. An empty list
        means no route exists.
        """

        start_id = self.nearest_vertex(start_lon, start_lat)
        dest_id = self.nearest_vertex(dest_lon, dest_lat)
        return astar.shortest_path(
            self, start_id, dest_id, should_cancel=should_cancel
        )
