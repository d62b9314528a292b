from .geo import GeoPoint
from .map_data import MapData, NodeRecord, WayRecord
from .navigation import NavigationDirection, NavigationStep
from .road_graph import RoadGraph
from .route import Route
from .vertex import Vertex, VertexInfo

__all__ = [
    "GeoPoint",
    "MapData",
    "NavigationDirection",
    "NavigationStep",
    "NodeRecord",
    "RoadGraph",
    "Route",
    "Vertex",
    "VertexInfo",
    "WayRecord",
]
