from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Route:
    """Shortest route between two coordinates over the road graph.

    An empty ``vertex_ids`` tuple means the destination is unreachable from
    the origin; it is a valid result, not a failure.
    """

    origin: GeoPoint
    destination: GeoPoint
    vertex_ids: tuple[int, ...] = ()
    path: tuple[GeoPoint, ...] = ()
    distance_mi: float = 0.0

    @property
    def found(self) -> bool:
        return bool(self.vertex_ids)
