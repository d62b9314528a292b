from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Vertex:
    """An intersection in the road graph.

    Planar x/y are projected once when the vertex is added and cached here.
    Neighbors are kept as a dict used as an insertion-ordered set.
    """

    id: int
    lon: float
    lat: float
    x: float
    y: float
    name: str | None = None
    neighbors: dict[int, None] = field(default_factory=dict, repr=False)


@dataclass(frozen=True, slots=True)
class VertexInfo:
    id: int
    lon: float
    lat: float
    name: str | None = None
