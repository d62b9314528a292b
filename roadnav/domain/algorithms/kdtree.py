from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from roadnav.domain.exceptions import EmptyIndex

if TYPE_CHECKING:
    from roadnav.domain.models.vertex import Vertex


@dataclass(frozen=True, slots=True)
class KDNode:
    vertex: Vertex
    left: KDNode | None = None
    right: KDNode | None = None


@dataclass(frozen=True, slots=True)
class _Best:
    vertex_id: int
    distance: float


class KDTree:
    """2-D tree over the planar (x, y) coordinates of road vertices.

    The splitting axis alternates with depth: x at even depths, y at odd
    depths. The tree is built once and never mutated, so concurrent queries
    need no locking; the running best match is threaded through the search
    instead of being stored on the tree.
    """

    __slots__ = ("root", "_size")

    def __init__(self, vertices: Iterable[Vertex]) -> None:
        points = list(vertices)
        self._size = len(points)
        self.root = _build(points, depth=0)

    def __len__(self) -> int:
        return self._size

    def nearest(self, x: float, y: float) -> int:
        """Return the id of the vertex closest to (x, y) in the plane."""

        if self.root is None:
            raise EmptyIndex("Spatial index is empty; the graph has no vertices")

        # Seeded with the root so a query at infinite distance from every
        # vertex still resolves to one.
        root = self.root.vertex
        best = _Best(vertex_id=root.id, distance=math.hypot(x - root.x, y - root.y))
        if best.distance == 0.0:
            return best.vertex_id
        return _nearest(self.root, x, y, 0, best).vertex_id


def _axis_value(vertex: Vertex, depth: int) -> float:
    return vertex.x if depth % 2 == 0 else vertex.y


def _build(points: list[Vertex], depth: int) -> KDNode | None:
    if not points:
        return None

    points = sorted(points, key=lambda v: _axis_value(v, depth))
    mid = len(points) // 2
    return KDNode(
        vertex=points[mid],
        left=_build(points[:mid], depth + 1),
        right=_build(points[mid + 1 :], depth + 1),
    )


def _nearest(
    node: KDNode | None, x: float, y: float, depth: int, best: _Best
) -> _Best:
    if node is None:
        return best

    vertex = node.vertex
    d = math.hypot(x - vertex.x, y - vertex.y)
    if d < best.distance:
        best = _Best(vertex_id=vertex.id, distance=d)
        if d == 0.0:
            return best

    delta = (x if depth % 2 == 0 else y) - _axis_value(vertex, depth)
    if delta < 0:
        near, far = node.left, node.right
    else:
        near, far = node.right, node.left

    best = _nearest(near, x, y, depth + 1, best)

    # The far side can only hold a closer point if the splitting line is
    # closer than the current best.
    if abs(delta) < best.distance:
        best = _nearest(far, x, y, depth + 1, best)
    return best
