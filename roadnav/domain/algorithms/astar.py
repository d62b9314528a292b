from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, Callable

from roadnav.domain.exceptions import RouteCancelled

if TYPE_CHECKING:
    from roadnav.domain.models.road_graph import RoadGraph

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


def shortest_path(
    graph: RoadGraph,
    start_id: int,
    dest_id: int,
    *,
    should_cancel: CancelCheck | None = None,
) -> list[int]:
    """A* search over the road graph.

    Edge cost and heuristic are both great-circle distances, so the heuristic
    never overestimates and the first time ``dest_id`` is popped its cost is
    minimal.

    Returns the vertex ids from ``start_id`` to ``dest_id`` inclusive, or an
    empty list if the destination is unreachable. ``should_cancel`` is polled
    on every frontier pop; when it returns True the search raises
    ``RouteCancelled``.
    """

    if start_id == dest_id:
        return [start_id]

    best: dict[int, float] = {start_id: 0.0}
    prev: dict[int, int | None] = {start_id: None}
    finalized: set[int] = set()
    frontier: list[tuple[float, int]] = [
        (graph.distance(start_id, dest_id), start_id)
    ]

    while frontier:
        if should_cancel is not None and should_cancel():
            logger.warning(
                "Route search cancelled after %d expansions (%s -> %s)",
                len(finalized),
                start_id,
                dest_id,
            )
            raise RouteCancelled(f"Route search {start_id} -> {dest_id} cancelled")

        _, current = heapq.heappop(frontier)
        if current in finalized:
            continue
        finalized.add(current)

        if current == dest_id:
            return _reconstruct(prev, dest_id)

        g_current = best[current]
        for neighbor in graph.neighbors(current):
            if neighbor in finalized:
                continue

            tentative = g_current + graph.distance(current, neighbor)
            known = best.get(neighbor)
            if known is None or tentative < known:
                best[neighbor] = tentative
                prev[neighbor] = current
                heapq.heappush(
                    frontier, (tentative + graph.distance(neighbor, dest_id), neighbor)
                )

    return []


def _reconstruct(prev: dict[int, int | None], dest_id: int) -> list[int]:
    path: list[int] = []
    cur: int | None = dest_id
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def path_distance_mi(graph: RoadGraph, vertex_ids: list[int]) -> float:
    """Total great-circle length of a vertex path, in miles."""

    return float(sum(graph.distance(a, b) for a, b in zip(vertex_ids, vertex_ids[1:])))
