from __future__ import annotations

import logging
from typing import Iterable

from roadnav.domain.algorithms.geo_utils import TransverseMercator
from roadnav.domain.exceptions import MalformedInput
from roadnav.domain.models import NodeRecord, RoadGraph, WayRecord

logger = logging.getLogger(__name__)

# Roads we route over. Service roads, footways, tracks etc. are left out.
ALLOWED_HIGHWAY_TYPES: frozenset[str] = frozenset(
    {
        "motorway",
        "trunk",
        "primary",
        "secondary",
        "tertiary",
        "unclassified",
        "residential",
        "living_street",
        "motorway_link",
        "trunk_link",
        "primary_link",
        "secondary_link",
        "tertiary_link",
    }
)


def is_routable(way: WayRecord, allowed_highways: frozenset[str]) -> bool:
    return way.highway in allowed_highways and len(way.node_refs) >= 2


def build_graph(
    nodes: Iterable[NodeRecord],
    ways: Iterable[WayRecord],
    *,
    projection: TransverseMercator | None = None,
    allowed_highways: frozenset[str] = ALLOWED_HIGHWAY_TYPES,
) -> RoadGraph:
    """Build and finalize a road graph from normalized nodes and ways.

    Each accepted way becomes a path over its nodes in declared order; ways
    sharing a node share that vertex. Vertices no accepted way touches are
    dropped by finalization.

    Raises ``MalformedInput`` if an accepted way references a node id that is
    not in ``nodes``; the whole build is aborted.
    """

    graph = RoadGraph(projection=projection)
    node_count = 0
    for node in nodes:
        graph.add_vertex(node.id, node.lon, node.lat, node.name)
        node_count += 1

    accepted = 0
    discarded = 0
    for way in ways:
        if not is_routable(way, allowed_highways):
            discarded += 1
            continue

        missing = [ref for ref in way.node_refs if ref not in graph]
        if missing:
            raise MalformedInput(
                f"Way references unknown node id(s): {', '.join(map(str, missing))}"
            )

        for a, b in zip(way.node_refs, way.node_refs[1:]):
            if a != b:
                graph.connect(a, b)
        accepted += 1

    graph.finalize()
    logger.info(
        "Built road graph: %d/%d vertices kept, %d ways accepted, %d discarded",
        len(graph),
        node_count,
        accepted,
        discarded,
    )
    return graph
