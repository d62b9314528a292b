from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import osmnx as ox

from roadnav.app.ports.output import IMapDataProvider
from roadnav.domain.models import MapData, NodeRecord, WayRecord


def _first_str(value: Any) -> str | None:
    # OSMnx merges tags of simplified edges into lists.
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def map_data_from_graph(graph: Any) -> MapData:
    """Convert an OSMnx/networkx street graph into normalized map records.

    Nodes carry lon/lat in their ``x``/``y`` attributes. Every edge becomes a
    two-node way tagged with the edge's ``highway`` (and ``name`` if any);
    both directions of a two-way street collapse into the same adjacency.
    """

    nodes: list[NodeRecord] = []
    for node_id, data in graph.nodes(data=True):
        x = data.get("x")
        y = data.get("y")
        if x is None or y is None:
            continue
        nodes.append(
            NodeRecord(
                id=int(node_id),
                lon=float(x),
                lat=float(y),
                name=_first_str(data.get("name")),
            )
        )

    ways: list[WayRecord] = []
    for u, v, data in graph.edges(data=True):
        tags: dict[str, str] = {}
        highway = _first_str(data.get("highway"))
        if highway:
            tags["highway"] = highway
        name = _first_str(data.get("name"))
        if name:
            tags["name"] = name
        ways.append(WayRecord(node_refs=(int(u), int(v)), tags=tags))

    return MapData(nodes=tuple(nodes), ways=tuple(ways))


@dataclass(slots=True)
class OSMnxMapDataProvider(IMapDataProvider):
    """Downloads a street network for a place with OSMnx.

    Env vars:
      - OSM_PLACE: place string (e.g. 'Berkeley, California, USA')
      - OSMNX_CACHE_FOLDER: where OSMnx caches Overpass responses
    """

    place: str | None = None
    network_type: str = "drive"
    use_cache: bool = True

    def _configure_osmnx(self) -> None:
        ox.settings.use_cache = self.use_cache
        ox.settings.log_console = False
        ox.settings.cache_folder = os.getenv("OSMNX_CACHE_FOLDER") or "data/osm_cache"

    def load_map_data(self) -> MapData:
        place = self.place or (os.getenv("OSM_PLACE") or "").strip()
        if not place:
            raise RuntimeError("Missing OSM_PLACE")

        self._configure_osmnx()
        graph = ox.graph_from_place(place, network_type=self.network_type)
        return map_data_from_graph(graph)
