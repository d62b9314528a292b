from __future__ import annotations

import math
from typing import Any, Mapping

from roadnav.domain.exceptions import MalformedInput
from roadnav.domain.models import MapData, NodeRecord, WayRecord


def _int_id(raw: Any) -> int:
    # int() would truncate 1.7 to 1 and accept True as 1.
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f"not an integer id: {raw!r}")
    return int(raw)


def _coordinate(raw: Any) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite coordinate: {raw!r}")
    return value


def _node_from_mapping(raw: Mapping[str, Any]) -> NodeRecord:
    if not isinstance(raw, Mapping):
        raise MalformedInput(f"Invalid node record: {raw!r}")

    try:
        node_id = _int_id(raw["id"])
        lon = _coordinate(raw["lon"])
        lat = _coordinate(raw["lat"])
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedInput(f"Invalid node record: {raw!r}") from exc

    name = raw.get("name")
    if name is not None:
        name = str(name).strip() or None
    return NodeRecord(id=node_id, lon=lon, lat=lat, name=name)


def _way_from_mapping(raw: Mapping[str, Any]) -> WayRecord:
    if not isinstance(raw, Mapping):
        raise MalformedInput(f"Invalid way record: {raw!r}")

    refs = raw.get("node_refs")
    if not isinstance(refs, list):
        raise MalformedInput(f"Way 'node_refs' must be a list: {raw!r}")
    try:
        node_refs = tuple(_int_id(r) for r in refs)
    except (TypeError, ValueError) as exc:
        raise MalformedInput(f"Invalid node reference in way: {raw!r}") from exc

    tags = raw.get("tags") or {}
    if not isinstance(tags, Mapping):
        raise MalformedInput(f"Way 'tags' must be an object: {raw!r}")
    return WayRecord(
        node_refs=node_refs, tags={str(k): str(v) for k, v in tags.items()}
    )


def map_data_from_mapping(raw: Any) -> MapData:
    """Decode the JSON map-data document ``{"nodes": [...], "ways": [...]}``."""

    if not isinstance(raw, Mapping):
        raise MalformedInput("Map data document must be a JSON object")

    nodes = raw.get("nodes")
    ways = raw.get("ways")
    if not isinstance(nodes, list) or not isinstance(ways, list):
        raise MalformedInput("Map data document needs 'nodes' and 'ways' lists")

    return MapData(
        nodes=tuple(_node_from_mapping(n) for n in nodes),
        ways=tuple(_way_from_mapping(w) for w in ways),
    )


def map_data_to_mapping(data: MapData) -> dict[str, Any]:
    return {
        "nodes": [
            {"id": n.id, "lon": n.lon, "lat": n.lat, "name": n.name}
            for n in data.nodes
        ],
        "ways": [
            {"node_refs": list(w.node_refs), "tags": dict(w.tags)} for w in data.ways
        ],
    }
