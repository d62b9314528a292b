from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class NodeRecord:
    """A normalized map node as produced by the ingestion layer."""

    id: int
    lon: float
    lat: float
    name: str | None = None


@dataclass(frozen=True, slots=True)
class WayRecord:
    """An ordered list of node references plus the way's OSM tags."""

    node_refs: tuple[int, ...]
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def highway(self) -> str | None:
        return self.tags.get("highway")


@dataclass(frozen=True, slots=True)
class MapData:
    nodes: tuple[NodeRecord, ...] = ()
    ways: tuple[WayRecord, ...] = ()
