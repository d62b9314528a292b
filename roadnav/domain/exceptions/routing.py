from __future__ import annotations


class RoutingError(Exception):
    """Base exception for road-network and route calculation failures."""


class MalformedInput(RoutingError, ValueError):
    """Raised when ingested map data cannot be turned into a graph."""


class VertexNotFound(RoutingError, LookupError):
    """Raised when a lookup references a vertex id absent from the graph."""

    def __init__(self, vertex_id: int) -> None:
        super().__init__(f"Vertex not found: {vertex_id}")
        self.vertex_id = vertex_id


class EmptyIndex(RoutingError):
    """Raised when a spatial query runs against a graph with no vertices."""


class RouteCancelled(RoutingError):
    """Raised when a route search is cancelled before reaching its destination."""
