from .routing import (
    EmptyIndex,
    MalformedInput,
    RouteCancelled,
    RoutingError,
    VertexNotFound,
)

__all__ = [
    "EmptyIndex",
    "MalformedInput",
    "RouteCancelled",
    "RoutingError",
    "VertexNotFound",
]
