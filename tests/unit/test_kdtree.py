from __future__ import annotations

import math
import random

import pytest

from roadnav.domain.algorithms.graph_builder import build_graph
from roadnav.domain.algorithms.kdtree import KDTree
from roadnav.domain.exceptions import EmptyIndex
from roadnav.domain.models import NodeRecord, Vertex, WayRecord


def _random_vertices(rng: random.Random, n: int) -> list[Vertex]:
    return [
        Vertex(id=i, lon=0.0, lat=0.0, x=rng.uniform(-1, 1), y=rng.uniform(-1, 1))
        for i in range(n)
    ]


def _brute_force(vertices: list[Vertex], x: float, y: float) -> int:
    return min(vertices, key=lambda v: math.hypot(x - v.x, y - v.y)).id


def test_empty_tree_raises() -> None:
    tree = KDTree([])

    assert len(tree) == 0
    with pytest.raises(EmptyIndex):
        tree.nearest(0.0, 0.0)


def test_single_vertex_is_always_nearest() -> None:
    tree = KDTree([Vertex(id=7, lon=0.0, lat=0.0, x=0.3, y=-0.2)])

    assert tree.nearest(100.0, 100.0) == 7


def test_query_at_infinity_still_returns_a_vertex() -> None:
    vertices = _random_vertices(random.Random(3), 9)
    tree = KDTree(vertices)

    assert tree.nearest(math.inf, 0.0) in {v.id for v in vertices}
    assert tree.nearest(-math.inf, 0.25) in {v.id for v in vertices}


def test_root_is_lower_median_on_x() -> None:
    vertices = [
        Vertex(id=i, lon=0.0, lat=0.0, x=float(x), y=0.0)
        for i, x in enumerate([4, 1, 3, 2])
    ]
    tree = KDTree(vertices)

    # Sorted by x: 1, 2, 3, 4 -> index 4 // 2 = 2 -> x == 3.
    assert tree.root is not None
    assert tree.root.vertex.x == 3.0


def test_exact_match_returns_that_vertex() -> None:
    rng = random.Random(1)
    vertices = _random_vertices(rng, 200)
    tree = KDTree(vertices)

    for v in vertices[:50]:
        assert tree.nearest(v.x, v.y) == v.id


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
@pytest.mark.parametrize("n", [2, 17, 500])
def test_nearest_matches_brute_force(seed: int, n: int) -> None:
    rng = random.Random(seed)
    vertices = _random_vertices(rng, n)
    tree = KDTree(vertices)

    for _ in range(200):
        x = rng.uniform(-1.5, 1.5)
        y = rng.uniform(-1.5, 1.5)
        assert tree.nearest(x, y) == _brute_force(vertices, x, y)


def test_graph_nearest_vertex_matches_brute_force_on_map_coordinates() -> None:
    rng = random.Random(42)
    nodes = [
        NodeRecord(
            id=i,
            lon=rng.uniform(-122.30, -122.21),
            lat=rng.uniform(37.82, 37.89),
        )
        for i in range(300)
    ]
    ways = [
        WayRecord(node_refs=(i, i + 1), tags={"highway": "residential"})
        for i in range(0, 300, 2)
    ]
    g = build_graph(nodes, ways)

    for _ in range(100):
        lon = rng.uniform(-122.31, -122.20)
        lat = rng.uniform(37.81, 37.90)
        x = g.projection.x(lon, lat)
        y = g.projection.y(lon, lat)
        expected = min(
            g.vertex_ids(), key=lambda v: math.hypot(x - g.x(v), y - g.y(v))
        )
        assert g.nearest_vertex(lon, lat) == expected
