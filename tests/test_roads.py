"""Tests for the weighted graph and the road network."""

from __future__ import annotations

import math
from collections import deque

import pytest

from realm_builder.block import Block
from realm_builder.entities import Road
from realm_builder.graph import Graph
from realm_builder.growth import DistrictGrowthEngine
from realm_builder.point import Point
from realm_builder.random import SeededRandom
from realm_builder.roads import RoadNetworkBuilder


def square_block(id, cx, cy, half=5):
    return Block(id, [(cx - half, cy - half), (cx + half, cy - half),
                      (cx + half, cy + half), (cx - half, cy + half)], Block.DISTRICT)


def reachable(edges, count):
    adjacency = {i: set() for i in range(count)}
    for a, b, _ in edges:
        adjacency[a].add(b)
        adjacency[b].add(a)
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return seen


class TestMinimumSpanningTree:
    def test_prim_on_known_points(self) -> None:
        points = [Point(0, 0), Point(10, 0), Point(10, 10), Point(100, 100)]
        graph = Graph.complete(points, lambda a, b: a.distance(b))
        edges = graph.minimum_spanning_tree(0)

        assert [(a, b) for a, b, _ in edges] == [(0, 1), (1, 2), (2, 3)]
        assert math.isclose(edges[2][2], math.hypot(90, 90))

    def test_ties_keep_the_first_candidate(self) -> None:
        points = [Point(0, 0), Point(5, 0), Point(-5, 0)]
        graph = Graph.complete(points, lambda a, b: a.distance(b))
        assert graph.minimum_spanning_tree(0) == [(0, 1, 5.0), (0, 2, 5.0)]

    def test_empty_and_single_node(self) -> None:
        assert Graph().minimum_spanning_tree() == []
        assert Graph.complete([Point(1, 1)], lambda a, b: 0).minimum_spanning_tree() == []

    def test_complete_graph_links_every_pair(self) -> None:
        graph = Graph.complete(list(range(5)), lambda a, b: abs(a - b))
        for node in graph.nodes:
            assert len(node.links) == 4
            assert [n.index for n in node.links] == [i for i in range(5) if i != node.index]


class TestRoadNetwork:
    @pytest.mark.parametrize("seed", [1, 2, 42, 777])
    def test_tree_connects_every_block(self, seed) -> None:
        rng = SeededRandom(seed)
        engine = DistrictGrowthEngine(rng)
        engine.build(Point(400, 300), 20)
        network = RoadNetworkBuilder(rng, engine.blocks)
        edges = network.build()

        assert len(edges) == len(engine.blocks) - 1
        assert reachable(edges, len(engine.blocks)) == set(range(len(engine.blocks)))

        tree_roads = [r for r in network.roads if r.type != Road.ALLEY]
        assert len(tree_roads) == len(edges)

    @pytest.mark.parametrize("seed", [3, 4, 5])
    def test_road_classification(self, seed) -> None:
        rng = SeededRandom(seed)
        engine = DistrictGrowthEngine(rng)
        engine.build(Point(400, 300), 25)
        network = RoadNetworkBuilder(rng, engine.blocks)
        network.build()

        for road in network.roads:
            if road.type == Road.MAIN:
                assert road.length < 80
                assert 4 <= road.width <= 7
            elif road.type == Road.SECONDARY:
                assert road.length >= 80
                assert 4 <= road.width <= 7
            else:
                assert road.type == Road.ALLEY
                assert road.length < 150
                assert 3 <= road.width <= 5

    def test_known_layout(self) -> None:
        blocks = [square_block(0, 0, 0), square_block(1, 50, 0), square_block(2, 200, 0)]
        network = RoadNetworkBuilder(SeededRandom(1), blocks)
        edges = network.build()

        assert [(a, b) for a, b, _ in edges] == [(0, 1), (1, 2)]
        assert [r.type for r in network.roads[:2]] == [Road.MAIN, Road.SECONDARY]

    def test_roads_keep_centroids_by_value(self) -> None:
        blocks = [square_block(0, 0, 0), square_block(1, 50, 0)]
        network = RoadNetworkBuilder(SeededRandom(1), blocks)
        network.build()

        for v in blocks[1].vertices:
            v.offset(100, 100)

        road = network.roads[0]
        assert (road.end.x, road.end.y) == (50.0, 0.0)

    def test_single_block_has_no_roads(self) -> None:
        network = RoadNetworkBuilder(SeededRandom(1), [square_block(0, 0, 0)])
        assert network.build() == []
        assert network.roads == []

    def test_road_dict_shape(self) -> None:
        road = Road(Point(0, 0), Point(3, 4), 5, Road.MAIN)
        assert road.to_dict() == {
            "from": {"x": 0.0, "y": 0.0},
            "to": {"x": 3.0, "y": 4.0},
            "width": 5,
            "type": "main",
        }
