"""End-to-end tests for CityGenerator."""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from realm_builder import CityGenerator, generate_city
from realm_builder.context import CitySize
from realm_builder.entities import Label, PointOfInterest, Road
from realm_builder.polygon import Polygon
from realm_builder.random import SeededRandom


def layout(city):
    d = city.to_dict()
    return d["city"], d["stats"]


def connected(edges, count):
    adjacency = {i: [] for i in range(count)}
    for a, b, _ in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = {0}
    queue = deque([0])
    while queue:
        for other in adjacency[queue.popleft()]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return len(seen) == count


class TestDeterminism:
    @pytest.mark.parametrize("tags", [(), ("city-walls", "forests"), ("chaotic", "lake", "backdoor")])
    def test_same_inputs_same_city(self, tags) -> None:
        a = generate_city(1234, "medium", tags)
        b = generate_city(1234, "medium", tags)
        assert layout(a) == layout(b)

    def test_different_seeds_differ(self) -> None:
        assert layout(generate_city(1, "small")) != layout(generate_city(2, "small"))

    def test_generate_twice_on_one_instance(self) -> None:
        gen = CityGenerator(99, "large", ["citadel", "multi-level"])
        assert layout(gen.generate()) == layout(gen.generate())

    def test_string_seed_is_coerced(self) -> None:
        assert layout(generate_city("42", "small")) == layout(generate_city(42, "small"))

    def test_tag_order_does_not_matter(self) -> None:
        a = generate_city(5, "small", ["forests", "city-walls"])
        b = generate_city(5, "small", ["city-walls", "forests", "forests"])
        assert layout(a) == layout(b)
        assert a.city.tags == ("city-walls", "forests")


class TestSmallCity:
    def test_seed_42_small(self) -> None:
        budget = SeededRandom(42).random_int(3, 6)
        city = generate_city(42, "small")

        assert city.meta.seed == 42
        assert city.city.size == CitySize(budget, 150)
        assert 2 <= city.stats.total_blocks <= budget + 1

        tree_roads = [r for r in city.city.roads if r.type != Road.ALLEY]
        assert len(tree_roads) == city.stats.total_blocks - 1
        assert city.city.walls == ()
        assert city.city.water_areas == ()

    def test_stats_match_layout(self) -> None:
        city = generate_city(8, "medium", ["city-walls"])
        assert city.stats.total_blocks == len(city.city.blocks)
        assert city.stats.total_roads == len(city.city.roads)
        assert city.stats.total_pois == len(city.city.pois)
        assert city.stats.total_buildings == len(city.city.buildings)

    def test_blocks_are_a_tree(self) -> None:
        city = generate_city(17, "large")
        blocks = city.city.blocks
        assert [b.id for b in blocks] == list(range(len(blocks)))
        assert blocks[0].parent_id is None
        for block in blocks[1:]:
            parent = blocks[block.parent_id]
            assert parent.id < block.id
            assert block.id in parent.children
            assert block.depth == parent.depth + 1


class TestWalls:
    def test_walls_and_gates(self) -> None:
        city = generate_city(7, "medium", ["city-walls"])
        gates = [p for p in city.city.pois if p.type == "Gate"]

        assert len(city.city.walls) >= 3
        assert 2 <= len(gates) <= 4

    @pytest.mark.parametrize("seed", [3, 7, 21, 600])
    def test_wall_encloses_all_blocks(self, seed) -> None:
        city = generate_city(seed, "large", ["city-walls"])
        wall = Polygon(city.city.walls)
        for block in city.city.blocks:
            for v in block.vertices:
                assert wall.contains_point(v)

    @pytest.mark.parametrize("seed", range(1, 21))
    def test_wall_is_built_before_the_citadel(self, seed) -> None:
        # The citadel is added after the wall, so the wall only covers grown blocks
        plain = generate_city(seed, "small", ["city-walls"])
        fortified = generate_city(seed, "small", ["city-walls", "citadel"])

        assert [p.to_dict() for p in fortified.city.walls] == [p.to_dict() for p in plain.city.walls]
        wall = Polygon(fortified.city.walls)
        for block in fortified.city.blocks:
            if block.type == "citadel":
                continue
            for v in block.vertices:
                assert wall.contains_point(v)

    def test_backdoor_on_walled_city(self) -> None:
        city = generate_city(7, "medium", ["city-walls", "backdoor"])
        secret = [p for p in city.city.pois if p.secret]
        assert len(secret) == 1
        assert secret[0].type == "Secret Entrance"


class TestWater:
    def test_dry_wins_over_lake(self) -> None:
        city = generate_city(1, "medium", ["lake", "dry"])
        assert city.city.water_areas == ()
        assert city.to_dict()["city"]["waterAreas"] == []

    def test_lake(self) -> None:
        city = generate_city(1, "medium", ["lake"])
        assert len(city.city.water_areas) == 1
        assert len(city.city.water_areas[0]) == 24

    def test_waterfront_and_docks(self) -> None:
        city = generate_city(3, "medium", ["waterfront"])
        docks = [p for p in city.city.props if p.type == "dock"]
        assert len(city.city.water_areas) == 1
        assert 3 <= len(docks) <= 8


class TestSizes:
    def test_named_sizes(self) -> None:
        rng = SeededRandom(11)
        small = rng.random_int(3, 6)
        medium = rng.random_int(6, 12)
        large = rng.random_int(12, 25)

        assert CityGenerator(11, "small").size == CitySize(small, 150)
        assert CityGenerator(11, "medium").size == CitySize(medium, 250)
        assert CityGenerator(11, "large").size == CitySize(large, 400)

    @pytest.mark.parametrize("size", ["huge", True, None, [3], float("nan")])
    def test_unknown_size_falls_back_to_medium(self, size) -> None:
        assert CityGenerator(11, size).size == CityGenerator(11, "medium").size

    @pytest.mark.parametrize("size, expected", [
        (500, CitySize(200, 800)),
        (0, CitySize(1, 20)),
        (-4, CitySize(1, 20)),
        (10, CitySize(10, 200)),
        (7.9, CitySize(7, 140)),
        (50, CitySize(50, 800)),
        (float("inf"), CitySize(200, 800)),
        (float("-inf"), CitySize(1, 20)),
    ])
    def test_numeric_sizes(self, size, expected) -> None:
        assert CityGenerator(11, size).size == expected

    @pytest.mark.parametrize("blocks", [1, 2, 5, 30, 120])
    def test_numeric_budget_is_respected(self, blocks) -> None:
        for seed in (1, 2, 3):
            city = generate_city(seed, blocks)
            assert 2 <= city.stats.total_blocks <= blocks + 1

    def test_size_does_not_shift_the_sequence(self) -> None:
        # The central block depends only on the seed
        small = generate_city(64, "small")
        large = generate_city(64, "large")
        assert small.city.blocks[0].to_dict() == large.city.blocks[0].to_dict()


class TestRoads:
    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_every_block_reachable(self, seed) -> None:
        gen = CityGenerator(seed, "large", ["citadel"])
        city = gen.generate()
        assert connected(gen.context.road_edges, city.stats.total_blocks)


class TestPointsOfInterest:
    @pytest.mark.parametrize("seed", [1, 2, 3, 1000, 424242])
    def test_generated_pois_are_spaced(self, seed) -> None:
        city = generate_city(seed, "medium")
        assert len(city.city.pois) <= 15
        for a, b in itertools.combinations(city.city.pois, 2):
            assert a.position.distance(b.position) >= 25

    def test_add_poi_and_label(self) -> None:
        city = generate_city(2, "small")
        pois_before = city.stats.total_pois

        city.add_poi({"x": 10, "y": 20, "type": "Shrine", "label": "Lonely Shrine"})
        city.add_poi(PointOfInterest(1, 2, "Well", "Old Well", "well"))
        city.add_label(Label(5, 5, "Here be dragons"))
        city.add_label({"x": 1, "y": 1, "text": "North"})

        assert len(city.city.pois) == pois_before + 2
        assert city.city.pois[-2].icon == "shrine"
        assert [label.text for label in city.city.labels][-2:] == ["Here be dragons", "North"]
        assert city.city.labels[-1].size == 12
        assert city.stats.total_pois == pois_before


class TestInputs:
    def test_random_seed_when_missing(self) -> None:
        for seed in (None, 0):
            gen = CityGenerator(seed)
            assert 1 <= gen.seed <= 999999

    @pytest.mark.parametrize("seed, error", [("abc", ValueError), (object(), TypeError)])
    def test_bad_seed(self, seed, error) -> None:
        with pytest.raises(error):
            CityGenerator(seed)

    @pytest.mark.parametrize("tags", ["city-walls", b"city-walls", 5, [1, 2], ["ok", None]])
    def test_bad_tags(self, tags) -> None:
        with pytest.raises(TypeError):
            CityGenerator(1, "small", tags)

    def test_no_tags(self) -> None:
        assert CityGenerator(1, "small", None).tags == []

    def test_meta(self) -> None:
        meta = generate_city(3, "small").to_dict()["meta"]
        assert meta["seed"] == 3
        assert meta["generatorId"] == "Arcane Realm Builder v1.0"
        assert "T" in meta["generatedAt"]
