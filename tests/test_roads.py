import pytest

from smartcity.citygen.dataclass import Bounds, CityConfig, RoadType
from smartcity.citygen.road.road_generator import (ARTERIAL_WIDTH,
                                                   SECONDARY_BLOCK_SIZE,
                                                   SECONDARY_WIDTH,
                                                   RoadGenerator)
from smartcity.citygen.road.road_manager import RoadManager
from smartcity.utils.seeded_random import SeededRandom


def _generate(seed, width=2000, height=2000):
    config = CityConfig(seed=seed, width=width, height=height)
    manager = RoadManager(Bounds(0, 0, width, height))
    RoadGenerator(config, SeededRandom(seed), manager).generate()
    return manager


def test_arterial_count_matches_first_draw():
    manager = _generate(12345)
    expected = SeededRandom(12345).random_int(3, 5)
    arterials = manager.roads_of_type(RoadType.ARTERIAL)
    assert len(arterials) == expected
    assert 3 <= len(arterials) <= 5


@pytest.mark.parametrize('seed', [1, 2, 3, 12345, 999])
def test_arterials_come_first_horizontal_then_vertical(seed):
    manager = _generate(seed)
    arterials = manager.roads_of_type(RoadType.ARTERIAL)
    assert manager.roads[:len(arterials)] == arterials

    horizontal = len(arterials) // 2
    for road in arterials[:horizontal]:
        assert road.start.y == road.end.y
        assert (road.start.x, road.end.x) == (0, 2000)
        assert 0.2 * 2000 <= road.start.y <= 0.8 * 2000
    for road in arterials[horizontal:]:
        assert road.start.x == road.end.x
        assert (road.start.y, road.end.y) == (0, 2000)
        assert 0.2 * 2000 <= road.start.x <= 0.8 * 2000
    assert all(road.width == ARTERIAL_WIDTH for road in arterials)


def test_secondary_segments_are_centered_on_grid():
    manager = _generate(12345)
    secondaries = manager.roads_of_type(RoadType.SECONDARY)
    assert secondaries
    for road in secondaries:
        assert road.width == SECONDARY_WIDTH
        assert road.length == SECONDARY_BLOCK_SIZE
        cx = (road.start.x + road.end.x) / 2
        cy = (road.start.y + road.end.y) / 2
        assert cx % SECONDARY_BLOCK_SIZE == 0 and 100 <= cx < 2000
        assert cy % SECONDARY_BLOCK_SIZE == 0 and 100 <= cy < 2000


def test_secondary_count_bounded_by_intersections():
    manager = _generate(12345)
    intersections = 19 * 19
    assert len(manager.roads_of_type(RoadType.SECONDARY)) <= 2 * intersections


def test_small_extent_has_no_secondaries():
    manager = _generate(5, width=100, height=100)
    assert manager.roads_of_type(RoadType.SECONDARY) == []


@pytest.mark.parametrize('seed', range(10))
def test_pedestrian_roads_are_never_generated(seed):
    manager = _generate(seed)
    assert manager.roads_of_type(RoadType.PEDESTRIAN) == []


def test_same_seed_same_roads():
    assert _generate(77).roads == _generate(77).roads


def test_roads_in_returns_generation_order():
    manager = _generate(12345)
    everything = manager.get_roads_in(Bounds(-50, -50, 2100, 2100))
    assert everything == manager.roads

    corner = manager.get_roads_in(Bounds(90, 90, 20, 20))
    assert all(road.bounds.intersects(Bounds(90, 90, 20, 20)) for road in corner)
