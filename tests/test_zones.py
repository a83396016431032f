import pytest

from smartcity.citygen.dataclass import CityConfig, ZoneType
from smartcity.citygen.zone.zone_generator import (ZONE_SIZE, ZoneGenerator,
                                                   classify_zone)
from smartcity.utils.noise import NoiseField
from smartcity.utils.seeded_random import SeededRandom


def _generate(seed=12345, width=2000, height=2000):
    config = CityConfig(seed=seed, width=width, height=height)
    generator = ZoneGenerator(config, SeededRandom(seed), NoiseField(seed))
    generator.generate()
    return generator


@pytest.mark.parametrize('value, expected', [
    (0.61, ZoneType.COMMERCIAL),
    (0.6, ZoneType.RESIDENTIAL),
    (0.31, ZoneType.RESIDENTIAL),
    (0.3, ZoneType.INDUSTRIAL),
    (0.01, ZoneType.INDUSTRIAL),
    (0.0, ZoneType.GREEN),
    (-0.19, ZoneType.GREEN),
    (-0.2, ZoneType.CIVIC),
    (-1.0, ZoneType.CIVIC),
])
def test_classify_zone_thresholds(value, expected):
    assert classify_zone(value) == expected


def test_zone_types_follow_noise():
    generator = _generate()
    noise = NoiseField(12345)
    for zone in generator.zones:
        assert zone.type == classify_zone(noise.sample(zone.bounds.x / 1000, zone.bounds.y / 1000))


def test_origin_cell_uses_noise_at_origin():
    for seed in (1, 2, 3):
        assert _generate(seed).zones[0].type == classify_zone(NoiseField(seed).sample(0, 0))


def test_grid_is_column_major():
    zones = _generate().zones
    assert len(zones) == 25
    assert (zones[0].bounds.x, zones[0].bounds.y) == (0, 0)
    assert (zones[1].bounds.x, zones[1].bounds.y) == (0, ZONE_SIZE)
    assert (zones[5].bounds.x, zones[5].bounds.y) == (ZONE_SIZE, 0)


@pytest.mark.parametrize('width, height', [(2000, 2000), (1000, 900), (350, 1210)])
def test_zones_tile_extent(width, height):
    zones = _generate(width=width, height=height).zones
    assert sum(zone.bounds.area() for zone in zones) == pytest.approx(width * height)
    for zone in zones:
        assert zone.bounds.width <= ZONE_SIZE and zone.bounds.height <= ZONE_SIZE
        assert zone.bounds.max_x <= width and zone.bounds.max_y <= height

    step = 50
    for i in range(int(width // step)):
        for j in range(int(height // step)):
            x, y = i * step + step / 2, j * step + step / 2
            assert sum(1 for zone in zones if zone.bounds.contains(x, y)) == 1


def test_full_cells_when_extent_is_a_multiple():
    zones = _generate().zones
    assert all(zone.bounds.width == ZONE_SIZE and zone.bounds.height == ZONE_SIZE for zone in zones)


def test_density_range():
    for seed in range(5):
        assert all(0.3 <= zone.density <= 1.0 for zone in _generate(seed).zones)


def test_different_seeds_give_different_zones():
    a = [zone.to_dict() for zone in _generate(1).zones]
    b = [zone.to_dict() for zone in _generate(2).zones]
    assert a != b


def test_zone_at():
    generator = _generate(width=1000, height=900)
    zone = generator.zone_at(450, 850)
    assert zone.bounds.contains(450, 850)
    assert generator.zone_at(-1, 10) is None
    assert generator.zone_at(10, 900) is None
