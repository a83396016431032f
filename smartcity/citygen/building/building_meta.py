"""Derived building figures: height, height class and per-zone metadata."""
import math

from smartcity.citygen.dataclass import (BuildingMeta, CivicMeta,
                                         CommercialMeta, GeneralMeta,
                                         ResidentialMeta, ZoneType)
from smartcity.utils.noise import NoiseField

HEIGHT_NOISE_SCALE = 50
HEIGHT_NOISE_AMPLITUDE = 4
MIN_HEIGHT = 1
BASE_HEIGHTS = {
    ZoneType.COMMERCIAL: 8,
    ZoneType.RESIDENTIAL: 4,
}
DEFAULT_BASE_HEIGHT = 6

LOW_RISE_MAX = 4
MID_RISE_MAX = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf."""
    return math.floor(value + 0.5)


def building_height(noise: NoiseField, x: float, y: float, zone_type: ZoneType) -> int:
    """Height of a building at plan position (x, y).

    Args:
        noise: Noise field of the city seed.
        x: Plan x coordinate.
        y: Plan y coordinate.
        zone_type: Zone the building belongs to.

    Returns:
        An integer height of at least 1.
    """
    base = BASE_HEIGHTS.get(zone_type, DEFAULT_BASE_HEIGHT)
    perturbation = noise.sample(x / HEIGHT_NOISE_SCALE, y / HEIGHT_NOISE_SCALE) * HEIGHT_NOISE_AMPLITUDE
    return max(MIN_HEIGHT, round_half_up(base + perturbation))


def height_class(height: float) -> str:
    """Label a building by height alone."""
    if height <= LOW_RISE_MAX:
        return 'low-rise'
    if height <= MID_RISE_MAX:
        return 'mid-rise'
    return 'high-rise'


def _residential(height):
    return ResidentialMeta(capacity=math.floor(height * 2), energy_use=height * 100)


def _commercial(height):
    return CommercialMeta(capacity=math.floor(height * 5), energy_use=height * 200)


def _civic(height):
    return CivicMeta(capacity=math.floor(height * 10), energy_use=height * 150, staff=math.floor(height * 2))


def _general(height):
    return GeneralMeta(capacity=math.floor(height * 3), energy_use=height * 120)


META_FACTORIES = {
    ZoneType.RESIDENTIAL: _residential,
    ZoneType.COMMERCIAL: _commercial,
    ZoneType.CIVIC: _civic,
}


def building_meta(zone_type: ZoneType, height: float) -> BuildingMeta:
    """Metadata for a grid building; industrial and green zones share one formula."""
    return META_FACTORIES.get(zone_type, _general)(height)
