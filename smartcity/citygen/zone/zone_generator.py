"""Zone grid generation.

The city extent is tiled into 400-unit cells. Each cell is classified by
sampling the noise field at its minimum corner and gets a random density.
"""
from typing import List, Optional

from smartcity.citygen.dataclass import Bounds, CityConfig, Zone, ZoneType
from smartcity.utils.logger import Logger
from smartcity.utils.noise import NoiseField
from smartcity.utils.seeded_random import SeededRandom

ZONE_SIZE = 400
NOISE_SCALE = 1000
MIN_DENSITY = 0.3
MAX_DENSITY = 1.0

# Checked in order; the first threshold the noise value exceeds wins.
ZONE_THRESHOLDS = (
    (0.6, ZoneType.COMMERCIAL),
    (0.3, ZoneType.RESIDENTIAL),
    (0.0, ZoneType.INDUSTRIAL),
    (-0.2, ZoneType.GREEN),
)
FALLBACK_ZONE = ZoneType.CIVIC


def classify_zone(noise_value: float) -> ZoneType:
    """Map a noise value to a zone type."""
    for threshold, zone_type in ZONE_THRESHOLDS:
        if noise_value > threshold:
            return zone_type
    return FALLBACK_ZONE


class ZoneGenerator:
    """Generates the zone grid of a city."""

    def __init__(self, city_config: CityConfig, rng: SeededRandom, noise: NoiseField):
        """Initialize the zone generator.

        Args:
            city_config: Extent of the city.
            rng: Random stream shared with the other stages.
            noise: Noise field used for classification.
        """
        self.city_config = city_config
        self.rng = rng
        self.noise = noise
        self.zones: List[Zone] = []
        self.logger = Logger.get_logger('ZoneGenerator')

    def generate(self) -> List[Zone]:
        """Tile the extent column by column (x outer, y inner).

        Cells on the far edges are clipped to the extent.

        Returns:
            The generated zones.
        """
        width = self.city_config.width
        height = self.city_config.height
        x = 0
        while x < width:
            y = 0
            while y < height:
                zone_type = classify_zone(self.noise.sample(x / NOISE_SCALE, y / NOISE_SCALE))
                bounds = Bounds(x, y, min(ZONE_SIZE, width - x), min(ZONE_SIZE, height - y))
                density = self.rng.random_float(MIN_DENSITY, MAX_DENSITY)
                self.zones.append(Zone(zone_type, bounds, density))
                y += ZONE_SIZE
            x += ZONE_SIZE

        self.logger.info(f'Generated {len(self.zones)} zones')
        return self.zones

    def zone_at(self, x: float, y: float) -> Optional[Zone]:
        """Return the zone containing (x, y), or None outside the extent."""
        if not (0 <= x < self.city_config.width and 0 <= y < self.city_config.height):
            return None
        rows = -(-self.city_config.height // ZONE_SIZE)
        index = int(x // ZONE_SIZE) * int(rows) + int(y // ZONE_SIZE)
        if index >= len(self.zones):
            return None
        return self.zones[index]

    def clear(self) -> None:
        self.zones = []
