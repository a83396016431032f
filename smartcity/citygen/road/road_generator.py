"""Road network generation.

Lays 3 to 5 full-span arterials across the city, then fills a 100-unit grid
with short secondary segments centred on the grid intersections. Segments are
not split or snapped where they cross.
"""
import math

from smartcity.citygen.dataclass import CityConfig, Point, Road, RoadType
from smartcity.citygen.road.road_manager import RoadManager
from smartcity.utils.logger import Logger
from smartcity.utils.seeded_random import SeededRandom

MIN_ARTERIALS = 3
MAX_ARTERIALS = 5
ARTERIAL_WIDTH = 20
# Arterials are placed between these fractions of the extent.
ARTERIAL_MIN_FRACTION = 0.2
ARTERIAL_MAX_FRACTION = 0.8

SECONDARY_BLOCK_SIZE = 100
SECONDARY_WIDTH = 12
# A secondary segment is skipped when its draw is <= this value.
SECONDARY_SKIP_THRESHOLD = 0.3


class RoadGenerator:
    """Generates the road network of a city."""

    def __init__(self, city_config: CityConfig, rng: SeededRandom, road_manager: RoadManager):
        """Initialize the road generator.

        Args:
            city_config: Extent of the city.
            rng: Random stream shared with the other stages.
            road_manager: Receives the generated roads.
        """
        self.city_config = city_config
        self.rng = rng
        self.road_manager = road_manager
        self.logger = Logger.get_logger('RoadGenerator')

    def generate(self) -> None:
        """Generate arterials, then secondary streets."""
        self.generate_arterials()
        self.generate_secondary_streets()
        self.logger.info(
            f'Generated {len(self.road_manager.roads)} roads '
            f'({len(self.road_manager.roads_of_type(RoadType.ARTERIAL))} arterials)'
        )

    def generate_arterials(self) -> None:
        """Add the horizontal arterials first, then the vertical ones."""
        width = self.city_config.width
        height = self.city_config.height
        count = self.rng.random_int(MIN_ARTERIALS, MAX_ARTERIALS)

        for _ in range(count // 2):
            y = self.rng.random_float(ARTERIAL_MIN_FRACTION, ARTERIAL_MAX_FRACTION) * height
            self.road_manager.add_road(Road(RoadType.ARTERIAL, (Point(0, y), Point(width, y)), ARTERIAL_WIDTH))

        for _ in range(math.ceil(count / 2)):
            x = self.rng.random_float(ARTERIAL_MIN_FRACTION, ARTERIAL_MAX_FRACTION) * width
            self.road_manager.add_road(Road(RoadType.ARTERIAL, (Point(x, 0), Point(x, height)), ARTERIAL_WIDTH))

    def generate_secondary_streets(self) -> None:
        """Visit every interior grid intersection and maybe add two short segments."""
        half = SECONDARY_BLOCK_SIZE / 2
        x = SECONDARY_BLOCK_SIZE
        while x < self.city_config.width:
            y = SECONDARY_BLOCK_SIZE
            while y < self.city_config.height:
                if self.rng.random() > SECONDARY_SKIP_THRESHOLD:
                    self.road_manager.add_road(
                        Road(RoadType.SECONDARY, (Point(x, y - half), Point(x, y + half)), SECONDARY_WIDTH)
                    )
                if self.rng.random() > SECONDARY_SKIP_THRESHOLD:
                    self.road_manager.add_road(
                        Road(RoadType.SECONDARY, (Point(x - half, y), Point(x + half, y)), SECONDARY_WIDTH)
                    )
                y += SECONDARY_BLOCK_SIZE
            x += SECONDARY_BLOCK_SIZE
