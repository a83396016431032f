"""Building generation.

Each zone cell is sampled on an 80-unit sub-grid inset 10 units from the
cell edges. A sub-grid point receives a building with probability
``0.8 * zone.density``. After the grid pass the two fixed special buildings
are appended without drawing from the random stream.
"""
import math
from typing import Iterable, List

from smartcity.citygen.building.building_manager import BuildingManager
from smartcity.citygen.building.building_meta import (building_height,
                                                      building_meta,
                                                      height_class)
from smartcity.citygen.dataclass import (Building, CityConfig, FacilityMeta,
                                         Position, Zone, ZoneType)
from smartcity.utils.logger import Logger
from smartcity.utils.noise import NoiseField
from smartcity.utils.seeded_random import SeededRandom

BLOCK_SIZE = 80
ZONE_MARGIN = 10
DENSITY_FACTOR = 0.8
VERTICAL_GARDEN_PROBABILITY = 0.4
MIN_FOOTPRINT = 15
MAX_FOOTPRINT = 30

CULTURAL_CENTER_ID = 'cultural-center'
WATER_TREATMENT_ID = 'water-treatment'


class BuildingGenerator:
    """Places buildings inside zone cells."""

    def __init__(self, city_config: CityConfig, rng: SeededRandom, noise: NoiseField, building_manager: BuildingManager):
        """Initialize the building generator.

        Args:
            city_config: Extent of the city.
            rng: Random stream shared with the other stages.
            noise: Noise field used for heights.
            building_manager: Receives the generated buildings.
        """
        self.city_config = city_config
        self.rng = rng
        self.noise = noise
        self.building_manager = building_manager
        self.next_id = 0
        self.logger = Logger.get_logger('BuildingGenerator')

    def generate(self, zones: Iterable[Zone]) -> List[Building]:
        """Fill every zone, then add the special buildings.

        Args:
            zones: Zones in generation order.

        Returns:
            All buildings, special buildings last.
        """
        for zone in zones:
            self.generate_buildings_in_zone(zone)
        grid_count = len(self.building_manager.buildings)
        self.generate_special_buildings()
        self.logger.info(f'Generated {grid_count} grid buildings and 2 special buildings')
        return self.building_manager.buildings

    def generate_buildings_in_zone(self, zone: Zone) -> None:
        """Walk the zone's sub-grid (x outer, y inner) and place buildings."""
        bounds = zone.bounds
        x = bounds.x + ZONE_MARGIN
        while x < bounds.max_x - ZONE_MARGIN:
            y = bounds.y + ZONE_MARGIN
            while y < bounds.max_y - ZONE_MARGIN:
                if self.rng.random() < zone.density * DENSITY_FACTOR:
                    self.building_manager.add_building(self.create_building(zone, x, y))
                y += BLOCK_SIZE
            x += BLOCK_SIZE

    def create_building(self, zone: Zone, x: float, y: float) -> Building:
        """Build one grid building at plan position (x, y).

        Draw order: vertical garden (non-industrial zones only), rotation,
        width, depth. Height comes from the noise field and draws nothing.
        """
        height = building_height(self.noise, x, y, zone.type)
        has_vertical_garden = zone.type != ZoneType.INDUSTRIAL and self.rng.random() < VERTICAL_GARDEN_PROBABILITY
        rotation = self.rng.random() * math.pi * 2
        width = self.rng.random_float(MIN_FOOTPRINT, MAX_FOOTPRINT)
        depth = self.rng.random_float(MIN_FOOTPRINT, MAX_FOOTPRINT)

        building = Building(
            id=f'building-{self.next_id}',
            type=height_class(height),
            position=Position(x, 0, y),
            rotation=rotation,
            width=width,
            depth=depth,
            height=height,
            zone=zone.type,
            has_vertical_garden=has_vertical_garden,
            meta=building_meta(zone.type, height),
        )
        self.next_id += 1
        return building

    def generate_special_buildings(self) -> None:
        """Append the cultural center and the water treatment plant."""
        width = self.city_config.width
        height = self.city_config.height
        self.building_manager.add_building(Building(
            id=CULTURAL_CENTER_ID,
            type='cultural',
            position=Position(width / 2, 0, height / 2),
            rotation=0.0,
            width=60,
            depth=80,
            height=15,
            zone=ZoneType.CIVIC,
            has_vertical_garden=True,
            meta=FacilityMeta(capacity=2000, energy_use=5000, staff=50),
        ))
        self.building_manager.add_building(Building(
            id=WATER_TREATMENT_ID,
            type='industrial',
            position=Position(width * 0.2, 0, height * 0.8),
            rotation=0.0,
            width=80,
            depth=60,
            height=8,
            zone=ZoneType.INDUSTRIAL,
            has_vertical_garden=False,
            meta=FacilityMeta(capacity=10000, energy_use=8000, staff=30),
        ))
