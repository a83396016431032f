"""City generator: runs the road, zone, building and sensor stages in order."""
from enum import Enum, auto
from typing import List, Optional, Tuple

from smartcity.citygen.building.building_generator import BuildingGenerator
from smartcity.citygen.building.building_manager import BuildingManager
from smartcity.citygen.city.city_layout import CityLayout
from smartcity.citygen.dataclass import (Bounds, Building, CityConfig, Road,
                                         Sensor, Zone)
from smartcity.citygen.road.road_generator import RoadGenerator
from smartcity.citygen.road.road_manager import RoadManager
from smartcity.citygen.sensor.sensor_generator import SensorGenerator
from smartcity.citygen.zone.zone_generator import ZoneGenerator
from smartcity.config import Config
from smartcity.utils.logger import Logger
from smartcity.utils.noise import NoiseField
from smartcity.utils.quadtree import QuadTree
from smartcity.utils.seeded_random import SeededRandom


class GenerationState(Enum):
    """Enum to track the generation state."""
    CONSTRUCTED = auto()
    GENERATING_ROADS = auto()
    GENERATING_ZONES = auto()
    GENERATING_BUILDINGS = auto()
    GENERATING_SENSORS = auto()
    COMPLETED = auto()
    FAILED = auto()


STAGE_ORDER = (
    GenerationState.GENERATING_ROADS,
    GenerationState.GENERATING_ZONES,
    GenerationState.GENERATING_BUILDINGS,
    GenerationState.GENERATING_SENSORS,
    GenerationState.COMPLETED,
)


class CityGenerator:
    """Generates one city from a CityConfig.

    The generator owns a single random stream and a single noise field. The
    stages share the stream, so their order is part of the output: roads,
    zones, buildings, sensors. A generator runs once; calling ``generate``
    again raises ``RuntimeError``.
    """

    def __init__(self, city_config: CityConfig, config: Config = None):
        """Initialize the city generator.

        Args:
            city_config: Seed and extent of the city.
            config: Optional Config for spatial index settings. When given,
                its logging section also reconfigures the loggers.

        Raises:
            TypeError: If ``city_config`` is not a CityConfig.
        """
        if not isinstance(city_config, CityConfig):
            raise TypeError(f'Expected CityConfig, got {type(city_config).__name__}')
        self.city_config = city_config
        if config is None:
            config = Config()
        else:
            Logger.configure_from(config)
        self.config = config
        self.logger = Logger.get_logger('CityGenerator')

        self.rng = SeededRandom(city_config.seed)
        self.noise = NoiseField(city_config.seed)

        extent = Bounds(0, 0, city_config.width, city_config.height)
        max_objects = self.config.get('citygen.quadtree.max_objects', 10)
        max_levels = self.config.get('citygen.quadtree.max_levels', 6)

        self.road_generator = RoadGenerator(city_config, self.rng, RoadManager(extent, max_objects, max_levels))
        self.zone_generator = ZoneGenerator(city_config, self.rng, self.noise)
        self.building_generator = BuildingGenerator(
            city_config, self.rng, self.noise, BuildingManager(extent, max_objects, max_levels)
        )
        self.sensor_generator = SensorGenerator(city_config, self.rng)
        self.sensor_quadtree = QuadTree[Sensor](extent, max_objects, max_levels)

        self.generation_state = GenerationState.CONSTRUCTED
        self._layout: Optional[CityLayout] = None

    def generate(self) -> CityLayout:
        """Run every remaining stage.

        Returns:
            The generated CityLayout.

        Raises:
            RuntimeError: If generation already completed or failed.
        """
        self._check_can_run()
        while not self.is_generation_complete():
            self.generate_step()
        return self._layout

    def generate_step(self) -> bool:
        """Run exactly one stage.

        Stages never interleave their random draws, so generating step by
        step yields the same city as ``generate``.

        Returns:
            bool: True if generation is complete.

        Raises:
            RuntimeError: If generation already completed or failed.
        """
        self._check_can_run()
        if self.generation_state == GenerationState.CONSTRUCTED:
            self.logger.info(
                f'Generating city seed={self.city_config.seed} '
                f'extent={self.city_config.width}x{self.city_config.height}'
            )
            self._advance()

        try:
            if self.generation_state == GenerationState.GENERATING_ROADS:
                self.road_generator.generate()
            elif self.generation_state == GenerationState.GENERATING_ZONES:
                self.zone_generator.generate()
            elif self.generation_state == GenerationState.GENERATING_BUILDINGS:
                self.building_generator.generate(self.zone_generator.zones)
            elif self.generation_state == GenerationState.GENERATING_SENSORS:
                for sensor in self.sensor_generator.generate():
                    self.sensor_quadtree.insert(sensor.bounds, sensor)
        except Exception:
            self.logger.exception(f'Generation failed during {self.generation_state.name}')
            self._fail()
            raise

        self._advance()
        if self.is_generation_complete():
            self._layout = CityLayout(
                config=self.city_config,
                zones=tuple(self.zone_generator.zones),
                roads=tuple(self.road_generator.road_manager.roads),
                buildings=tuple(self.building_generator.building_manager.buildings),
                sensors=tuple(self.sensor_generator.sensors),
            )
            self.logger.info(
                f'City complete: {len(self._layout.zones)} zones, {len(self._layout.roads)} roads, '
                f'{len(self._layout.buildings)} buildings, {len(self._layout.sensors)} sensors'
            )
        return self.is_generation_complete()

    def _check_can_run(self):
        if self.generation_state == GenerationState.COMPLETED:
            raise RuntimeError('City already generated; create a new CityGenerator to generate again')
        if self.generation_state == GenerationState.FAILED:
            raise RuntimeError('City generation failed; create a new CityGenerator with a corrected config')

    def _advance(self):
        index = STAGE_ORDER.index(self.generation_state) if self.generation_state in STAGE_ORDER else -1
        previous = self.generation_state
        self.generation_state = STAGE_ORDER[index + 1]
        self.logger.debug(f'{previous.name} -> {self.generation_state.name}')

    def _fail(self):
        self.generation_state = GenerationState.FAILED
        self.road_generator.road_manager.clear()
        self.zone_generator.clear()
        self.building_generator.building_manager.clear()
        self.sensor_generator.clear()
        self.sensor_quadtree.clear()

    def is_generation_complete(self) -> bool:
        """Check if city generation is complete.

        Returns:
            bool: True if generation is complete.
        """
        return self.generation_state == GenerationState.COMPLETED

    @property
    def layout(self) -> Optional[CityLayout]:
        """The generated layout, or None until generation completes."""
        return self._layout

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return self._layout.zones if self._layout else ()

    @property
    def roads(self) -> Tuple[Road, ...]:
        return self._layout.roads if self._layout else ()

    @property
    def buildings(self) -> Tuple[Building, ...]:
        return self._layout.buildings if self._layout else ()

    @property
    def sensors(self) -> Tuple[Sensor, ...]:
        return self._layout.sensors if self._layout else ()

    def _require_layout(self):
        if self._layout is None:
            raise RuntimeError('City has not been generated yet')

    def zone_at(self, x: float, y: float) -> Optional[Zone]:
        """Return the zone containing plan point (x, y).

        Raises:
            RuntimeError: If the city has not been generated.
        """
        self._require_layout()
        return self.zone_generator.zone_at(x, y)

    def roads_in(self, bounds: Bounds) -> List[Road]:
        """Roads touching ``bounds``, in generation order."""
        self._require_layout()
        return self.road_generator.road_manager.get_roads_in(bounds)

    def buildings_in(self, bounds: Bounds) -> List[Building]:
        """Buildings whose footprint box touches ``bounds``, in generation order."""
        self._require_layout()
        return self.building_generator.building_manager.get_buildings_in(bounds)

    def sensors_in(self, bounds: Bounds) -> List[Sensor]:
        """Sensors inside ``bounds``, in generation order."""
        self._require_layout()
        found = {id(s) for s in self.sensor_quadtree.retrieve_exact(bounds)}
        return [s for s in self._layout.sensors if id(s) in found]
