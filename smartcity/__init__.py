"""SmartCity: deterministic procedural city layouts from a single seed.

Roads, zones, buildings and sensors are generated in a fixed order from one
random stream, so a seed and an extent fully determine the city.
"""

from smartcity.citygen.city.city_generator import CityGenerator, GenerationState
from smartcity.citygen.city.city_layout import CityLayout
from smartcity.citygen.commute.commute_planner import Commute, CommutePlanner
from smartcity.citygen.dataclass import (Bounds, Building, CityConfig, Road,
                                         RoadType, Sensor, SensorType, Zone,
                                         ZoneType)
from smartcity.citygen.stats.city_stats import CityStats
from smartcity.config import Config
from smartcity.utils.logger import Logger
from smartcity.utils.noise import NoiseField
from smartcity.utils.seeded_random import SeededRandom

__all__ = [
    'Bounds', 'Building', 'CityConfig', 'CityGenerator', 'CityLayout', 'CityStats', 'Commute',
    'CommutePlanner', 'Config', 'GenerationState', 'Logger', 'NoiseField', 'Road', 'RoadType',
    'SeededRandom', 'Sensor', 'SensorType', 'Zone', 'ZoneType',
]
