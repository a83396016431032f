"""Sensor placement: a fixed number of sensors scattered over the extent."""
from typing import List

from smartcity.citygen.dataclass import CityConfig, Position, Sensor, SensorType
from smartcity.utils.logger import Logger
from smartcity.utils.seeded_random import SeededRandom

SENSOR_COUNT = 50
SENSOR_MOUNT_HEIGHT = 5
MIN_READING = 0
MAX_READING = 100
SENSOR_TYPES = tuple(SensorType)


class SensorGenerator:
    """Scatters sensors uniformly; placement ignores roads and buildings."""

    def __init__(self, city_config: CityConfig, rng: SeededRandom):
        self.city_config = city_config
        self.rng = rng
        self.sensors: List[Sensor] = []
        self.logger = Logger.get_logger('SensorGenerator')

    def generate(self) -> List[Sensor]:
        """Place ``SENSOR_COUNT`` sensors, drawing x, y, type, then value for each."""
        for index in range(SENSOR_COUNT):
            x = self.rng.random_float(0, self.city_config.width)
            y = self.rng.random_float(0, self.city_config.height)
            sensor_type = self.rng.choice(SENSOR_TYPES)
            value = self.rng.random_float(MIN_READING, MAX_READING)
            self.sensors.append(Sensor(f'sensor-{index}', sensor_type, Position(x, SENSOR_MOUNT_HEIGHT, y), value))

        self.logger.info(f'Generated {len(self.sensors)} sensors')
        return self.sensors

    def clear(self) -> None:
        self.sensors = []
