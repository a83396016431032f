"""Read-only result of one generation run."""
from dataclasses import dataclass
from typing import Tuple

from smartcity.citygen.dataclass import Building, CityConfig, Road, Sensor, Zone


@dataclass(frozen=True)
class CityLayout:
    """A generated city. All collections are tuples in generation order."""
    config: CityConfig
    zones: Tuple[Zone, ...]
    roads: Tuple[Road, ...]
    buildings: Tuple[Building, ...]
    sensors: Tuple[Sensor, ...]

    def to_dict(self):
        """Convert the layout to dictionary representation."""
        return {
            'config': self.config.to_dict(),
            'zones': [zone.to_dict() for zone in self.zones],
            'roads': [road.to_dict() for road in self.roads],
            'buildings': [building.to_dict() for building in self.buildings],
            'sensors': [sensor.to_dict() for sensor in self.sensors],
        }
