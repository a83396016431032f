"""Summary statistics for a generated city."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from smartcity.citygen.city.city_layout import CityLayout
from smartcity.citygen.dataclass import SensorType, ZoneType

RESIDENTS_PER_RESIDENTIAL_BUILDING = 20
RESIDENTS_PER_COMMERCIAL_BUILDING = 10


@dataclass(frozen=True)
class CityStats:
    """Counts derived from a CityLayout.

    ``estimated_population`` is derived from building counts and is unrelated
    to ``CityConfig.population``.
    """
    total_buildings: int
    residential: int
    commercial: int
    vertical_gardens: int
    estimated_population: int
    buildings_by_zone: Dict[str, int] = field(default_factory=dict)
    sensors_by_type: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_layout(cls, layout: CityLayout) -> 'CityStats':
        """Compute statistics for ``layout``."""
        zone_counts = Counter(building.zone for building in layout.buildings)
        sensor_counts = Counter(sensor.type for sensor in layout.sensors)
        residential = zone_counts[ZoneType.RESIDENTIAL]
        commercial = zone_counts[ZoneType.COMMERCIAL]
        return cls(
            total_buildings=len(layout.buildings),
            residential=residential,
            commercial=commercial,
            vertical_gardens=sum(1 for building in layout.buildings if building.has_vertical_garden),
            estimated_population=(residential * RESIDENTS_PER_RESIDENTIAL_BUILDING
                                  + commercial * RESIDENTS_PER_COMMERCIAL_BUILDING),
            buildings_by_zone={zone_type.value: zone_counts[zone_type] for zone_type in ZoneType},
            sensors_by_type={sensor_type.value: sensor_counts[sensor_type] for sensor_type in SensorType},
        )

    def to_dict(self):
        """Convert the statistics to dictionary representation."""
        return {
            'total_buildings': self.total_buildings,
            'residential': self.residential,
            'commercial': self.commercial,
            'vertical_gardens': self.vertical_gardens,
            'estimated_population': self.estimated_population,
            'buildings_by_zone': dict(self.buildings_by_zone),
            'sensors_by_type': dict(self.sensors_by_type),
        }
