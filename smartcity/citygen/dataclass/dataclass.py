"""Data classes describing a generated city.

Plan-view geometry uses ``Point``/``Bounds`` in (x, y). Entities placed in
3D carry a ``Position`` where ``y`` is the vertical axis, so the plan-view
point of a building at ``Position(x, 0, z)`` is ``Point(x, z)``.
"""
import math
import numbers
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Tuple


class ZoneType(str, Enum):
    """Land-use class of a zone cell."""
    RESIDENTIAL = 'residential'
    COMMERCIAL = 'commercial'
    INDUSTRIAL = 'industrial'
    CIVIC = 'civic'
    GREEN = 'green'


class RoadType(str, Enum):
    """Road class.

    ``PEDESTRIAN`` belongs to the type domain but the road generator never
    produces it.
    """
    ARTERIAL = 'arterial'
    SECONDARY = 'secondary'
    PEDESTRIAN = 'pedestrian'


class SensorType(str, Enum):
    """Kind of sensor. Declaration order is the order sensors draw from."""
    AIR_QUALITY = 'air_quality'
    WATER_METER = 'water_meter'
    TRAFFIC_COUNTER = 'traffic_counter'
    ENERGY_NODE = 'energy_node'


@dataclass(frozen=True)
class CityConfig:
    """Inputs of one generation run.

    ``population`` is informational; no stage reads it.

    Raises:
        TypeError: If the seed is not an integer or a size is not a number.
        ValueError: If width/height are not finite and positive, or population is negative.
    """
    seed: int
    width: float
    height: float
    population: int = 0

    def __post_init__(self):
        """Validate the configuration."""
        if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral):
            raise TypeError(f'seed must be an integer, got {self.seed!r}')
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(f'{name} must be a number, got {value!r}')
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f'{name} must be finite and positive, got {value!r}')
        if isinstance(self.population, bool) or not isinstance(self.population, numbers.Integral):
            raise TypeError(f'population must be an integer, got {self.population!r}')
        if self.population < 0:
            raise ValueError(f'population must not be negative, got {self.population!r}')
        object.__setattr__(self, 'seed', int(self.seed))
        object.__setattr__(self, 'population', int(self.population))

    @classmethod
    def from_config(cls, config, **overrides) -> 'CityConfig':
        """Build a CityConfig from the ``city`` section of a Config.

        Args:
            config: A ``smartcity.config.Config``.
            **overrides: Field values that replace the configured ones.

        Returns:
            A validated CityConfig.
        """
        values = {
            'seed': config['city.seed'],
            'width': config['city.width'],
            'height': config['city.height'],
            'population': config.get('city.population', 0),
        }
        values.update(overrides)
        return cls(**values)

    def to_dict(self):
        """Convert the config to dictionary representation."""
        return asdict(self)


@dataclass(frozen=True)
class Point:
    """A point in the ground plane."""
    x: float
    y: float

    def to_dict(self):
        """Convert the point to dictionary representation."""
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Position:
    """A 3D position; ``y`` is height above ground."""
    x: float
    y: float
    z: float

    @property
    def plan(self) -> Point:
        """Ground-plane projection."""
        return Point(self.x, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        """Return ``(x, y, z)``."""
        return (self.x, self.y, self.z)

    def to_dict(self):
        """Convert the position to dictionary representation."""
        return {'x': self.x, 'y': self.y, 'z': self.z}


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle; (x, y) is the minimum corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        """Half-open containment: [x, max_x) × [y, max_y)."""
        return self.x <= x < self.max_x and self.y <= y < self.max_y

    def intersects(self, other: 'Bounds') -> bool:
        """Closed-box overlap test (touching edges count)."""
        return not (self.max_x < other.x or
                    self.x > other.max_x or
                    self.max_y < other.y or
                    self.y > other.max_y)

    def inset(self, margin: float) -> 'Bounds':
        """Shrink by ``margin`` on every side."""
        return Bounds(self.x + margin, self.y + margin, self.width - 2 * margin, self.height - 2 * margin)

    def area(self) -> float:
        return self.width * self.height

    def to_dict(self):
        """Convert the bounds to dictionary representation."""
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class Zone:
    """A classified grid cell."""
    type: ZoneType
    bounds: Bounds
    density: float

    def to_dict(self):
        """Convert the zone to dictionary representation."""
        return {'type': self.type.value, 'bounds': self.bounds.to_dict(), 'density': self.density}


@dataclass(frozen=True)
class Road:
    """A straight road segment from ``points[0]`` to ``points[1]``."""
    type: RoadType
    points: Tuple[Point, Point]
    width: float

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[1]

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def bounds(self) -> Bounds:
        """Box around the segment, padded by half the road width."""
        pad = self.width / 2
        min_x = min(self.start.x, self.end.x)
        min_y = min(self.start.y, self.end.y)
        return Bounds(
            min_x - pad,
            min_y - pad,
            abs(self.end.x - self.start.x) + 2 * pad,
            abs(self.end.y - self.start.y) + 2 * pad,
        )

    def to_dict(self):
        """Convert the road to dictionary representation."""
        return {
            'type': self.type.value,
            'points': [[p.x, p.y] for p in self.points],
            'width': self.width,
        }


# Building metadata: one variant per zone type, plus fixed facilities.
@dataclass(frozen=True)
class BuildingMeta:
    """Derived capacity and energy figures of a building."""
    capacity: int
    energy_use: float

    def to_dict(self):
        """Convert the metadata to dictionary representation."""
        return asdict(self)


@dataclass(frozen=True)
class ResidentialMeta(BuildingMeta):
    """Metadata of residential buildings."""


@dataclass(frozen=True)
class CommercialMeta(BuildingMeta):
    """Metadata of commercial buildings."""


@dataclass(frozen=True)
class GeneralMeta(BuildingMeta):
    """Metadata of industrial and green-zone buildings."""


@dataclass(frozen=True)
class CivicMeta(BuildingMeta):
    """Metadata of civic buildings, which also report staff."""
    staff: int = 0


@dataclass(frozen=True)
class FacilityMeta(BuildingMeta):
    """Metadata of the fixed special buildings."""
    staff: int = 0


@dataclass(frozen=True)
class Building:
    """A building footprint placed on the ground plane."""
    id: str
    type: str
    position: Position
    rotation: float
    width: float
    depth: float
    height: float
    zone: ZoneType
    has_vertical_garden: bool
    meta: BuildingMeta = field(default=None)

    @property
    def bounds(self) -> Bounds:
        """Plan-view box that contains the footprint at any rotation."""
        half = math.hypot(self.width, self.depth) / 2
        center = self.position.plan
        return Bounds(center.x - half, center.y - half, 2 * half, 2 * half)

    def to_dict(self):
        """Convert the building to dictionary representation."""
        return {
            'id': self.id,
            'type': self.type,
            'position': list(self.position.to_tuple()),
            'rotation': self.rotation,
            'width': self.width,
            'depth': self.depth,
            'height': self.height,
            'zone': self.zone.value,
            'has_vertical_garden': self.has_vertical_garden,
            'meta': self.meta.to_dict() if self.meta is not None else None,
        }


@dataclass(frozen=True)
class Sensor:
    """A point sensor with its last reading."""
    id: str
    type: SensorType
    position: Position
    value: float

    @property
    def bounds(self) -> Bounds:
        point = self.position.plan
        return Bounds(point.x, point.y, 0, 0)

    def to_dict(self):
        """Convert the sensor to dictionary representation."""
        return {
            'id': self.id,
            'type': self.type.value,
            'position': list(self.position.to_tuple()),
            'value': self.value,
        }
