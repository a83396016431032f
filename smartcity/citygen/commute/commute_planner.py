"""Commute planning: spawn data for agents that travel between buildings.

Only the assignment is produced here. Moving the agents belongs to whatever
simulation reads the plan.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from smartcity.citygen.city.city_layout import CityLayout
from smartcity.citygen.dataclass import Building, Position, ZoneType
from smartcity.utils.logger import Logger
from smartcity.utils.seeded_random import SeededRandom

AGENT_HEIGHT = 1
MIN_SPEED = 0.5
SPEED_RANGE = 1.5
VEHICLE_THRESHOLD = 0.7
DEFAULT_AGENT_COUNT = 200


class TravelMode(str, Enum):
    """How an agent travels."""
    PEDESTRIAN = 'pedestrian'
    VEHICLE = 'vehicle'


@dataclass(frozen=True)
class Commute:
    """One agent's home, workplace and start/target points."""
    agent_id: int
    home_id: str
    work_id: str
    start: Position
    target: Position
    speed: float
    mode: TravelMode

    def to_dict(self):
        """Convert the commute to dictionary representation."""
        return {
            'agent_id': self.agent_id,
            'home_id': self.home_id,
            'work_id': self.work_id,
            'start': list(self.start.to_tuple()),
            'target': list(self.target.to_tuple()),
            'speed': self.speed,
            'mode': self.mode.value,
        }


class CommutePlanner:
    """Assigns agents a residential home and a commercial workplace.

    The planner owns its own random stream, so planning never changes the
    city it reads.
    """

    def __init__(self, layout: CityLayout, seed: int, agent_count: int = DEFAULT_AGENT_COUNT):
        """Initialize the planner.

        Args:
            layout: A generated city.
            seed: Seed of the planner's own random stream.
            agent_count: Number of commutes ``plan`` produces when called without a count.
        """
        self.layout = layout
        self.agent_count = agent_count
        self.rng = SeededRandom(seed)
        self.homes = [b for b in layout.buildings if b.zone == ZoneType.RESIDENTIAL]
        self.workplaces = [b for b in layout.buildings if b.zone == ZoneType.COMMERCIAL]
        self.logger = Logger.get_logger('CommutePlanner')

    def _point_in(self, building: Building) -> Position:
        x = building.position.x + (self.rng.random() - 0.5) * building.width
        z = building.position.z + (self.rng.random() - 0.5) * building.depth
        return Position(x, AGENT_HEIGHT, z)

    def plan(self, count: Optional[int] = None) -> List[Commute]:
        """Plan ``count`` commutes, or ``agent_count`` of them when ``count`` is None.

        Raises:
            ValueError: If ``count`` is negative, or the city has no
                residential or no commercial building.
        """
        if count is None:
            count = self.agent_count
        if count < 0:
            raise ValueError(f'count must not be negative, got {count}')
        if count and not self.homes:
            raise ValueError('Cannot plan commutes: the city has no residential buildings')
        if count and not self.workplaces:
            raise ValueError('Cannot plan commutes: the city has no commercial buildings')

        commutes = []
        for agent_id in range(count):
            home = self.rng.choice(self.homes)
            work = self.rng.choice(self.workplaces)
            start = self._point_in(home)
            target = self._point_in(work)
            speed = MIN_SPEED + self.rng.random() * SPEED_RANGE
            mode = TravelMode.VEHICLE if self.rng.random() > VEHICLE_THRESHOLD else TravelMode.PEDESTRIAN
            commutes.append(Commute(agent_id, home.id, work.id, start, target, speed, mode))

        self.logger.info(f'Planned {len(commutes)} commutes')
        return commutes

    @classmethod
    def from_config(cls, layout: CityLayout, config) -> 'CommutePlanner':
        """Planner seeded from the city seed plus ``citygen.commute.seed_offset``.

        ``citygen.commute.agent_count`` becomes the default number of commutes.
        """
        return cls(
            layout,
            layout.config.seed + config.get('citygen.commute.seed_offset', 0),
            agent_count=config.get('citygen.commute.agent_count', DEFAULT_AGENT_COUNT),
        )
