"""Building storage with a spatial index over footprints."""
from typing import List

from smartcity.citygen.dataclass import Bounds, Building
from smartcity.utils.quadtree import QuadTree


class BuildingManager:
    """Holds the buildings of one city in generation order.

    Ids are unique within a manager; adding a duplicate id is rejected.
    """
    def __init__(self, bounds: Bounds, max_objects: int = 10, max_levels: int = 6):
        """Initialize the building manager.

        Args:
            bounds: City extent covered by the spatial index.
            max_objects: Quadtree leaf capacity.
            max_levels: Quadtree depth limit.
        """
        self.buildings: List[Building] = []
        self.building_quadtree = QuadTree[Building](bounds, max_objects, max_levels)
        self._ids = set()

    def add_building(self, building: Building):
        """Append a building and index it.

        Raises:
            ValueError: If a building with the same id already exists.
        """
        if building.id in self._ids:
            raise ValueError(f'Duplicate building id: {building.id}')
        self._ids.add(building.id)
        self.buildings.append(building)
        self.building_quadtree.insert(building.bounds, building)

    def get_buildings_in(self, bounds: Bounds) -> List[Building]:
        """Buildings whose footprint box touches ``bounds``, in generation order."""
        found = {id(b) for b in self.building_quadtree.retrieve_exact(bounds)}
        return [b for b in self.buildings if id(b) in found]

    def clear(self):
        """Drop every building."""
        self.buildings = []
        self._ids = set()
        self.building_quadtree.clear()
