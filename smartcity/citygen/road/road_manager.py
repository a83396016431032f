"""Road storage with a spatial index over the generated segments."""
from typing import List

from smartcity.citygen.dataclass import Bounds, Road, RoadType
from smartcity.utils.quadtree import QuadTree


class RoadManager:
    """Holds the road segments of one city in generation order."""

    def __init__(self, bounds: Bounds, max_objects: int = 10, max_levels: int = 6):
        """Initialize the road manager.

        Args:
            bounds: City extent covered by the spatial index.
            max_objects: Quadtree leaf capacity.
            max_levels: Quadtree depth limit.
        """
        self.roads: List[Road] = []
        self.road_quadtree = QuadTree[Road](bounds, max_objects, max_levels)

    def add_road(self, road: Road) -> None:
        """Append a road and index it."""
        self.roads.append(road)
        self.road_quadtree.insert(road.bounds, road)

    def get_roads_in(self, bounds: Bounds) -> List[Road]:
        """Roads whose padded box touches ``bounds``, in generation order."""
        found = {id(road) for road in self.road_quadtree.retrieve_exact(bounds)}
        return [road for road in self.roads if id(road) in found]

    def roads_of_type(self, road_type: RoadType) -> List[Road]:
        return [road for road in self.roads if road.type == road_type]

    def clear(self) -> None:
        """Drop every road."""
        self.roads = []
        self.road_quadtree.clear()
