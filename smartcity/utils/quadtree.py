"""Quadtree for plan-view queries over generated city entities."""
from typing import Generic, List, Optional, TypeVar

from smartcity.citygen.dataclass import Bounds

T = TypeVar('T')


class QuadTree(Generic[T]):
    """Region quadtree storing items together with their bounding boxes.

    An item whose box straddles a split line is stored in every child it
    touches; ``retrieve_exact`` removes those duplicates.

    Attributes:
        bounds: Region covered by this node.
        max_objects: Items a leaf holds before it splits.
        max_levels: Maximum depth.
        level: Depth of this node.
        objects: Boxes stored in this leaf.
        items: Items matching ``objects`` by index.
        nodes: The four children, or ``None`` while this node is a leaf.
    """

    def __init__(self, bounds: Bounds, max_objects=10, max_levels=6, level=0):
        """Create an empty node.

        Args:
            bounds: Region covered by this node.
            max_objects: Items a leaf holds before it splits.
            max_levels: Maximum depth.
            level: Depth of this node.
        """
        self.bounds = bounds
        self.max_objects = max_objects
        self.max_levels = max_levels
        self.level = level
        self.objects: List[Bounds] = []
        self.items: List[T] = []
        self.nodes: List[Optional[QuadTree]] = [None] * 4

    def __len__(self):
        """Return the number of distinct items stored below this node."""
        return len({id(item) for item in self._all_items()})

    def _all_items(self) -> List[T]:
        if not any(self.nodes):
            return list(self.items)
        result = []
        for node in self.nodes:
            result.extend(node._all_items())
        return result

    def split(self):
        """Turn this leaf into four quadrants and push its items down."""
        width = self.bounds.width / 2
        height = self.bounds.height / 2
        x = self.bounds.x
        y = self.bounds.y
        quadrants = (
            Bounds(x + width, y, width, height),
            Bounds(x, y, width, height),
            Bounds(x, y + height, width, height),
            Bounds(x + width, y + height, width, height),
        )
        for index, quadrant in enumerate(quadrants):
            self.nodes[index] = QuadTree(quadrant, self.max_objects, self.max_levels, self.level + 1)

        objects, items = self.objects, self.items
        self.objects, self.items = [], []
        for rect, item in zip(objects, items):
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)

    def get_relevant_nodes(self, rect: Bounds) -> List['QuadTree[T]']:
        """Return the children whose quadrant ``rect`` touches."""
        nodes = []
        mid_x = self.bounds.x + self.bounds.width / 2
        mid_y = self.bounds.y + self.bounds.height / 2

        low = rect.y <= mid_y
        high = rect.y + rect.height > mid_y

        if rect.x <= mid_x:
            if low:
                nodes.append(self.nodes[1])
            if high:
                nodes.append(self.nodes[2])
        if rect.x + rect.width > mid_x:
            if low:
                nodes.append(self.nodes[0])
            if high:
                nodes.append(self.nodes[3])
        return [n for n in nodes if n is not None]

    def insert(self, rect: Bounds, item: T):
        """Insert ``item`` with bounding box ``rect``."""
        if any(self.nodes):
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)
            return
        self.objects.append(rect)
        self.items.append(item)

        if len(self.objects) > self.max_objects and self.level < self.max_levels:
            self.split()

    def retrieve(self, rect: Bounds) -> List[T]:
        """Return candidate items near ``rect`` (may contain false positives and duplicates)."""
        if not any(self.nodes):
            return list(self.items)
        result = []
        for node in self.get_relevant_nodes(rect):
            result.extend(node.retrieve(rect))
        return result

    def retrieve_exact(self, query_rect: Bounds) -> List[T]:
        """Return the distinct items whose bounds intersect ``query_rect``."""
        seen = set()
        result = []
        for item in self.retrieve(query_rect):
            if id(item) in seen:
                continue
            seen.add(id(item))
            if query_rect.intersects(item.bounds):
                result.append(item)
        return result

    def clear(self):
        """Remove every item."""
        self.objects = []
        self.items = []
        self.nodes = [None] * 4
