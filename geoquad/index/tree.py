from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from ..core import logger
from ..core.settings import DEFAULT_CONFIG, QuadtreeConfig
from .geometry import AABB, Point
from .node import PointFilter, QuadtreeNode


class Quadtree:
    """Owns the root node and the shape configuration of one index."""

    def __init__(self, boundary: AABB, config: Optional[QuadtreeConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.root = QuadtreeNode(boundary, 0, None, self.config)
        self._size = 0
        if self.config.debug:
            logger.set_debug(True)

    @classmethod
    def build(
        cls,
        points: Iterable[Point],
        padding: float = 1.0,
        config: Optional[QuadtreeConfig] = None,
    ) -> "Quadtree":
        points = list(points)
        if not points:
            return cls(AABB.from_edges(0.0, 0.0, 1.0, 1.0), config)

        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)

        boundary = AABB.from_edges(min_x - padding, min_y - padding, max_x + padding, max_y + padding)
        tree = cls(boundary, config)
        for p in points:
            tree.insert(p)
        logger.logger.debug("Built quadtree with %d points, depth %d", len(tree), tree.depth())
        return tree

    @property
    def boundary(self) -> AABB:
        return self.root.boundary

    def insert(self, point: Point) -> bool:
        if self.root.insert(point):
            self._size += 1
            return True
        return False

    def remove(self, point: Point) -> bool:
        if self.root.remove(point):
            self._size -= 1
            return True
        return False

    def update(self, point: Point, x: float, y: float) -> bool:
        if self.root.find_leaf(point) is None:
            return False
        if self.root.update(point, x, y):
            return True
        # Found but relocated outside the domain: the point is gone.
        self._size -= 1
        return False

    def search(self, box: AABB) -> List[Point]:
        return self.root.search(box)

    def k_nearest(self, box: AABB, k: int, predicate: Optional[PointFilter] = None) -> List[Point]:
        return self.root.k_nearest(box, k, predicate)

    def depth(self) -> int:
        return max(node.depth for node in self.root.walk())

    def node_count(self) -> int:
        return sum(1 for _ in self.root.walk())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Point]:
        for leaf in self.root.leaves():
            yield from leaf.points

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point):
            return False
        return self.root.find_leaf(point) is not None
