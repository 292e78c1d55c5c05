from __future__ import annotations

import weakref
from typing import Callable, Iterator, List, Optional, Set, Tuple

from ..core import logger
from ..core.settings import DEFAULT_CONFIG, QuadtreeConfig
from .geometry import AABB, Point

PointFilter = Callable[[Point], bool]


class QuadtreeNode:
    """One node of an adaptive point quadtree.

    Leaves hold points; internal nodes hold exactly four children in NW, NE,
    SW, SE order and no points of their own. Nodes never merge back once
    split. The parent link is a weak reference used only to walk upward.
    """

    def __init__(
        self,
        boundary: AABB,
        depth: int = 0,
        parent: Optional["QuadtreeNode"] = None,
        config: Optional[QuadtreeConfig] = None,
    ) -> None:
        self.boundary = boundary
        self.depth = depth
        self.points: List[Point] = []
        self.config = config or (parent.config if parent is not None else DEFAULT_CONFIG)
        self._parent = weakref.ref(parent) if parent is not None else None
        self._children: Optional[List["QuadtreeNode"]] = None

    @property
    def parent(self) -> Optional["QuadtreeNode"]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> Tuple["QuadtreeNode", ...]:
        return tuple(self._children) if self._children else ()

    @property
    def is_leaf(self) -> bool:
        return self._children is None

    def insert(self, point: Point) -> bool:
        if not self.boundary.contains_point(point):
            return False

        if self._children is None:
            if len(self.points) < self.config.capacity:
                self.points.append(point)
                return True

            if self.depth >= self.config.max_depth:
                # Leaves at the depth ceiling overflow instead of splitting.
                self.points.append(point)
                return True

            self._subdivide()

        for child in self._children:
            if child.insert(point):
                return True
        return False

    def remove(self, point: Point) -> bool:
        if not self.boundary.contains_point(point):
            return False

        if self._children is None:
            idx = self._index_of(point)
            if idx < 0:
                return False
            self._swap_remove(idx)
            return True

        for child in self._children:
            if child.remove(point):
                return True
        return False

    def update(self, point: Point, x: float, y: float) -> bool:
        if not self.boundary.contains_point(point):
            return False

        if self._children is None:
            idx = self._index_of(point)
            if idx < 0:
                return False

            point.x = float(x)
            point.y = float(y)
            if self.boundary.contains_point(point):
                return True

            self._swap_remove(idx)
            if self.rinsert(point):
                return True
            logger.logger.warning(
                "Point %r moved outside the indexed region and was dropped", point.payload
            )
            return False

        for child in self._children:
            if child.update(point, x, y):
                return True
        return False

    def rinsert(self, point: Point) -> bool:
        """Insert ``point`` here, or walk up through ancestors until one accepts it."""
        node: Optional[QuadtreeNode] = self
        while node is not None:
            if node.insert(point):
                return True
            node = node.parent
        return False

    def search(self, box: AABB) -> List[Point]:
        results: List[Point] = []
        self._search_recursive(box, results)
        return results

    def k_nearest(self, box: AABB, k: int, predicate: Optional[PointFilter] = None) -> List[Point]:
        """Return up to ``k`` points inside ``box`` closest to its center.

        The first intersecting leaf starts an expanding search that climbs
        through its ancestors and back down into unvisited siblings, keeping
        the ``k`` closest at every level. Children are then consumed in order
        and the descent stops as soon as ``k`` points are collected; siblings
        after that point are never consulted and results from different
        children are concatenated, not re-sorted against each other.
        """
        if k <= 0:
            logger.logger.debug("k_nearest called with k=%d", k)
            return []
        visited: Set[QuadtreeNode] = set()
        return self._k_nearest_descend(box, k, visited, predicate)

    def leaves(self) -> Iterator["QuadtreeNode"]:
        if self._children is None:
            yield self
            return
        for child in self._children:
            yield from child.leaves()

    def walk(self) -> Iterator["QuadtreeNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_leaf(self, point: Point) -> Optional["QuadtreeNode"]:
        if not self.boundary.contains_point(point):
            return None
        if self._children is None:
            return self if self._index_of(point) >= 0 else None
        for child in self._children:
            leaf = child.find_leaf(point)
            if leaf is not None:
                return leaf
        return None

    def _subdivide(self) -> None:
        if self._children is not None:
            return

        self._children = [
            QuadtreeNode(self.boundary.quadrant(i), self.depth + 1, self, self.config)
            for i in range(4)
        ]
        logger.logger.debug(
            "Split node at depth %d around (%g, %g) holding %d points",
            self.depth,
            self.boundary.center.x,
            self.boundary.center.y,
            len(self.points),
        )

        for p in self.points:
            for child in self._children:
                if child.insert(p):
                    break
        self.points = []

    def _index_of(self, point: Point) -> int:
        for idx, existing in enumerate(self.points):
            if existing is point:
                return idx
        return -1

    def _swap_remove(self, idx: int) -> None:
        last = len(self.points) - 1
        if idx != last:
            self.points[idx] = self.points[last]
        self.points.pop()

    def _search_recursive(self, box: AABB, results: List[Point]) -> None:
        if not self.boundary.intersects(box):
            return

        for p in self.points:
            if box.contains_point(p):
                results.append(p)

        if self._children:
            for child in self._children:
                child._search_recursive(box, results)

    def _k_nearest_descend(
        self,
        box: AABB,
        k: int,
        visited: Set["QuadtreeNode"],
        predicate: Optional[PointFilter],
    ) -> List[Point]:
        if not self.boundary.intersects(box):
            return []

        if self._children is None:
            return self._k_nearest_expand(box, k, visited, predicate)[:k]

        results: List[Point] = []
        for child in self._children:
            results.extend(child._k_nearest_descend(box, k, visited, predicate))
            if len(results) >= k:
                return results[:k]
        return results

    def _k_nearest_expand(
        self,
        box: AABB,
        k: int,
        visited: Set["QuadtreeNode"],
        predicate: Optional[PointFilter],
    ) -> List[Point]:
        if self in visited:
            return []
        visited.add(self)

        if not self.boundary.intersects(box):
            return []

        results = [
            p for p in self.points
            if box.contains_point(p) and (predicate is None or predicate(p))
        ]

        if self._children:
            for child in self._children:
                results.extend(child._k_nearest_expand(box, k, visited, predicate))

        parent = self.parent
        if parent is not None:
            results.extend(parent._k_nearest_expand(box, k, visited, predicate))

        center = box.center
        results.sort(key=lambda p: p.distance_to(center))
        return results[:k]

    def __repr__(self) -> str:
        kind = "leaf" if self._children is None else "internal"
        return (
            f"QuadtreeNode({kind}, depth={self.depth}, "
            f"center=({self.boundary.center.x:g}, {self.boundary.center.y:g}), "
            f"points={len(self.points)})"
        )
