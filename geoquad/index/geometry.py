from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


class Point:
    """A located payload stored in the tree.

    Points compare by identity: two points at the same coordinates are
    different entities, and removal or relocation always targets the exact
    object that was inserted. Coordinates are mutated in place by
    ``QuadtreeNode.update``; the payload is fixed at creation.
    """

    __slots__ = ("x", "y", "_payload")

    def __init__(self, x: float, y: float, payload: object = None) -> None:
        self.x = float(x)
        self.y = float(y)
        self._payload = payload

    @property
    def payload(self) -> object:
        return self._payload

    def coordinates(self) -> Tuple[float, float]:
        return self.x, self.y

    def distance_to(self, other) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r}, payload={self._payload!r})"


@dataclass(frozen=True)
class AABB:
    """Closed box given by center and half-extents.

    Boxes built with ``from_edges`` keep their exact edges so that
    quadrants share edges bit for bit with their parent and with each other;
    ``center ± half`` alone can miss an edge by one rounding step.
    """

    center: Vec2
    half: Vec2
    edges: Optional[Tuple[float, float, float, float]] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_extents(cls, center_x: float, center_y: float, half_x: float, half_y: float) -> "AABB":
        return cls(Vec2(float(center_x), float(center_y)), Vec2(float(half_x), float(half_y)))

    @classmethod
    def from_edges(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "AABB":
        return cls(
            Vec2((min_x + max_x) / 2.0, (min_y + max_y) / 2.0),
            Vec2((max_x - min_x) / 2.0, (max_y - min_y) / 2.0),
            (float(min_x), float(min_y), float(max_x), float(max_y)),
        )

    @property
    def min_x(self) -> float:
        if self.edges is not None:
            return self.edges[0]
        return self.center.x - self.half.x

    @property
    def min_y(self) -> float:
        if self.edges is not None:
            return self.edges[1]
        return self.center.y - self.half.y

    @property
    def max_x(self) -> float:
        if self.edges is not None:
            return self.edges[2]
        return self.center.x + self.half.x

    @property
    def max_y(self) -> float:
        if self.edges is not None:
            return self.edges[3]
        return self.center.y + self.half.y

    def contains_point(self, p) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def intersects(self, other: "AABB") -> bool:
        # Closed boxes: touching edges count as overlap.
        if other.max_x < self.min_x or other.min_x > self.max_x:
            return False
        if other.max_y < self.min_y or other.min_y > self.max_y:
            return False
        return True

    def quadrant(self, idx: int) -> "AABB":
        """Return quadrant ``idx`` in NW, NE, SW, SE order.

        Outer edges are copied from this box and inner edges are its center,
        so the four quadrants tile it with no gap.
        """
        cx = self.center.x
        cy = self.center.y
        if idx == 0:
            return AABB.from_edges(self.min_x, cy, cx, self.max_y)
        if idx == 1:
            return AABB.from_edges(cx, cy, self.max_x, self.max_y)
        if idx == 2:
            return AABB.from_edges(self.min_x, self.min_y, cx, cy)
        return AABB.from_edges(cx, self.min_y, self.max_x, cy)
