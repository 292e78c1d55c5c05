from .geodesic import boundary_point, earth_radius, half_extent_for_radius, half_point, query_box
from .geometry import AABB, Point, Vec2
from .node import QuadtreeNode
from .tree import Quadtree

__all__ = [
    "AABB",
    "Point",
    "Vec2",
    "QuadtreeNode",
    "Quadtree",
    "boundary_point",
    "earth_radius",
    "half_extent_for_radius",
    "half_point",
    "query_box",
]
