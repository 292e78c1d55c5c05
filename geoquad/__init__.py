from .core import QuadtreeConfig, load_config
from .index import AABB, Point, Quadtree, QuadtreeNode, Vec2, half_extent_for_radius, query_box

__version__ = "0.1.0"

__all__ = [
    "AABB",
    "Point",
    "Vec2",
    "Quadtree",
    "QuadtreeNode",
    "QuadtreeConfig",
    "load_config",
    "half_extent_for_radius",
    "query_box",
]
