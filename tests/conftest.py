import pytest

from geoquad import AABB, Point, QuadtreeConfig, QuadtreeNode


@pytest.fixture
def domain() -> AABB:
    return AABB.from_extents(0.0, 0.0, 10.0, 10.0)


@pytest.fixture
def labelled_points():
    return [
        Point(1, 1, "a"),
        Point(2, 2, "b"),
        Point(3, 3, "c"),
        Point(-1, -1, "d"),
        Point(0, 5, "e"),
        Point(5, 0, "f"),
    ]


@pytest.fixture
def split_root(domain):
    """Root with capacity 1: inserting two points in opposite corners splits it once."""
    root = QuadtreeNode(domain, config=QuadtreeConfig(capacity=1, max_depth=3))
    a = Point(5, 5, "a")
    b = Point(-5, -5, "b")
    assert root.insert(a)
    assert root.insert(b)
    return root, a, b
