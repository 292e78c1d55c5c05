from geoquad import AABB, Point, Quadtree, QuadtreeConfig, query_box


def main() -> None:
    points = [Point(x * 1.0, y * 1.0, payload=f"p{x}{y}") for x in range(5) for y in range(5)]
    tree = Quadtree.build(points, config=QuadtreeConfig(capacity=4, max_depth=4))

    assert len(tree) == 25
    assert tree.depth() > 0

    found = tree.search(AABB.from_extents(2.0, 2.0, 1.0, 1.0))
    assert len(found) == 9

    nearest = tree.k_nearest(AABB.from_extents(2.0, 2.0, 1.5, 1.5), 3)
    assert len(nearest) == 3
    assert nearest[0].payload == "p22"

    mover = points[0]
    assert tree.update(mover, 3.9, 3.9)
    assert mover in tree.search(AABB.from_extents(3.9, 3.9, 0.05, 0.05))

    assert tree.remove(mover)
    assert mover not in tree
    assert len(tree) == 24

    box = query_box(Point(51.5, -0.12), 500.0)
    assert box.half.x > 0.0 and box.half.y > box.half.x


if __name__ == "__main__":
    main()
