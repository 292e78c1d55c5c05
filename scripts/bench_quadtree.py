import random
import time

from geoquad import AABB, Point, Quadtree, QuadtreeConfig, query_box


def main() -> None:
    rng = random.Random(42)
    tree = Quadtree(AABB.from_extents(0.0, 0.0, 90.0, 180.0), QuadtreeConfig(capacity=8, max_depth=10))

    start = time.perf_counter()
    for i in range(20000):
        tree.insert(Point(rng.uniform(-90.0, 90.0), rng.uniform(-180.0, 180.0), payload=i))
    insert_ms = (time.perf_counter() - start) * 1000.0

    start = time.perf_counter()
    hits = 0
    for _ in range(500):
        center = Point(rng.uniform(-80.0, 80.0), rng.uniform(-170.0, 170.0))
        hits += len(tree.k_nearest(query_box(center, 250000.0), 10))
    query_ms = (time.perf_counter() - start) * 1000.0

    print(
        f"points={len(tree)} nodes={tree.node_count()} depth={tree.depth()} "
        f"insert_ms={insert_ms:.3f} knn_ms={query_ms:.3f} hits={hits}"
    )


if __name__ == "__main__":
    main()
