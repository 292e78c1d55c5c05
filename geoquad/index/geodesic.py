"""Meters-to-degrees sizing for query boxes on the WGS-84 ellipsoid.

Points are read as ``x = latitude`` and ``y = longitude`` in degrees. The
result only sizes a box; distances inside the tree stay plain Euclidean on
raw coordinates. Nothing here handles the poles or the antimeridian.
"""

from __future__ import annotations

import math
from typing import Tuple

from .geometry import AABB, Point, Vec2

WGS84_MAJOR_SEMIAXIS = 6378137.0
WGS84_MINOR_SEMIAXIS = 6356752.3


def deg2rad(deg: float) -> float:
    return deg * (math.pi / 180.0)


def rad2deg(rad: float) -> float:
    return (180.0 * rad) / math.pi


def earth_radius(lat_rad: float) -> float:
    """Geocentric Earth radius in meters at latitude ``lat_rad``."""
    a = WGS84_MAJOR_SEMIAXIS
    b = WGS84_MINOR_SEMIAXIS
    an = a * a * math.cos(lat_rad)
    bn = b * b * math.sin(lat_rad)
    ad = a * math.cos(lat_rad)
    bd = b * math.sin(lat_rad)
    return math.sqrt((an * an + bn * bn) / (ad * ad + bd * bd))


def boundary_point(point, meters: float) -> Point:
    lat = deg2rad(point.x)
    lon = deg2rad(point.y)

    radius = earth_radius(lat)
    parallel_radius = radius * math.cos(lat)

    lat_max = lat + meters / radius
    lon_max = lon + meters / parallel_radius
    return Point(rad2deg(lat_max), rad2deg(lon_max))


def half_extent_for_radius(point, meters: float) -> Tuple[float, float]:
    corner = boundary_point(point, meters)
    return corner.x - point.x, corner.y - point.y


def half_point(point, meters: float) -> Vec2:
    dx, dy = half_extent_for_radius(point, meters)
    return Vec2(dx, dy)


def query_box(point, meters: float) -> AABB:
    """Box centered on ``point`` reaching ``meters`` in each direction."""
    return AABB(Vec2(point.x, point.y), half_point(point, meters))
