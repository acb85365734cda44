"""Plain-sequence vector helpers and 2D triangle hit tests."""

from __future__ import annotations

import math
from typing import Sequence


def length(v: Sequence[float]) -> float:
    """Length of a 3-component vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def length_2d(v: Sequence[float]) -> float:
    """Length of a 2-component vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def normalise(v: Sequence[float]) -> tuple[float, float, float]:
    """Unit 3-component vector; the zero vector stays zero."""
    size = length(v)
    if size == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / size, v[1] / size, v[2] / size)


def normalise_2d(v: Sequence[float]) -> tuple[float, float]:
    """Unit 2-component vector; the zero vector stays zero."""
    size = length_2d(v)
    if size == 0.0:
        return (0.0, 0.0)
    return (v[0] / size, v[1] / size)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-component vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def dot_2d(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 2-component vectors."""
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    """Cross product of two 3-component vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def triangle_area_2d(triangle: Sequence[float]) -> float:
    """Area of a triangle given as (p1x, p1y, p2x, p2y, p3x, p3y)."""
    x1, y1, x2, y2, x3, y3 = triangle
    return abs(((x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1)) / 2)


def triangle_collide_point_2d(triangle: Sequence[float], point: Sequence[float]) -> bool:
    """Whether ``point`` lies in the triangle, by comparing sub-triangle areas."""
    x1, y1, x2, y2, x3, y3 = triangle
    px, py = point[0], point[1]
    whole = triangle_area_2d(triangle)
    parts = (
        triangle_area_2d((x1, y1, x2, y2, px, py))
        + triangle_area_2d((x1, y1, px, py, x3, y3))
        + triangle_area_2d((px, py, x2, y2, x3, y3))
    )
    return math.isclose(whole, parts, rel_tol=1e-9, abs_tol=1e-12)


def _angle_deg(a: Sequence[float], b: Sequence[float]) -> float:
    cosine = max(-1.0, min(1.0, dot_2d(a, b)))
    return math.degrees(math.acos(cosine))


def collide_by_dot_product(triangle: Sequence[float], point: Sequence[float]) -> bool:
    """Whether ``point`` lies inside the angle at the triangle's first vertex."""
    x1, y1, x2, y2, x3, y3 = triangle
    ab = normalise_2d((x2 - x1, y2 - y1))
    ac = normalise_2d((x3 - x1, y3 - y1))
    ap = normalise_2d((point[0] - x1, point[1] - y1))
    a_bc = _angle_deg(ab, ac)
    a_pb = _angle_deg(ap, ab)
    a_cp = _angle_deg(ac, ap)
    return a_bc > a_cp and a_bc > a_pb