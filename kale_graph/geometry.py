from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]

COLLINEAR_EPS = 1e-12


def vertex_pair_key(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def midpoint(a: Point, b: Point) -> Point:
    return (a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5


def polar(angle: float, radius: float) -> Point:
    return math.cos(angle) * radius, math.sin(angle) * radius


def find_circle(p1: Point, p2: Point, p3: Point) -> Tuple[float, float, float]:
    """Return ``(cx, cy, r)`` of the circle through three non-collinear points.

    The center is the intersection of the perpendicular bisectors of
    ``p1p2`` and ``p1p3``, solved with Cramer's rule.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3

    # Bisector of p1p2: (x2 - x1) x + (y2 - y1) y = (|p2|^2 - |p1|^2) / 2
    a1, b1 = x2 - x1, y2 - y1
    a2, b2 = x3 - x1, y3 - y1
    c1 = (x2 * x2 + y2 * y2 - x1 * x1 - y1 * y1) * 0.5
    c2 = (x3 * x3 + y3 * y3 - x1 * x1 - y1 * y1) * 0.5

    det = a1 * b2 - a2 * b1
    scale = max(abs(a1), abs(b1), abs(a2), abs(b2), 1.0)
    if abs(det) <= COLLINEAR_EPS * scale * scale:
        raise ValueError(f"points {p1}, {p2}, {p3} are collinear")

    cx = (c1 * b2 - c2 * b1) / det
    cy = (a1 * c2 - a2 * c1) / det
    return cx, cy, math.hypot(x1 - cx, y1 - cy)
