"""Drawing surface and the draw operations recorded on it.

Coordinates are screen coordinates: origin at the top-left corner, y growing
downwards, angles in radians growing clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True)
class RectOp:
    origin: Point
    size: Tuple[float, float]
    fill: str


@dataclass(frozen=True)
class LineOp:
    p1: Point
    p2: Point
    width: float
    color: str


@dataclass(frozen=True)
class ArcOp:
    """Circular arc from ``start`` sweeping clockwise by ``sweep`` (0 < sweep <= 2π)."""

    center: Point
    radius: float
    start: float
    sweep: float
    width: float
    color: str

    def point_at(self, angle: float) -> Point:
        return (
            self.center[0] + self.radius * math.cos(angle),
            self.center[1] + self.radius * math.sin(angle),
        )


@dataclass(frozen=True)
class CircleOp:
    center: Point
    radius: float
    fill: str


@dataclass(frozen=True)
class PolygonOp:
    points: Tuple[Point, ...]
    fill: str


@dataclass(frozen=True)
class TextOp:
    position: Point
    text: str
    color: str
    size: float


DrawOp = Union[RectOp, LineOp, ArcOp, CircleOp, PolygonOp, TextOp]


def clockwise_sweep(start: float, end: float) -> float:
    """Clockwise sweep from ``start`` to ``end``; coincident angles give a full turn."""
    return 2 * math.pi - (start - end) % (2 * math.pi)


class DrawingContext:
    def __init__(self) -> None:
        self.ops: List[DrawOp] = []

    def fill_rect(self, x: float, y: float, width: float, height: float, fill: str) -> None:
        self.ops.append(RectOp((x, y), (width, height), fill))

    def line(self, p1: Point, p2: Point, width: float, color: str) -> None:
        self.ops.append(LineOp(p1, p2, width, color))

    def arc(self, center: Point, radius: float, start: float, end: float,
            width: float, color: str) -> None:
        self.ops.append(ArcOp(center, radius, start, clockwise_sweep(start, end), width, color))

    def fill_circle(self, center: Point, radius: float, fill: str) -> None:
        self.ops.append(CircleOp(center, radius, fill))

    def fill_polygon(self, points: List[Point], fill: str) -> None:
        self.ops.append(PolygonOp(tuple(points), fill))

    def text(self, position: Point, text: str, color: str, size: float) -> None:
        self.ops.append(TextOp(position, text, color, size))


class Surface:
    """A drawing area of fixed pixel size that hands out a drawing context."""

    def __init__(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def get_context(self) -> Optional[DrawingContext]:
        return DrawingContext()
