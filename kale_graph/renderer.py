"""Circular layout and drawing of a parsed kale graph."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvisibleVertexEdgeError, UnexpectedRenderError
from .geometry import Point, find_circle, midpoint, polar, vertex_pair_key
from .logging_utils import debug_log_call
from .model import Edge, GraphModel, is_invisible
from .settings import RenderSettings
from .surface import DrawingContext, DrawOp, Surface

logger = logging.getLogger(__name__)

LABEL_FONT_SIZE = 20


@dataclass(frozen=True)
class EdgePlacement:
    """How one model edge is drawn.

    ``frm``/``to`` may be swapped relative to the model edge, in which case
    ``reverse`` is set so the arrowhead still points along the model edge.
    """

    frm: int
    to: int
    bend: int
    reverse: bool = False
    drawn: bool = True


def assign_bends(edges: Sequence[Edge], simple: bool = False) -> List[EdgePlacement]:
    """Give every edge its bend index among the edges joining the same vertex pair.

    The first edge of a pair fixes the pair's orientation; later edges running
    the other way are drawn in that orientation with ``reverse`` set. Under
    ``simple`` only the first edge of each pair is drawn, but later ones still
    take a bend index.
    """
    seen: Dict[Tuple[int, int], List] = {}
    placements: List[EdgePlacement] = []
    for frm, to in edges:
        key = vertex_pair_key(frm, to)
        entry = seen.get(key)
        if entry is None:
            seen[key] = [(frm, to), 1]
            placements.append(EdgePlacement(frm, to, 0))
            continue
        orientation, bend = entry
        entry[1] = bend + 1
        drawn = not simple
        if orientation == (frm, to):
            placements.append(EdgePlacement(frm, to, bend, drawn=drawn))
        else:
            placements.append(EdgePlacement(to, frm, bend, reverse=True, drawn=drawn))
    return placements


def bend_displacement(bend: int, bendiness: float, loop: bool = False) -> float:
    """Offset of an edge's apex from the straight line between its endpoints.

    Bends 0, 1, 2, 3, 4 give 0, -2, +2, -4, +4 (times ``bendiness``): sides
    alternate and the offset grows every second bend. Self-loops always bulge
    the same way and grow with every bend.
    """
    if loop:
        return bendiness * (bend + 1) * 2
    return bendiness * math.ceil(bend / 2) * 2 * (-1) ** bend


class GraphRenderer:
    def __init__(self, graph: GraphModel, settings: RenderSettings, surface: Surface):
        self.graph = graph
        self.settings = settings
        self.surface = surface
        self.ctx: Optional[DrawingContext] = None
        self.center: Point = (surface.width / 2, surface.height / 2)

    def draw(self) -> List[DrawOp]:
        ctx = self.surface.get_context()
        if ctx is None:
            raise UnexpectedRenderError("Failed to get drawing context")
        self.ctx = ctx
        self.center = self.layout_center()
        self._check_edges()

        s = self.settings
        ctx.fill_rect(0, 0, self.surface.width, self.surface.height, s.background_color)

        for placement in assign_bends(self.graph.edges, self.graph.flags.simple):
            if not placement.drawn:
                logger.debug(
                    "Skipping parallel edge %d-%d (bend %d) in simple graph",
                    placement.frm, placement.to, placement.bend,
                )
                continue
            self.draw_edge(placement)

        for i, name in enumerate(self.graph.vertices):
            if is_invisible(name):
                continue
            self.draw_vertex(i)
        return ctx.ops

    def _check_edges(self) -> None:
        vertices = self.graph.vertices
        for frm, to in self.graph.edges:
            if not (0 <= frm < len(vertices) and 0 <= to < len(vertices)):
                raise UnexpectedRenderError(f"Undefined vertex in edge ({frm}, {to})")
            if is_invisible(vertices[frm]) or is_invisible(vertices[to]):
                raise InvisibleVertexEdgeError(
                    f"Edges may not connect to invisible vertices "
                    f"({vertices[frm]}, {vertices[to]})"
                )

    def vertex_position(self, i: int) -> Tuple[float, float, float]:
        """Return ``(x, y, angle)`` of vertex ``i`` relative to the layout center."""
        count = len(self.graph.vertices)
        # Rotates the polygon so that a corner, not a side, sits at the top.
        corner_angle = math.pi * (2 - count) / count / 2
        angle = 2 * math.pi * i / count - corner_angle
        x, y = polar(angle, self.settings.big_radius)
        return x, y, angle

    def layout_center(self) -> Point:
        cx = self.surface.width / 2
        cy = self.surface.height / 2
        if len(self.graph.vertices) % 2 == 1:
            cy += (self.settings.big_radius - self.vertex_position(0)[1]) / 2
        return cx, cy

    def _to_surface(self, p: Point) -> Point:
        return p[0] + self.center[0], p[1] + self.center[1]

    def draw_vertex(self, i: int) -> None:
        s = self.settings
        x, y, _ = self.vertex_position(i)
        px, py = self._to_surface((x, y))
        self.ctx.fill_circle((px, py), s.vertex_radius, s.vertex_color)
        self.ctx.text(
            (px + s.vertex_radius, py - s.vertex_radius),
            self.graph.vertices[i],
            s.vertex_color,
            LABEL_FONT_SIZE,
        )

    def draw_edge(self, placement: EdgePlacement) -> None:
        s = self.settings
        i, j = placement.frm, placement.to
        start = self.vertex_position(i)[:2]
        end = self.vertex_position(j)[:2]
        loop = i == j

        d = bend_displacement(placement.bend, s.bendiness, loop=loop)
        edge_angle = math.atan2(end[1] - start[1], end[0] - start[0])
        tx, ty = polar(edge_angle + math.pi / 2, 1.0)
        mx, my = midpoint(start, end)
        bent = (mx + tx * d, my + ty * d)

        circle = None
        if loop and d != 0:
            # Three coincident points admit no unique circle.
            cx, cy = midpoint(start, bent)
            circle = (cx, cy, math.hypot(start[0] - bent[0], start[1] - bent[1]) / 2)
        elif d != 0:
            try:
                circle = find_circle(start, end, bent)
            except ValueError:
                logger.debug(
                    "Bend %d of edge %d-%d is too shallow for an arc, drawing a line",
                    placement.bend, i, j,
                )

        if circle is None:
            self.ctx.line(self._to_surface(start), self._to_surface(end), s.edge_thickness, s.edge_color)
        else:
            cx, cy, r = circle
            start_angle = math.atan2(start[1] - cy, start[0] - cx)
            end_angle = math.atan2(end[1] - cy, end[0] - cx)
            if d > 0:
                arc_from, arc_to = end_angle, start_angle
            else:
                arc_from, arc_to = start_angle, end_angle
            self.ctx.arc(
                self._to_surface((cx, cy)), r, arc_from, arc_to, s.edge_thickness, s.edge_color
            )

        if self.graph.flags.directed:
            self.draw_arrow(bent, edge_angle + (math.pi if placement.reverse else 0.0))

    def draw_arrow(self, tip_center: Point, angle: float) -> None:
        points = []
        for k in range(3):
            px, py = polar(k / 3 * 2 * math.pi + angle, self.settings.arrow_size)
            points.append(self._to_surface((tip_center[0] + px, tip_center[1] + py)))
        self.ctx.fill_polygon(points, self.settings.edge_color)


@debug_log_call(logger, log_result=False)
def render(graph: GraphModel, settings: RenderSettings, surface: Surface) -> List[DrawOp]:
    """Draw ``graph`` onto ``surface`` and return the recorded draw operations.

    Raises a :class:`~kale_graph.errors.RenderError` subclass on failure; no
    operations are returned in that case.
    """
    return GraphRenderer(graph, settings, surface).draw()
