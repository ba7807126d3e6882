"""TikZ output for recorded draw operations.

Draw operations use screen coordinates (y down, clockwise angles); TikZ uses
y up and counter-clockwise angles, so every coordinate is mirrored about the
surface height and every angle negated. One surface pixel maps to one pt.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..surface import ArcOp, CircleOp, DrawOp, LineOp, PolygonOp, RectOp, TextOp
from .utils import format_float, hex_color, is_named_color, latex_escape

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{xcolor}
\usepackage{tikz}
\begin{document}
%s%s
\end{document}
"""


class _ColorTable:
    def __init__(self) -> None:
        self.names: Dict[str, str] = {}
        self.definitions: List[str] = []

    def ref(self, color: str) -> str:
        if color in self.names:
            return self.names[color]
        hex_value = hex_color(color)
        if hex_value is not None:
            name = f"kgcolor{len(self.definitions)}"
            self.definitions.append(f"  \\definecolor{{{name}}}{{HTML}}{{{hex_value}}}")
        elif is_named_color(color):
            name = color.strip()
        else:
            raise ValueError(f"Cannot express color {color!r} in TikZ")
        self.names[color] = name
        return name


def _pt(point: Tuple[float, float], height: float) -> str:
    return f"({format_float(point[0])}, {format_float(height - point[1])})"


def _emit_op(op: DrawOp, height: float, colors: _ColorTable) -> str:
    if isinstance(op, RectOp):
        (x, y), (w, h) = op.origin, op.size
        return "\\fill[{c}] {a} rectangle {b};".format(
            c=colors.ref(op.fill), a=_pt((x, y), height), b=_pt((x + w, y + h), height)
        )
    if isinstance(op, LineOp):
        return "\\draw[{c}, line width={w}pt] {a} -- {b};".format(
            c=colors.ref(op.color), w=format_float(op.width),
            a=_pt(op.p1, height), b=_pt(op.p2, height),
        )
    if isinstance(op, ArcOp):
        start_deg = -math.degrees(op.start)
        end_deg = -math.degrees(op.start + op.sweep)
        return (
            "\\draw[{c}, line width={w}pt] {p} arc[start angle={s}, end angle={e}, radius={r}];"
        ).format(
            c=colors.ref(op.color), w=format_float(op.width), p=_pt(op.point_at(op.start), height),
            s=format_float(start_deg), e=format_float(end_deg), r=format_float(op.radius),
        )
    if isinstance(op, CircleOp):
        return "\\fill[{c}] {p} circle[radius={r}];".format(
            c=colors.ref(op.fill), p=_pt(op.center, height), r=format_float(op.radius)
        )
    if isinstance(op, PolygonOp):
        path = " -- ".join(_pt(p, height) for p in op.points)
        return f"\\fill[{colors.ref(op.fill)}] {path} -- cycle;"
    if isinstance(op, TextOp):
        size = format_float(op.size)
        return (
            "\\node[anchor=base west, inner sep=0pt, text={c}, "
            "font=\\fontsize{{{s}pt}}{{{s}pt}}\\selectfont] at {p} {{{t}}};"
        ).format(c=colors.ref(op.color), s=size, p=_pt(op.position, height), t=latex_escape(op.text))
    raise TypeError(f"unsupported draw operation {type(op).__name__}")


def generate_tikz_code(ops: Sequence[DrawOp], width: float, height: float) -> str:
    """Return a ``tikzpicture`` reproducing ``ops`` on a ``width`` x ``height`` surface."""
    colors = _ColorTable()
    body = [_emit_op(op, height, colors) for op in ops]
    lines: List[str] = ["\\begin{tikzpicture}[x=1pt, y=1pt]"]
    lines.extend(colors.definitions)
    # Fixes the bounding box to the surface even when nothing fills it.
    lines.append(
        f"  \\useasboundingbox (0, 0) rectangle ({format_float(width)}, {format_float(height)});"
    )
    lines.extend("  " + entry for entry in body)
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def standalone_document(pictures: Sequence[str], *, title: Optional[str] = None) -> str:
    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_escape(title.strip()) + "}\\par\\vspace{4pt}\n"
    return standalone_tpl % (header, "\n\\quad\n".join(pictures))


def generate_tikz_document(
    ops: Sequence[DrawOp],
    width: float,
    height: float,
    *,
    title: Optional[str] = None,
) -> str:
    """Render a standalone LaTeX document holding a single graph."""
    return standalone_document([generate_tikz_code(ops, width, height)], title=title)
