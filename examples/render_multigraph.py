"""Example pipeline: parse a kale graph, render it and write a TikZ document."""

from pathlib import Path

from kale_graph import RenderSettings, Surface, parse_source, render
from kale_graph.tikz_codegen import generate_tikz_document

TEXT = """
-d
a, b, c, d
(a,b), (b,a), (a,b)
b-c-d-a
d-d
"""


def main() -> None:
    graph = parse_source(TEXT)
    settings = RenderSettings(background_color="#ffffff", vertex_color="#000000", edge_color="#333333")
    ops = render(graph, settings, Surface(400, 360))
    print(f"{len(graph.vertices)} vertices, {len(graph.edges)} edges, {len(ops)} draw operations")
    out = Path("multigraph.tex")
    out.write_text(generate_tikz_document(ops, 400, 360, title="Directed multigraph"), encoding="utf-8")
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
