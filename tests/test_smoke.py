from kale_graph import RenderSettings, Surface, parse_source, print_graph, render
from kale_graph.surface import ArcOp, CircleOp, LineOp, PolygonOp
from kale_graph.tikz_codegen import generate_tikz_document


def test_multigraph_smoke():
    text = '''
-d
// a directed multigraph with a loop and a hidden spacer
a, b, c, _spacer
(a,b), (b,a), (a,b)
c-c
b-c
'''
    graph = parse_source(text)
    ops = render(graph, RenderSettings(), Surface(700, 350))

    assert len([op for op in ops if isinstance(op, (LineOp, ArcOp))]) == 5
    assert len([op for op in ops if isinstance(op, PolygonOp)]) == 5
    assert len([op for op in ops if isinstance(op, CircleOp)]) == 3
    assert print_graph(graph) == '-d\na, b, c, _spacer\n(a,b), (b,a), (a,b), (c,c), (b,c)\n'

    document = generate_tikz_document(ops, 700, 350)
    assert 'arc[' in document
