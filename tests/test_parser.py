import dataclasses

import pytest

from kale_graph import parse_source
from kale_graph.errors import InvalidLineError, ParseError, UndefinedVertexError
from kale_graph.lexer import LineKind, classify_line, preprocess
from kale_graph.model import Flags
from kale_graph.parser import parse_flags


def test_vertex_list_keeps_declared_order():
    graph = parse_source("a,b,c,d,e,f,g")

    assert graph.vertices == ('a', 'b', 'c', 'd', 'e', 'f', 'g')
    assert graph.edges == ()
    assert graph.flags == Flags()


def test_edge_list_produces_edges_in_order():
    graph = parse_source("a,b,c\n(a,b),(b,c),(c,a)")

    assert graph.edges == ((0, 1), (1, 2), (2, 0))


def test_path_produces_consecutive_edges():
    graph = parse_source("a,b,c,d,e,f\nb-a-f-c-d-e")

    assert graph.edge_names() == [('b', 'a'), ('a', 'f'), ('f', 'c'), ('c', 'd'), ('d', 'e')]


def test_vertex_lists_do_not_deduplicate():
    graph = parse_source("a, b, a\nc")

    assert graph.vertices == ('a', 'b', 'a', 'c')


def test_edges_reference_first_declared_slot():
    graph = parse_source("a,b,a\n(a,b)")

    assert graph.edges == ((0, 1),)


def test_edge_groups_without_commas_and_spacing():
    graph = parse_source("a,b\n( a , b )( b,a ) ,(a,a)")

    assert graph.edges == ((0, 1), (1, 0), (0, 0))


def test_trailing_comma_in_vertex_list():
    graph = parse_source("a, b,")

    assert graph.vertices == ('a', 'b')


def test_comments_and_blank_lines_are_ignored():
    text = """
    // a triangle
    a,b,c   // vertices

    a-b-c-a
    """
    graph = parse_source(text)

    assert graph.vertices == ('a', 'b', 'c')
    assert graph.edges == ((0, 1), (1, 2), (2, 0))


@pytest.mark.parametrize(
    'text, where',
    [("a,b\n(a,c)", 'edge'), ("a,b\na-b-c", 'path')],
)
def test_undefined_vertex_without_auto(text, where):
    with pytest.raises(UndefinedVertexError) as exc:
        parse_source(text)

    assert exc.value.line == 2
    assert f"undefined vertex 'c' in {where}" in str(exc.value)
    assert str(exc.value).startswith('[line 2]')


def test_auto_declares_vertices_on_first_reference():
    graph = parse_source("-a\na,b\n(a,c),(c,d)\nd-e-a")

    assert graph.flags.auto
    assert graph.vertices == ('a', 'b', 'c', 'd', 'e')
    assert graph.edge_names() == [('a', 'c'), ('c', 'd'), ('d', 'e'), ('e', 'a')]


def test_invalid_line_reports_line_number():
    with pytest.raises(InvalidLineError) as exc:
        parse_source("a,b\n\n// skipped\na b ?")

    # Blank and comment-only lines are not counted.
    assert exc.value.line == 2
    assert 'invalid input' in str(exc.value)


def test_flags_only_on_first_line():
    with pytest.raises(InvalidLineError):
        parse_source("a,b\n-d")


def test_flags_line_parses_all_toggles():
    graph = parse_source("-dsafxyz\na")

    assert graph.flags == Flags(directed=True, simple=True, auto=True, flipped=True)


def test_parse_flags_ignores_unknown_letters():
    assert parse_flags('dq') == Flags(directed=True)
    assert parse_flags('') == Flags()


def test_invisible_vertices_parse_and_keep_their_slot():
    graph = parse_source("a,_hidden,b\n(a,b),(a,_hidden)")

    assert graph.vertices == ('a', '_hidden', 'b')
    assert graph.visible_vertices == ['a', 'b']
    assert graph.edges == ((0, 2), (0, 1))


def test_parse_errors_are_user_errors():
    with pytest.raises(ParseError) as exc:
        parse_source("a,b\n(a,z)")

    assert exc.value.stage == 'parse'
    assert not exc.value.unexpected


def test_empty_source_gives_empty_graph():
    graph = parse_source("\n  // nothing here\n")

    assert graph.vertices == ()
    assert graph.edges == ()


@pytest.mark.parametrize(
    'line, first, kind',
    [
        ('-d', True, LineKind.FLAGS),
        ('-d', False, None),
        ('0 1 1', False, LineKind.MATRIX),
        ('011', False, LineKind.MATRIX),
        ('(a,b),(b,c)', False, LineKind.EDGES),
        ('a', False, LineKind.VERTICES),
        ('a, b, c', False, LineKind.VERTICES),
        ('a-b', False, LineKind.PATH),
        ('a - b - c', False, LineKind.PATH),
        ('a-', False, None),
        ('(a,b', False, None),
    ],
)
def test_classify_line(line, first, kind):
    assert classify_line(line, first=first) is kind


def test_preprocess_strips_comments_and_whitespace():
    assert preprocess("  a,b // c\n\n//x\n\t(a,b)  \n") == ['a,b', '(a,b)']


def test_parsed_model_is_immutable():
    graph = parse_source("a,b\na-b")

    with pytest.raises(dataclasses.FrozenInstanceError):
        graph.edges = ()
    assert isinstance(graph.vertices, tuple)
    assert isinstance(graph.edges, tuple)
