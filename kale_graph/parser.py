import logging
from typing import Dict, List

from .errors import InvalidLineError, MatrixFormatConflictError, UndefinedVertexError
from .lexer import FLAG_PREFIX, LineKind, classify_line, edge_pairs, names, preprocess
from .logging_utils import debug_log_call
from .matrix import build_matrix, matrix_edges, read_matrix_row
from .model import Edge, Flags, GraphModel, Vertex, visible_offsets

logger = logging.getLogger(__name__)

FLAG_LETTERS = {
    'd': 'directed',
    's': 'simple',
    'a': 'auto',
    'f': 'flipped',
}

_MATRIX_CONFLICT = 'adjacency matrix cannot be combined with other edge definitions'


def parse_flags(text: str) -> Flags:
    """Read flag letters (without the prefix); unknown letters are ignored."""
    toggles: Dict[str, bool] = {}
    for ch in text:
        attr = FLAG_LETTERS.get(ch)
        if attr:
            toggles[attr] = True
    return Flags(**toggles)


class _GraphBuilder:
    def __init__(self) -> None:
        self.flags = Flags()
        self.vertices: List[Vertex] = []
        self.edges: List[Edge] = []
        self.matrix_rows: List[List[int]] = []

    def resolve(self, name: Vertex, line_no: int, where: str) -> int:
        try:
            return self.vertices.index(name)
        except ValueError:
            pass
        if not self.flags.auto:
            raise UndefinedVertexError(f'undefined vertex {name!r} in {where}', line=line_no)
        self.vertices.append(name)
        return len(self.vertices) - 1

    def add_line(self, kind: LineKind, line: str, line_no: int) -> None:
        if self.matrix_rows and kind is not LineKind.MATRIX:
            raise MatrixFormatConflictError(_MATRIX_CONFLICT, line=line_no)

        if kind is LineKind.FLAGS:
            self.flags = parse_flags(line[len(FLAG_PREFIX):])
        elif kind is LineKind.MATRIX:
            if not self.matrix_rows and self.edges:
                raise MatrixFormatConflictError(_MATRIX_CONFLICT, line=line_no)
            self.matrix_rows.append(read_matrix_row(line, line_no))
        elif kind is LineKind.EDGES:
            for a, b in edge_pairs(line):
                frm = self.resolve(a, line_no, 'edge')
                to = self.resolve(b, line_no, 'edge')
                self.edges.append((frm, to))
        elif kind is LineKind.VERTICES:
            self.vertices.extend(names(line))
        elif kind is LineKind.PATH:
            chain = [self.resolve(name, line_no, 'path') for name in names(line)]
            self.edges.extend(zip(chain, chain[1:]))

    def build(self) -> GraphModel:
        edges = list(self.edges)
        if self.matrix_rows:
            offsets = visible_offsets(self.vertices)
            matrix = build_matrix(self.matrix_rows, len(offsets))
            edges.extend(matrix_edges(matrix, self.flags, offsets))
        return GraphModel(flags=self.flags, vertices=list(self.vertices), edges=edges)


@debug_log_call(logger)
def parse_source(text: str) -> GraphModel:
    """Parse kale source text into a :class:`GraphModel`.

    Raises a :class:`~kale_graph.errors.ParseError` subclass on malformed input.
    """
    builder = _GraphBuilder()
    for i, line in enumerate(preprocess(text), start=1):
        kind = classify_line(line, first=(i == 1))
        if kind is None:
            if builder.matrix_rows:
                raise MatrixFormatConflictError(_MATRIX_CONFLICT, line=i)
            raise InvalidLineError('invalid input', line=i)
        builder.add_line(kind, line, i)
    return builder.build()
